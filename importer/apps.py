from django.apps import AppConfig


class ImporterConfig(AppConfig):
    """App configuration for the catalogue import pipeline."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "importer"
