"""Test settings: development defaults plus a second database alias.

The import can target any alias (`import_catalogue --database`), so the
suite keeps one extra SQLite database to exercise that path.
"""
from .dev import *  # noqa

DATABASES = {
    **DATABASES,  # noqa: F405
    "secondary": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db-secondary.sqlite3",  # noqa: F405
    },
}
