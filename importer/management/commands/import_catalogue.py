"""Rebuild the catalogue tables from the JSON manifest and CSV course lists."""
from __future__ import annotations

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from courses.store import Store
from importer.services import SchemaSetupError, run_import


class Command(BaseCommand):
    help = "Drop and recreate the catalogue schema, then import departments and courses."

    def add_arguments(self, parser):
        parser.add_argument("--data-dir", default=str(settings.IMPORT_DATA_DIR), help="directory holding the manifest and CSV files")
        parser.add_argument("--manifest", default=settings.IMPORT_MANIFEST, help="manifest file name inside the data directory")
        parser.add_argument("--encoding", default=settings.IMPORT_CSV_ENCODING, help="text encoding of the CSV files")
        parser.add_argument("--database", default="default", help="database alias to import into")

    def handle(self, *args, **options):
        store = Store(using=options["database"])
        try:
            results = run_import(
                store,
                data_dir=options["data_dir"],
                manifest=options["manifest"],
                encoding=options["encoding"],
            )
        except SchemaSetupError as exc:
            raise CommandError(str(exc)) from exc
        except OSError as exc:
            raise CommandError(f"unable to read manifest: {exc}") from exc

        for result in results:
            self.stdout.write(result.summary)
        self.stdout.write(self.style.SUCCESS(f"Imported {len(results)} departments."))
