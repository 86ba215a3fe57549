"""Catalogue import: rebuild the schema and load departments and courses.

The run is strictly sequential. Schema setup failures abort it; any
later failure only costs the affected department or course.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from django.conf import settings

from courses.store import Store

from .parse import DepartmentImport, parse_csv, parse_json

logger = logging.getLogger(__name__)


class SchemaSetupError(Exception):
    """The schema could not be dropped or created; nothing was imported."""


@dataclass
class DepartmentResult:
    title: str
    slug: str
    valid_inserts: int = 0
    invalid_inserts: int = 0

    @property
    def summary(self) -> str:
        return (
            f"Created department {self.title} with {self.valid_inserts} courses "
            f"and {self.invalid_inserts} invalid courses."
        )


def import_department(store: Store, item: DepartmentImport, data_dir: Path, encoding: str) -> DepartmentResult | None:
    """Insert one department and its courses; None if the department was skipped."""
    try:
        data = (data_dir / item.csv).read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("unable to read %s for department %s: %s", item.csv, item.title, exc)
        return None
    courses = parse_csv(data)

    department_id = store.insert_department(item)
    if department_id is None:
        logger.error("unable to insert department %s", item)
        return None

    result = DepartmentResult(title=item.title, slug=item.slug)
    for course in courses:
        if store.insert_course(course, department_id) is not None:
            result.valid_inserts += 1
        else:
            result.invalid_inserts += 1
    logger.info(result.summary)
    return result


def run_import(
    store: Store,
    data_dir: Path | str | None = None,
    manifest: str | None = None,
    encoding: str | None = None,
) -> list[DepartmentResult]:
    """Drop and recreate the schema, then import every department in the manifest.

    Raises `SchemaSetupError` if the schema cannot be dropped or created.
    The store is closed on every path.
    """
    data_dir = Path(data_dir or settings.IMPORT_DATA_DIR)
    manifest = manifest or settings.IMPORT_MANIFEST
    encoding = encoding or settings.IMPORT_CSV_ENCODING

    results: list[DepartmentResult] = []
    try:
        store.open()
        if not store.drop_schema():
            raise SchemaSetupError("schema not dropped, exiting")
        logger.info("schema dropped")

        if not store.create_schema():
            raise SchemaSetupError("schema not created, exiting")
        logger.info("schema created")

        # Invalid UTF-8 is replaced with U+FFFD, not fatal
        index = (data_dir / manifest).read_text(encoding="utf-8", errors="replace")
        for item in parse_json(index):
            result = import_department(store, item, data_dir, encoding)
            if result is not None:
                results.append(result)
    finally:
        store.close()

    return results
