"""Write-side persistence for departments and courses.

`Store` is an explicit handle on one database alias. The import command
opens it, drives schema setup and row inserts through it, and closes it
when done; nothing here keeps process-wide connection state.
"""
from __future__ import annotations

import logging
from typing import Any, Iterable

from django.core.exceptions import ValidationError
from django.core.management import call_command
from django.core.management.base import CommandError
from django.db import DEFAULT_DB_ALIAS, DatabaseError, connections, models, transaction
from django.utils import timezone

from .models import Course, Department

logger = logging.getLogger(__name__)


class Store:
    def __init__(self, using: str = DEFAULT_DB_ALIAS) -> None:
        self.using = using

    @property
    def connection(self):
        return connections[self.using]

    def open(self) -> None:
        self.connection.ensure_connection()

    def close(self) -> None:
        self.connection.close()

    def _migrate(self, *target: str) -> bool:
        try:
            call_command("migrate", "courses", *target, database=self.using, interactive=False, verbosity=0)
        except (CommandError, DatabaseError) as exc:
            logger.error("unable to migrate courses schema %s: %s", target or "(latest)", exc)
            return False
        return True

    def drop_schema(self) -> bool:
        """Remove the department and course tables."""
        return self._migrate("zero")

    def create_schema(self) -> bool:
        """Create the department and course tables."""
        return self._migrate()

    def insert_department(self, department) -> int | None:
        """Insert a department and return its id, or None if the row is rejected."""
        row = Department(title=department.title, slug=department.slug, description=department.description)
        return self._insert(row, "department")

    def insert_course(self, course, department_id: int) -> int | None:
        """Insert a course under `department_id` and return its id, or None."""
        row = Course(
            department_id=department_id,
            course_id=course.course_id,
            title=course.title,
            units=course.units,
            semester=course.semester,
            level=course.level,
            url=course.url,
        )
        return self._insert(row, "course")

    def _insert(self, row: models.Model, label: str) -> int | None:
        # Foreign keys are validated on the database the row is written to
        row._state.db = self.using
        try:
            row.full_clean(validate_unique=False)
            with transaction.atomic(using=self.using):
                row.save(using=self.using)
        except ValidationError as exc:
            logger.debug("invalid %s %s: %s", label, row, exc.messages)
            return None
        except DatabaseError as exc:
            logger.debug("unable to insert %s %s: %s", label, row, exc)
            return None
        return row.pk


def conditional_update(
    model: type[models.Model],
    pk: Any,
    fields: Iterable[str | None],
    values: Iterable[Any],
    using: str = DEFAULT_DB_ALIAS,
) -> models.Model | None:
    """Update only the columns that were given a value.

    `fields` and `values` are parallel; a pair where either side is None
    is skipped. Returns the refreshed row, or None when there was nothing
    to update or the row does not exist.
    """
    changes = {field: value for field, value in zip(fields, values) if field is not None and value is not None}
    if not changes:
        return None
    changes["updated"] = timezone.now()

    manager = model._default_manager.using(using)
    if not manager.filter(pk=pk).update(**changes):
        return None
    return manager.get(pk=pk)
