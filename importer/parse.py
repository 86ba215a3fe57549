"""Parsers for the catalogue import files.

The manifest (`index.json`) lists departments and names a CSV file for
each; every CSV line describes one course. Both parsers are pure and
tolerant: malformed input yields fewer records, never an exception.
"""
from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass
from urllib.parse import urlsplit, urlunsplit

from django.core.exceptions import ValidationError
from django.core.validators import URLValidator
from slugify import slugify

from courses.models import Semester, value_to_semester

from .serializers import ManifestEntrySerializer

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = ";"
CSV_FIELDS = 6

_url_validator = URLValidator()


@dataclass(frozen=True)
class DepartmentImport:
    title: str
    slug: str
    description: str
    csv: str


@dataclass(frozen=True)
class CourseImport:
    course_id: str
    title: str
    units: float | None
    semester: Semester
    level: str | None
    url: str | None


def parse_json(data) -> list[DepartmentImport]:
    """Parse the import manifest into department descriptors.

    Returns an empty list if `data` is not valid JSON or not a JSON
    array. Entries missing a title, description or csv file name are
    skipped.
    """
    try:
        parsed = json.loads(data)
    except (TypeError, ValueError) as exc:
        logger.error("error parsing JSON: %s", exc)
        return []

    if not isinstance(parsed, list):
        return []

    items: list[DepartmentImport] = []
    for entry in parsed:
        serializer = ManifestEntrySerializer(data=entry)
        if not serializer.is_valid():
            logger.warning("missing required properties in JSON")
            continue
        title = serializer.validated_data["title"]
        items.append(
            DepartmentImport(
                title=title,
                slug=slugify(title),
                description=serializer.validated_data["description"],
                csv=serializer.validated_data["csv"],
            )
        )
    return items


def _format_number(value: float) -> str:
    # Integral values print without a fraction: 8.0 -> "8"
    if value.is_integer():
        return str(int(value))
    return repr(value)


def parse_units(raw: str | None) -> float | None:
    """Parse a unit count written with `,` as the decimal separator.

    `.` is a thousands separator in the source files, so a raw value
    containing one is rejected outright, as is anything that does not
    survive a parse/format round trip ("07", "8 ECTS", "1e3").
    """
    raw = raw or ""
    formatted = raw.replace(".", "").replace(",", ".", 1)
    if "." in raw:
        return None
    try:
        units = float(formatted)
    except ValueError:
        return None
    if not math.isfinite(units) or _format_number(units) != formatted:
        return None
    return units


def parse_url(raw: str | None) -> str | None:
    """Return `raw` as a normalised absolute URL, or None."""
    value = (raw or "").strip()
    try:
        _url_validator(value)
    except ValidationError:
        return None
    parts = urlsplit(value)
    return urlunsplit((parts.scheme.lower(), parts.netloc.lower(), parts.path or "/", parts.query, parts.fragment))


def parse_line(line: str) -> CourseImport | None:
    """Parse one `id;title;units;semester;level;url` line.

    Returns None when the course id, title or semester is missing or
    unusable; the other fields fall back to None individually.
    """
    fields = line.rstrip("\r").split(FIELD_SEPARATOR)
    fields += [None] * (CSV_FIELDS - len(fields))
    course_id, title, raw_units, raw_semester, raw_level, raw_url = fields[:CSV_FIELDS]

    semester = value_to_semester(raw_semester)
    if not course_id or not title or not semester:
        return None

    return CourseImport(
        course_id=course_id,
        title=title,
        units=parse_units(raw_units),
        semester=semester,
        level=raw_level or None,
        url=parse_url(raw_url),
    )


def parse_csv(data: str | None) -> list[CourseImport]:
    """Parse a course list; the first line is a header and is skipped."""
    if not data:
        return []

    courses = []
    for line in data.split("\n")[1:]:
        parsed = parse_line(line)
        if parsed:
            courses.append(parsed)
    return courses
