"""Departments and their courses.

A `Department` owns many `Course` rows; deleting a department removes
its courses. Titles and slugs are unique so a department can be
addressed by slug and a course by its catalogue id.
"""
from __future__ import annotations

from django.db import models


class Semester(models.TextChoices):
    """Teaching terms used in the catalogue (Icelandic labels)."""

    SPRING = "Vor", "Vor"
    SUMMER = "Sumar", "Sumar"
    AUTUMN = "Haust", "Haust"
    FULL_YEAR = "Heilsárs", "Heilsárs"


def value_to_semester(value) -> Semester | None:
    """Map a raw value to a `Semester`, or None if it is not an exact label.

    No trimming or case folding: `"haust"` and `" Haust"` are not semesters.
    """
    if isinstance(value, str) and value in Semester.values:
        return Semester(value)
    return None


class Department(models.Model):
    title = models.CharField(max_length=64, unique=True)
    slug = models.SlugField(max_length=64, unique=True)
    description = models.TextField(blank=True, default="")
    created = models.DateTimeField(auto_now_add=True)
    updated = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["title"]

    def __str__(self) -> str:  # pragma: no cover
        return f"{self.title}"


class Course(models.Model):
    """A course taught by a department in a given semester."""

    department = models.ForeignKey(Department, on_delete=models.CASCADE, related_name="courses")
    course_id = models.CharField(max_length=16, unique=True)
    title = models.CharField(max_length=64, unique=True)
    units = models.FloatField(null=True, blank=True)
    semester = models.CharField(max_length=16, choices=Semester.choices)
    level = models.CharField(max_length=128, null=True, blank=True)
    url = models.CharField(max_length=256, null=True, blank=True)
    created = models.DateTimeField(auto_now_add=True)
    updated = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["course_id"]

    def __str__(self) -> str:  # pragma: no cover
        return f"{self.course_id} {self.title}"
