"""Serializers for the catalogue REST API.

They validate and sanitise request bodies and shape rows into the
public JSON representation (`courseId`, `_links`, absent values left
out).
"""
from __future__ import annotations

from django.utils.html import strip_tags
from rest_framework import serializers
from rest_framework.validators import UniqueValidator
from slugify import slugify

from courses.models import Course, Department, Semester

UNITS_MESSAGE = "units must be a number between 0.5 and 100"
SEMESTER_MESSAGE = f"semester must be one of: {', '.join(Semester.values)}"


class SanitizedCharField(serializers.CharField):
    """Text with HTML tags removed and surrounding whitespace trimmed."""

    def to_internal_value(self, data):
        value = strip_tags(super().to_internal_value(data)).strip()
        # Markup-only input is blank once cleaned
        if not value and not self.allow_blank:
            self.fail("blank")
        return value


def require_one_of(attrs: dict, fields: list[str]) -> None:
    if not any(attrs.get(field) not in (None, "") for field in fields):
        raise serializers.ValidationError(f"require at least one value of: {', '.join(fields)}")


class CourseSerializer(serializers.ModelSerializer):
    courseId = SanitizedCharField(
        source="course_id",
        max_length=16,
        validators=[UniqueValidator(queryset=Course.objects.all(), message="course with courseId already exists")],
    )
    title = SanitizedCharField(
        max_length=64,
        validators=[UniqueValidator(queryset=Course.objects.all(), message="course with title already exists")],
    )
    units = serializers.FloatField(
        min_value=0.5,
        max_value=100,
        error_messages={"invalid": UNITS_MESSAGE, "min_value": UNITS_MESSAGE, "max_value": UNITS_MESSAGE},
    )
    semester = serializers.ChoiceField(choices=Semester.choices, error_messages={"invalid_choice": SEMESTER_MESSAGE})
    level = SanitizedCharField(max_length=128, required=False, allow_blank=True, allow_null=True)
    url = serializers.URLField(max_length=256, required=False, allow_blank=True, allow_null=True)

    class Meta:
        model = Course
        fields = ("id", "courseId", "title", "units", "semester", "level", "url")

    def validate(self, attrs):
        if self.partial:
            require_one_of(attrs, ["course_id", "title", "level", "url", "semester", "units"])
        for field in ("level", "url"):
            if attrs.get(field) == "":
                attrs[field] = None
        return attrs

    def to_representation(self, instance):
        data = super().to_representation(instance)
        return {key: value for key, value in data.items() if value is not None}


class DepartmentSerializer(serializers.ModelSerializer):
    title = SanitizedCharField(max_length=64)
    description = SanitizedCharField(max_length=1000, required=False, allow_blank=True)

    class Meta:
        model = Department
        fields = ("id", "title", "slug", "description", "created", "updated")
        read_only_fields = ("slug", "created", "updated")

    def validate_title(self, value: str) -> str:
        slug = slugify(value)
        # Transliteration can lengthen a title (þ -> th, æ -> ae)
        if len(slug) > Department._meta.get_field("slug").max_length:
            raise serializers.ValidationError("title is too long to derive a slug")
        existing = Department.objects.filter(slug=slug)
        if self.instance is not None:
            existing = existing.exclude(pk=self.instance.pk)
        if existing.exists():
            raise serializers.ValidationError("department with title already exists")
        return value

    def validate(self, attrs):
        if self.partial:
            require_one_of(attrs, ["title", "description"])
        return attrs

    def to_representation(self, instance):
        data = super().to_representation(instance)
        data["_links"] = {
            "self": {"href": f"/departments/{instance.slug}"},
            "courses": {"href": f"/departments/{instance.slug}/courses"},
        }
        return data


class DepartmentDetailSerializer(DepartmentSerializer):
    """Department with its courses (omitted when there are none)."""

    courses = CourseSerializer(many=True, read_only=True)

    class Meta(DepartmentSerializer.Meta):
        fields = DepartmentSerializer.Meta.fields + ("courses",)

    def to_representation(self, instance):
        data = super().to_representation(instance)
        if not data.get("courses"):
            data.pop("courses", None)
        return data
