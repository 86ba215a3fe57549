"""REST endpoints for departments and their courses."""
from __future__ import annotations

from rest_framework import viewsets
from rest_framework.decorators import api_view
from rest_framework.exceptions import APIException
from rest_framework.generics import get_object_or_404
from rest_framework.response import Response
from slugify import slugify

from courses.models import Course, Department
from courses.store import conditional_update
from .serializers import CourseSerializer, DepartmentDetailSerializer, DepartmentSerializer

ROUTES = [
    {"href": "/departments", "methods": ["GET", "POST"]},
    {"href": "/departments/:slug", "methods": ["GET", "PATCH", "DELETE"]},
    {"href": "/departments/:slug/courses", "methods": ["GET", "POST"]},
    {"href": "/departments/:slug/courses/:courseId", "methods": ["GET", "PATCH", "DELETE"]},
]


@api_view(["GET"])
def index(request):
    """List the available resources and the methods they accept."""
    return Response(ROUTES)


class DepartmentViewSet(viewsets.ModelViewSet):
    queryset = Department.objects.all()
    lookup_field = "slug"
    http_method_names = ["get", "post", "patch", "delete", "head", "options"]
    search_fields = ["title", "description"]
    ordering_fields = ["title", "created", "updated"]

    def get_queryset(self):
        if self.action == "retrieve":
            return Department.objects.prefetch_related("courses")
        return super().get_queryset()

    def get_serializer_class(self):
        if self.action == "retrieve":
            return DepartmentDetailSerializer
        return DepartmentSerializer

    def perform_create(self, serializer):
        serializer.save(slug=slugify(serializer.validated_data["title"]))

    def partial_update(self, request, *args, **kwargs):
        department = self.get_object()
        serializer = self.get_serializer(department, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        title = serializer.validated_data.get("title") or None
        description = serializer.validated_data.get("description") or None
        updated = conditional_update(
            Department,
            department.pk,
            ["title" if title else None, "slug" if title else None, "description" if description else None],
            [title, slugify(title) if title else None, description],
        )
        if updated is None:
            raise APIException("unable to update department")
        return Response(self.get_serializer(updated).data)


class CourseViewSet(viewsets.ModelViewSet):
    """Courses nested under `/departments/<slug>/courses`.

    The department is resolved before anything else so an unknown slug
    is a 404 regardless of the request body.
    """

    serializer_class = CourseSerializer
    lookup_field = "course_id"
    http_method_names = ["get", "post", "patch", "delete", "head", "options"]
    filterset_fields = ["semester", "level"]
    search_fields = ["title", "course_id"]
    ordering_fields = ["course_id", "title", "units"]

    def initial(self, request, *args, **kwargs):
        super().initial(request, *args, **kwargs)
        self.department = get_object_or_404(Department, slug=kwargs["slug"])

    def get_queryset(self):
        if getattr(self, "swagger_fake_view", False):
            return Course.objects.none()
        return Course.objects.filter(department=self.department)

    def perform_create(self, serializer):
        serializer.save(department=self.department)

    def partial_update(self, request, *args, **kwargs):
        course = self.get_object()
        serializer = self.get_serializer(course, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        fields, values = [], []
        for field, value in serializer.validated_data.items():
            if value not in (None, ""):
                fields.append(field)
                values.append(value)
        updated = conditional_update(Course, course.pk, fields, values)
        if updated is None:
            raise APIException("unable to update course")
        return Response(self.get_serializer(updated).data)
