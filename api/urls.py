"""API routes.

Resources are served without trailing slashes; the OpenAPI schema and
interactive documentation keep drf-spectacular's default paths.
"""
from django.urls import include, path
from rest_framework.routers import SimpleRouter
from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularSwaggerView,
    SpectacularRedocView,
)

from .views import CourseViewSet, DepartmentViewSet, index

router = SimpleRouter(trailing_slash=False)
router.register(r"departments", DepartmentViewSet, basename="departments")

course_list = CourseViewSet.as_view({"get": "list", "post": "create"})
course_detail = CourseViewSet.as_view({"get": "retrieve", "patch": "partial_update", "delete": "destroy"})

urlpatterns = [
    path("", index, name="index"),
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path("docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
    path("redoc/", SpectacularRedocView.as_view(url_name="schema"), name="redoc"),
    path("departments/<slug:slug>/courses", course_list, name="department-courses"),
    path("departments/<slug:slug>/courses/<str:course_id>", course_detail, name="department-course"),
    path("", include(router.urls)),
]
