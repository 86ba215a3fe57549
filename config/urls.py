"""URL routing for the catalogue API.

The REST resources live at the root (`/departments/...`); the admin and
the OpenAPI documentation sit beside them.
"""
from django.contrib import admin
from django.urls import include, path


urlpatterns = [
    path("admin/", admin.site.urls),
    path("", include("api.urls")),
]
