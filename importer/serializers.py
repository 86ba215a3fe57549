"""Schema for entries of the import manifest."""
from __future__ import annotations

from rest_framework import serializers


class ManifestEntrySerializer(serializers.Serializer):
    """One department in `index.json`; unknown keys are ignored."""

    title = serializers.CharField(trim_whitespace=False)
    description = serializers.CharField(trim_whitespace=False)
    csv = serializers.CharField(trim_whitespace=False)
