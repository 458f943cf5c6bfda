"""User DRF serializer for API output.

Input validation lives in the Pydantic DTOs (``dtos.py``); this serializer
only renders ``User`` rows.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.users.models import User


class UserSerializer(serializers.ModelSerializer):
    """Read serializer for the User resource."""

    class Meta:
        model = User
        fields = [
            "id",
            "name",
            "email",
            "age",
            "is_active",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
