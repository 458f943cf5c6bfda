"""User model with unique email and soft deactivation.

Rules implemented here:
- Email must be unique across all users (UNIQUE constraint on the column).
- Age is optional and bounded to 1..150.
- Soft delete is expressed by ``is_active=False``; the row is kept.
"""

from __future__ import annotations

from django.core.validators import MaxValueValidator, MinLengthValidator, MinValueValidator
from django.db import models

from modules.core.models import BaseModel


class User(BaseModel):
    """User record.

    ``unique=True`` on ``email`` is the final guard against two concurrent
    creates with the same address slipping past the service pre-check.
    """

    name = models.CharField(max_length=100, validators=[MinLengthValidator(2)])
    email = models.EmailField(max_length=150, unique=True)
    age = models.PositiveSmallIntegerField(
        null=True,
        blank=True,
        default=None,
        validators=[MinValueValidator(1), MaxValueValidator(150)],
    )
    is_active = models.BooleanField(default=True)

    class Meta:
        db_table = "users"
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["-created_at"], name="users_created_idx"),
            models.Index(fields=["is_active"], name="users_active_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"
