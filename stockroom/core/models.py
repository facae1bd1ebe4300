# core/models.py
import uuid
from django.db import models


class BaseModel(models.Model):
    """
    Abstract base model with the identity and timestamp fields every
    stored record carries.

    Fields:
        id (UUID): Unique identifier (primary key), assigned on creation
        created_at (DateTime): Auto-set on creation
        updated_at (DateTime): Auto-updated on modification
    """

    id = models.UUIDField(
        default=uuid.uuid4,
        primary_key=True,
        editable=False,
        verbose_name="ID"
    )
    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name="Created At"
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        verbose_name="Updated At"
    )

    class Meta:
        abstract = True
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"{self.__class__.__name__} - {self.id}"
