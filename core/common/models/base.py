"""
Base models for Palaver application.
"""

import uuid

from django.db import models
from django.utils.translation import gettext_lazy as _


class ObjectHistoryTracker(models.Model):
    """Abstract class for keeping track of creation and changes made to a model object"""

    created_at = models.DateTimeField(
        verbose_name=_("creation date"),
        auto_now_add=True,
    )
    last_modified_at = models.DateTimeField(
        verbose_name=_("last modified date"),
        auto_now=True,
    )

    class Meta:
        abstract = True


class UUIDPrimaryKey(models.Model):
    id = models.UUIDField(
        verbose_name="id",
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text=_("UUID primary key"),
    )

    class Meta:
        abstract = True
