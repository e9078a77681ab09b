"""
Identifier parsing and row lookups shared by the engine modules.
"""

import uuid

from django.db.models import Model, QuerySet

from core.common.exceptions import InvalidArgumentException, ResourceNotFoundException


def parse_identifier(value, field="id"):
    """Return ``value`` as a UUID, accepting model instances, UUIDs and strings."""
    if value is None or value == "":
        raise InvalidArgumentException(f"{field} is required.")
    if isinstance(value, uuid.UUID):
        return value
    if isinstance(value, Model):
        return value.pk
    try:
        return uuid.UUID(str(value))
    except (TypeError, ValueError, AttributeError):
        raise InvalidArgumentException(f"Invalid {field}: {value!r}.")


def fetch(model_or_queryset, identifier, field="id", for_update=False):
    """
    Load one row by primary key.

    Raises InvalidArgumentException for a malformed id and
    ResourceNotFoundException when no row matches. ``for_update`` locks the
    row until the surrounding transaction ends.
    """
    if isinstance(model_or_queryset, QuerySet):
        queryset = model_or_queryset
    else:
        queryset = model_or_queryset._default_manager.all()

    pk = parse_identifier(identifier, field)
    if for_update:
        queryset = queryset.select_for_update()

    try:
        return queryset.get(pk=pk)
    except queryset.model.DoesNotExist:
        name = str(queryset.model._meta.verbose_name).capitalize()
        raise ResourceNotFoundException(f"{name} not found.")
