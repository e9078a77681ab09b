"""
Identity store access for Palaver.

The conversation engine only reads users; the login and profile functions
below back the thin account endpoints.
"""

import logging

from django.contrib.auth.hashers import make_password
from django.db import IntegrityError, transaction

from accounts.models import USERNAME_MAX_LENGTH, USERNAME_MIN_LENGTH, AccountUser
from core.common.error_utils import store_operation
from core.common.exceptions import (
    DuplicateEntityException,
    InvalidArgumentException,
    ResourceNotFoundException,
)
from core.common.includes.lookups import fetch

logger = logging.getLogger('palaver')


def validate_name(name):
    """Strip and validate a user name."""
    name = (name or "").strip()
    if not USERNAME_MIN_LENGTH <= len(name) <= USERNAME_MAX_LENGTH:
        raise InvalidArgumentException(
            f"Name must be between {USERNAME_MIN_LENGTH} and {USERNAME_MAX_LENGTH} characters."
        )
    return name


@store_operation
def get_user(user_id):
    return fetch(AccountUser, user_id, "user id")


@store_operation
def get_user_by_name(name):
    try:
        return AccountUser.objects.get(name=(name or "").strip())
    except AccountUser.DoesNotExist:
        raise ResourceNotFoundException(f"User {name!r} not found.")


@store_operation
def list_users(search=None):
    """All users ordered by name, optionally filtered by a name fragment."""
    users = AccountUser.objects.all()
    if search:
        users = users.filter(name__icontains=search.strip())
    return list(users.order_by("name"))


@store_operation
def login(name):
    """Return the user called ``name``, creating it on first login."""
    name = validate_name(name)
    try:
        with transaction.atomic():
            user, created = AccountUser.objects.get_or_create(
                name=name, defaults={"password": make_password(None)}
            )
    except IntegrityError:
        user, created = AccountUser.objects.get(name=name), False

    if created:
        logger.info(f"User created: {user.id} ({user.name})")
    return user


@store_operation
def set_user_name(user_id, new_name):
    new_name = validate_name(new_name)
    user = get_user(user_id)
    if user.name == new_name:
        return user

    if AccountUser.objects.filter(name=new_name).exclude(pk=user.pk).exists():
        raise DuplicateEntityException(f"Name {new_name!r} is already taken.")

    user.name = new_name
    try:
        with transaction.atomic():
            user.save(update_fields=["name"])
    except IntegrityError:
        raise DuplicateEntityException(f"Name {new_name!r} is already taken.")

    logger.info(f"User {user.id} renamed to {new_name}")
    return user


@store_operation
def set_user_photo(user_id, photo_url):
    """Store an avatar reference; the file itself lives elsewhere."""
    photo_url = (photo_url or "").strip()
    if not photo_url:
        raise InvalidArgumentException("Photo reference is required.")

    user = get_user(user_id)
    user.photo_url = photo_url
    user.save(update_fields=["photo_url"])

    logger.info(f"User {user.id} photo updated")
    return user
