"""
Bearer-identifier authentication for Palaver.

The caller's identity is an opaque user identifier carried as
``Authorization: Bearer <user id>``. It is trusted as-is; only its
shape and existence are checked.
"""

import logging
import uuid
from typing import Optional

from django.utils.translation import gettext_lazy as _
from rest_framework import authentication, exceptions
from rest_framework.request import Request

from accounts.models import AccountUser
from core.common.error_utils import log_exception_with_context

logger = logging.getLogger("palaver")

BEARER_PREFIX = "Bearer "


class BearerIdentifierAuthentication(authentication.BaseAuthentication):
    """
    Resolve the user identifier in the Authorization header to an AccountUser.
    """

    def authenticate(self, request: Request) -> Optional[tuple[AccountUser, None]]:
        identifier = self.get_identifier_from_request(request)
        if identifier is None:
            return None

        try:
            user_id = uuid.UUID(identifier)
        except ValueError:
            log_exception_with_context(
                Exception("Malformed bearer identifier"),
                log_level=logging.INFO,
                request=request,
            )
            raise exceptions.AuthenticationFailed(_("Invalid identifier."))

        try:
            user = AccountUser.objects.get(pk=user_id)
        except AccountUser.DoesNotExist:
            log_exception_with_context(
                Exception("User not found for bearer identifier"),
                log_level=logging.WARNING,
                request=request,
            )
            raise exceptions.AuthenticationFailed(_("User not found."))

        return (user, None)

    def authenticate_header(self, request: Request) -> str:
        return "Bearer"

    def get_identifier_from_request(self, request: Request) -> Optional[str]:
        auth_header = request.headers.get("Authorization", "")
        if not auth_header.startswith(BEARER_PREFIX):
            return None
        identifier = auth_header[len(BEARER_PREFIX):].strip()
        if not identifier:
            raise exceptions.AuthenticationFailed(_("Missing identifier."))
        return identifier
