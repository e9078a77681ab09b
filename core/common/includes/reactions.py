"""
Reactions on messages: at most one per (message, user).
"""

import logging

from django.db import transaction
from django.utils import timezone

from core.common.error_utils import store_operation
from core.common.exceptions import (
    AuthorizationException,
    InvalidArgumentException,
    ResourceNotFoundException,
)
from core.common.includes.lookups import fetch, parse_identifier
from core.common.models import Membership, Message, Reaction

logger = logging.getLogger('palaver')

REACTION_MAX_LENGTH = 64


@store_operation
def react(message_id, user_id, reaction_value):
    """Set the user's reaction, replacing any previous one."""
    reaction_value = (reaction_value or "").strip()
    if not reaction_value:
        raise InvalidArgumentException("Reaction cannot be empty.")
    if len(reaction_value) > REACTION_MAX_LENGTH:
        raise InvalidArgumentException("Reaction is too long.")

    user_pk = parse_identifier(user_id, "user id")

    with transaction.atomic():
        message = fetch(Message, message_id, "message id")
        if not Membership.objects.filter(conversation_id=message.conversation_id, user_id=user_pk).exists():
            raise AuthorizationException("You are not a member of this conversation.")

        reaction, created = Reaction.objects.update_or_create(
            message=message,
            user_id=user_pk,
            defaults={"reaction": reaction_value, "reacted_at": timezone.now()},
        )

    logger.info(
        f"Reaction {'added' if created else 'updated'} on message {message.id} by {user_pk}"
    )
    return reaction


@store_operation
def unreact(message_id, user_id):
    """Remove the user's reaction. Nothing to remove is a ResourceNotFoundException."""
    message_pk = parse_identifier(message_id, "message id")
    user_pk = parse_identifier(user_id, "user id")

    deleted, _ = Reaction.objects.filter(message_id=message_pk, user_id=user_pk).delete()
    if not deleted:
        raise ResourceNotFoundException("No reaction to remove.")

    logger.info(f"Reaction removed from message {message_pk} by {user_pk}")


@store_operation
def list_reactions(message_id):
    """Reactions on a message with the reacting user's display name."""
    message = fetch(Message, message_id, "message id")
    return list(
        Reaction.objects.filter(message=message)
        .select_related("user")
        .order_by("reacted_at", "id")
    )
