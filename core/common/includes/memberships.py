"""
Membership registry for Palaver.

All membership mutations go through this module, which is where the
two-member cap of private conversations is enforced.
"""

import logging

from django.db import IntegrityError, transaction

from core.common.error_utils import audit_log, resource_argument, store_operation
from core.common.exceptions import (
    AuthorizationException,
    InvalidArgumentException,
    MembershipLimitException,
    ResourceNotFoundException,
)
from core.common.includes import identity
from core.common.includes.lookups import fetch, parse_identifier
from core.common.models import Conversation, Membership

logger = logging.getLogger('palaver')

PRIVATE_MEMBER_LIMIT = 2


def is_member(conversation_id, user_id):
    return Membership.objects.filter(
        conversation_id=parse_identifier(conversation_id, "conversation id"),
        user_id=parse_identifier(user_id, "user id"),
    ).exists()


@store_operation
@audit_log(
    "membership.add",
    resource_type="conversation",
    get_resource_id=resource_argument("conversation_id"),
)
def add_member(conversation_id, user_id):
    """
    Add a user to a conversation. Adding an existing member is a no-op.

    Private conversations reject a third member with MembershipLimitException.
    """
    user = identity.get_user(user_id)

    with transaction.atomic():
        conversation = fetch(Conversation, conversation_id, "conversation id", for_update=True)

        existing = Membership.objects.filter(conversation=conversation, user=user).first()
        if existing is not None:
            return existing

        if not conversation.is_group:
            if conversation.memberships.count() >= PRIVATE_MEMBER_LIMIT:
                raise MembershipLimitException()

        try:
            with transaction.atomic():
                membership = Membership.objects.create(conversation=conversation, user=user)
        except IntegrityError:
            return Membership.objects.get(conversation=conversation, user=user)

    logger.info(f"User {user.id} added to conversation {conversation.id}")
    return membership


@store_operation
def add_member_by_name(conversation_id, actor_id, name):
    """Add the user called ``name``; only current members may add others."""
    conversation = fetch(Conversation, conversation_id, "conversation id")
    if not is_member(conversation.pk, actor_id):
        raise AuthorizationException("Only members can add users to this conversation.")

    user = identity.get_user_by_name(name)
    return add_member(conversation.pk, user.pk)


@store_operation
@audit_log(
    "membership.remove",
    resource_type="conversation",
    get_resource_id=resource_argument("conversation_id"),
)
def remove_member(conversation_id, user_id):
    """
    Remove a membership. A group left with no members is kept.

    Private conversations keep both members for their whole life, so they
    reject removal with InvalidArgumentException.
    """
    user_pk = parse_identifier(user_id, "user id")

    with transaction.atomic():
        conversation = fetch(Conversation, conversation_id, "conversation id", for_update=True)
        if not conversation.is_group:
            raise InvalidArgumentException("Members cannot leave a private conversation.")

        deleted, _ = Membership.objects.filter(conversation=conversation, user_id=user_pk).delete()
        if not deleted:
            raise ResourceNotFoundException("User is not a member of this conversation.")

    logger.info(f"User {user_pk} removed from conversation {conversation.id}")


def leave_group(conversation_id, user_id):
    remove_member(conversation_id, user_id)


@store_operation
def list_members(conversation_id):
    """Members of a conversation in joining order."""
    conversation = fetch(Conversation, conversation_id, "conversation id")
    return conversation.get_members()
