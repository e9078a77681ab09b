"""
Conversation resolution for Palaver.

Private conversations are found or created per pair of users; group
conversations are created explicitly with their creator as first member.
"""

import logging

from django.db import IntegrityError, transaction
from django.db.models import Count, OuterRef, Subquery
from django.db.models.functions import Coalesce

from core.common.error_utils import audit_log, store_operation
from core.common.exceptions import (
    AuthorizationException,
    InvalidArgumentException,
    ResourceConflictException,
    ResourceNotFoundException,
)
from core.common.includes import identity
from core.common.includes.lookups import fetch, parse_identifier
from core.common.models import Conversation, Membership, Message
from core.common.models.chat.conversation import private_key_for

logger = logging.getLogger('palaver')


def find_private(user_a_id, user_b_id):
    """
    The private conversation whose members are exactly {user_a, user_b}.

    Earliest-created wins if more than one exists.
    """
    member_count = (
        Membership.objects.filter(conversation=OuterRef("pk"))
        .order_by()
        .values("conversation")
        .annotate(total=Count("id"))
        .values("total")
    )
    return (
        Conversation.objects.filter(is_group=False)
        .filter(memberships__user_id=user_a_id)
        .filter(memberships__user_id=user_b_id)
        .annotate(members_total=Subquery(member_count))
        .filter(members_total=2)
        .order_by("created_at", "id")
        .first()
    )


@store_operation
@audit_log("conversation.resolve_private", resource_type="conversation")
def resolve_private(user_a_id, user_b_id):
    """Find or atomically create the private conversation between two users."""
    user_a = identity.get_user(user_a_id)
    user_b = identity.get_user(user_b_id)
    if user_a.pk == user_b.pk:
        raise InvalidArgumentException("Cannot start a private conversation with yourself.")

    conversation = find_private(user_a.pk, user_b.pk)
    if conversation is not None:
        return conversation

    key = private_key_for(user_a.pk, user_b.pk)
    try:
        with transaction.atomic():
            conversation = Conversation.objects.create(is_group=False, private_key=key)
            Membership.objects.create(conversation=conversation, user=user_a)
            Membership.objects.create(conversation=conversation, user=user_b)
    except IntegrityError:
        # A concurrent call committed the same pair first.
        conversation = Conversation.objects.get(private_key=key)
        members = set(conversation.memberships.values_list("user_id", flat=True))
        if members != {user_a.pk, user_b.pk}:
            logger.error(f"Private conversation {conversation.id} for {key} has members {members}")
            raise ResourceConflictException(
                "The private conversation of these users has inconsistent membership."
            )
        logger.info(f"Private conversation for {key} created concurrently, reusing it")
        return conversation

    logger.info(f"Private conversation created: {conversation.id} between {user_a.id} and {user_b.id}")
    return conversation


@store_operation
@audit_log("conversation.create_group", resource_type="conversation")
def create_group(creator_id, name, photo_url=None):
    """Create a group conversation whose sole initial member is the creator."""
    try:
        creator = identity.get_user(creator_id)
    except ResourceNotFoundException:
        raise InvalidArgumentException("Creator does not exist.")

    name = (name or "").strip()
    if not name:
        raise InvalidArgumentException("Group name is required.")

    with transaction.atomic():
        conversation = Conversation.objects.create(
            is_group=True, name=name, photo_url=photo_url or None
        )
        Membership.objects.create(conversation=conversation, user=creator)

    logger.info(f"Group created: {conversation.id} ({name}) by {creator.id}")
    return conversation


def _require_member(conversation, user_id):
    user_pk = parse_identifier(user_id, "user id")
    if not Membership.objects.filter(conversation=conversation, user_id=user_pk).exists():
        raise AuthorizationException("You are not a member of this conversation.")


def _get_group_for_member(conversation_id, actor_id):
    conversation = fetch(Conversation, conversation_id, "conversation id", for_update=True)
    if not conversation.is_group:
        raise InvalidArgumentException("Only group conversations can be changed.")
    _require_member(conversation, actor_id)
    return conversation


@store_operation
def set_group_name(conversation_id, actor_id, name):
    name = (name or "").strip()
    if not name:
        raise InvalidArgumentException("Group name is required.")

    with transaction.atomic():
        conversation = _get_group_for_member(conversation_id, actor_id)
        conversation.name = name
        conversation.save(update_fields=["name", "last_modified_at"])

    logger.info(f"Group {conversation.id} renamed to {name}")
    return conversation


@store_operation
def set_group_photo(conversation_id, actor_id, photo_url):
    photo_url = (photo_url or "").strip()
    if not photo_url:
        raise InvalidArgumentException("Photo reference is required.")

    with transaction.atomic():
        conversation = _get_group_for_member(conversation_id, actor_id)
        conversation.photo_url = photo_url
        conversation.save(update_fields=["photo_url", "last_modified_at"])

    logger.info(f"Group {conversation.id} photo updated")
    return conversation


def _with_last_message(queryset):
    last_message = Message.objects.filter(conversation=OuterRef("pk")).order_by("-sent_at", "-id")
    return queryset.annotate(
        last_message_content=Subquery(last_message.values("content")[:1]),
        last_message_sent_at=Subquery(last_message.values("sent_at")[:1]),
    ).annotate(
        last_activity_at=Coalesce("last_message_sent_at", "created_at"),
    )


@store_operation
def get_conversation(conversation_id, viewer_id=None):
    """
    A conversation and its messages in visible order, reactions attached.

    When ``viewer_id`` is given the viewer must be a member.
    """
    conversation = fetch(
        Conversation.objects.prefetch_related("memberships__user"),
        conversation_id,
        "conversation id",
    )
    if viewer_id is not None:
        _require_member(conversation, viewer_id)

    messages = list(
        conversation.messages.select_related("sender", "reply_to")
        .prefetch_related("reactions__user")
        .order_by("sent_at", "id")
    )
    return conversation, messages


@store_operation
def get_private_conversation_with(user_id, other_user_id):
    conversation = resolve_private(user_id, other_user_id)
    return get_conversation(conversation.pk, user_id)


@store_operation
def list_conversations_for_user(user_id, groups_only=False):
    """Conversations of a user, most recently active first, with last-message preview."""
    user = identity.get_user(user_id)
    conversations = Conversation.objects.filter(memberships__user=user)
    if groups_only:
        conversations = conversations.filter(is_group=True)

    conversations = (
        _with_last_message(conversations)
        .prefetch_related("memberships__user")
        .order_by("-last_activity_at", "-id")
    )
    return list(conversations)


def list_groups_for_user(user_id):
    return list_conversations_for_user(user_id, groups_only=True)
