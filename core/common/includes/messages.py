"""
Message ledger for Palaver.

Messages are appended in a per-conversation order: ``sent_at`` strictly
increases within a conversation and ``id`` breaks any remaining tie.
"""

import logging
from datetime import timedelta

from django.db import transaction
from django.utils import timezone

from core.common.error_utils import audit_log, resource_argument, store_operation
from core.common.exceptions import (
    AuthorizationException,
    InvalidArgumentException,
    ResourceNotFoundException,
)
from core.common.includes import conversations
from core.common.includes.lookups import fetch, parse_identifier
from core.common.models import Conversation, Membership, Message, MessageStatus

logger = logging.getLogger('palaver')


def validate_content(content):
    if content is None or not str(content).strip():
        raise InvalidArgumentException("Message content cannot be empty.")
    return content


def _next_sent_at(conversation):
    """Now, or just after the conversation's latest message if the clock lags."""
    now = timezone.now()
    latest = (
        Message.objects.filter(conversation=conversation)
        .order_by("-sent_at")
        .values_list("sent_at", flat=True)
        .first()
    )
    if latest is not None and latest >= now:
        return latest + timedelta(microseconds=1)
    return now


@store_operation
@audit_log("message.send", resource_type="message")
def append(conversation_id, sender_id, content, reply_to_id=None, forwarded_label=None):
    """
    Append a message to a conversation on behalf of one of its members.

    The conversation row stays locked until commit, so concurrent appends to
    the same conversation get increasing timestamps.
    """
    validate_content(content)
    sender_pk = parse_identifier(sender_id, "sender id")

    with transaction.atomic():
        conversation = fetch(Conversation, conversation_id, "conversation id", for_update=True)

        if not Membership.objects.filter(conversation=conversation, user_id=sender_pk).exists():
            raise AuthorizationException("Sender is not a member of this conversation.")

        reply_to = None
        if reply_to_id:
            reply_to = Message.objects.filter(
                pk=parse_identifier(reply_to_id, "reply-to id"), conversation=conversation
            ).first()
            if reply_to is None:
                raise InvalidArgumentException(
                    "Reply target must be a message in the same conversation."
                )

        message = Message.objects.create(
            conversation=conversation,
            sender_id=sender_pk,
            content=content,
            reply_to=reply_to,
            forwarded_label=forwarded_label,
            status=MessageStatus.SENT,
            sent_at=_next_sent_at(conversation),
        )
        conversation.save(update_fields=["last_modified_at"])

    logger.info(f"Message {message.id} appended to conversation {conversation.id} by {sender_pk}")
    return message


@store_operation
def send_or_create(
    sender_id,
    *,
    content,
    receiver_id=None,
    is_group=False,
    group_id=None,
    conversation_id=None,
    reply_to_id=None,
):
    """
    Send a message, resolving the target conversation first.

    Group sends need ``group_id``; private sends use ``conversation_id`` when
    given, otherwise the conversation with ``receiver_id`` is found or
    created. The whole action commits or rolls back as one unit.

    Returns:
        (message, conversation)
    """
    validate_content(content)

    with transaction.atomic():
        if is_group:
            if not group_id:
                raise InvalidArgumentException("A group id is required for group messages.")
            conversation = fetch(Conversation, group_id, "group id")
            if not conversation.is_group:
                raise InvalidArgumentException("Target conversation is not a group.")
        elif conversation_id:
            conversation = fetch(Conversation, conversation_id, "conversation id")
        elif receiver_id:
            conversation = conversations.resolve_private(sender_id, receiver_id)
        else:
            raise InvalidArgumentException("Either a receiver or a conversation is required.")

        message = append(conversation.pk, sender_id, content, reply_to_id=reply_to_id)

    return message, conversation


@store_operation
@audit_log(
    "message.delete",
    resource_type="message",
    get_resource_id=resource_argument("message_id"),
)
def delete_message(message_id, requester_id):
    """
    Delete a message. Only its sender may do so; reactions and read
    receipts go with it.
    """
    message_pk = parse_identifier(message_id, "message id")
    requester_pk = parse_identifier(requester_id, "requester id")

    with transaction.atomic():
        deleted, _ = Message.objects.filter(pk=message_pk, sender_id=requester_pk).delete()
        if not deleted:
            if Message.objects.filter(pk=message_pk).exists():
                raise AuthorizationException("Only the sender can delete this message.")
            raise ResourceNotFoundException("Message not found.")

    logger.info(f"Message {message_pk} deleted by {requester_pk}")


@store_operation
def get_message(message_id, viewer_id=None):
    message = fetch(Message.objects.select_related("conversation", "sender"), message_id, "message id")
    if viewer_id is not None:
        viewer_pk = parse_identifier(viewer_id, "user id")
        if not Membership.objects.filter(conversation_id=message.conversation_id, user_id=viewer_pk).exists():
            raise AuthorizationException("You are not a member of this conversation.")
    return message
