"""
Delivery status tracking for Palaver messages.

Status only moves forward: sent -> delivered -> read. In a group a message
is read once every current member other than its sender has a read receipt.
"""

import logging

from django.db import transaction
from django.utils import timezone

from core.common.error_utils import audit_log, resource_argument, store_operation
from core.common.exceptions import AuthorizationException
from core.common.includes.lookups import fetch, parse_identifier
from core.common.models import Membership, Message, MessageStatus, ReadReceipt

logger = logging.getLogger('palaver')


def _is_at_least(message, status):
    return MessageStatus.rank(message.status) >= MessageStatus.rank(status)


def read_quorum(message):
    """
    Read progress of a message as ``(receipts, required)``.

    ``required`` is recomputed from current membership on every call: the
    members of the conversation other than the sender. Only receipts from
    those members count, so a reader who left no longer counts either way.
    """
    recipients = Membership.objects.filter(
        conversation_id=message.conversation_id
    ).exclude(user_id=message.sender_id)
    required = recipients.count()
    receipts = ReadReceipt.objects.filter(
        message=message, user_id__in=recipients.values("user_id")
    ).count()
    return receipts, required


@store_operation
def mark_delivered(message_id):
    """Advance to delivered unless already delivered or read."""
    with transaction.atomic():
        message = fetch(Message, message_id, "message id", for_update=True)
        if _is_at_least(message, MessageStatus.DELIVERED):
            return message

        message.status = MessageStatus.DELIVERED
        message.delivered_at = timezone.now()
        message.save(update_fields=["status", "delivered_at"])

    logger.info(f"Message {message.id} delivered")
    return message


@store_operation
@audit_log(
    "message.read",
    resource_type="message",
    get_resource_id=resource_argument("message_id"),
)
def mark_read(message_id, reader_id):
    """
    Record that ``reader_id`` read the message and advance it to read when
    the conversation's quorum is met.

    The receipt upsert and the quorum check share one transaction with the
    message row locked, so concurrent readers see consistent counts.
    A sender reading their own message changes nothing.
    """
    reader_pk = parse_identifier(reader_id, "reader id")

    with transaction.atomic():
        message = fetch(Message, message_id, "message id", for_update=True)
        conversation = message.conversation

        if not Membership.objects.filter(conversation=conversation, user_id=reader_pk).exists():
            raise AuthorizationException("You are not a member of this conversation.")

        if message.sender_id == reader_pk:
            return message

        now = timezone.now()
        ReadReceipt.objects.update_or_create(
            message=message, user_id=reader_pk, defaults={"read_at": now}
        )

        if message.status == MessageStatus.READ:
            return message

        if conversation.is_group:
            receipts, required = read_quorum(message)
            if receipts < required:
                logger.info(f"Message {message.id} read by {receipts}/{required} recipients")
                return message

        message.status = MessageStatus.READ
        message.read_at = now
        if message.delivered_at is None:
            message.delivered_at = now
        message.save(update_fields=["status", "read_at", "delivered_at"])

    logger.info(f"Message {message.id} read")
    return message
