"""
Forwarding of messages between conversations.
"""

import logging

from core.common.error_utils import audit_log, store_operation
from core.common.exceptions import AuthorizationException
from core.common.includes import messages
from core.common.includes.lookups import fetch, parse_identifier
from core.common.models import Membership, Message

logger = logging.getLogger('palaver')

FORWARDED_MARKER = "Forwarded from"


def provenance_label(original):
    return f"{FORWARDED_MARKER} {original.sender.name}"


def build_forwarded_content(original):
    """
    Content and label for a copy of ``original``.

    Text gets the label as an inline prefix. Embedded images are copied
    untouched and carry the label only in ``forwarded_label``, so the two
    render separately.
    """
    label = provenance_label(original)
    if original.is_image:
        return original.content, label
    return f"{label}: {original.content}", label


@store_operation
@audit_log("message.forward", resource_type="message")
def forward(original_message_id, target_conversation_id, forwarder_id):
    """
    Copy a message's content into another conversation as ``forwarder_id``.

    The forwarder must be able to see the original and must belong to the
    target conversation (checked by ``messages.append``).
    """
    original = fetch(
        Message.objects.select_related("sender"), original_message_id, "message id"
    )
    forwarder_pk = parse_identifier(forwarder_id, "forwarder id")
    if not Membership.objects.filter(
        conversation_id=original.conversation_id, user_id=forwarder_pk
    ).exists():
        raise AuthorizationException("You cannot forward a message you cannot see.")

    content, label = build_forwarded_content(original)
    message = messages.append(
        target_conversation_id, forwarder_pk, content, forwarded_label=label
    )

    logger.info(f"Message {original.id} forwarded as {message.id} by {forwarder_pk}")
    return message
