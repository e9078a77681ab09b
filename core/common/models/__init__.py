"""
Models for the Palaver conversation engine.
"""

from core.common.models.base import ObjectHistoryTracker, UUIDPrimaryKey
from core.common.models.chat import (
    Conversation,
    Membership,
    Message,
    MessageStatus,
    Reaction,
    ReadReceipt,
)

__all__ = [
    "ObjectHistoryTracker",
    "UUIDPrimaryKey",
    "Conversation",
    "Membership",
    "Message",
    "MessageStatus",
    "Reaction",
    "ReadReceipt",
]
