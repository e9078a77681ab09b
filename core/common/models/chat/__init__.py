"""
Chat models for Palaver conversation engine.
"""

from .conversation import Conversation
from .membership import Membership
from .message import Message, MessageStatus
from .reaction import Reaction
from .receipt import ReadReceipt

__all__ = [
    "Conversation",
    "Membership",
    "Message",
    "MessageStatus",
    "Reaction",
    "ReadReceipt",
]
