"""
Chat serializers for Palaver API.
"""

from .conversation import (
    AddMemberSerializer,
    ConversationDetailSerializer,
    ConversationListSerializer,
    GroupCreateSerializer,
    GroupNameSerializer,
    GroupPhotoSerializer,
)
from .message import (
    ForwardMessageSerializer,
    MessageCreateSerializer,
    MessageSerializer,
    ReactionCreateSerializer,
    ReactionSerializer,
)
from .participant import MemberSerializer

__all__ = [
    "AddMemberSerializer",
    "ConversationDetailSerializer",
    "ConversationListSerializer",
    "GroupCreateSerializer",
    "GroupNameSerializer",
    "GroupPhotoSerializer",
    "ForwardMessageSerializer",
    "MessageCreateSerializer",
    "MessageSerializer",
    "ReactionCreateSerializer",
    "ReactionSerializer",
    "MemberSerializer",
]
