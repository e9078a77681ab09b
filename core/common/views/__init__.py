from core.common.views.conversations import ConversationViewSet
from core.common.views.groups import GroupViewSet
from core.common.views.messages import MessageViewSet

__all__ = [
    "ConversationViewSet",
    "GroupViewSet",
    "MessageViewSet",
]
