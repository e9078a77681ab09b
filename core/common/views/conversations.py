"""
Conversation views for Palaver.
"""

from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response

from core.common.includes import conversations
from core.common.serializers.chat import (
    ConversationDetailSerializer,
    ConversationListSerializer,
    MessageSerializer,
)


def conversation_payload(conversation, messages, request):
    return {
        "conversation": ConversationDetailSerializer(
            conversation, context={"request": request}
        ).data,
        "messages": MessageSerializer(messages, many=True).data,
    }


class ConversationViewSet(viewsets.ViewSet):
    """
    The caller's conversations, private and group alike.
    """

    permission_classes = [IsAuthenticated]

    def list(self, request: Request) -> Response:
        """Conversations of the caller, most recently active first"""
        items = conversations.list_conversations_for_user(request.user.pk)
        serializer = ConversationListSerializer(
            items, many=True, context={"request": request}
        )
        return Response(serializer.data)

    def retrieve(self, request: Request, pk=None) -> Response:
        """A conversation with its messages in order; members only"""
        conversation, messages = conversations.get_conversation(pk, request.user.pk)
        return Response(conversation_payload(conversation, messages, request))

    @action(detail=False, methods=["get"], url_path=r"with/(?P<user_id>[^/.]+)")
    def with_user(self, request: Request, user_id=None) -> Response:
        """The private conversation with another user, created if needed"""
        conversation, messages = conversations.get_private_conversation_with(
            request.user.pk, user_id
        )
        return Response(conversation_payload(conversation, messages, request))
