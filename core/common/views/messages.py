"""
Message views for Palaver: sending, deleting, forwarding, status and reactions.
"""

from drf_yasg.utils import swagger_auto_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response

from core.common.includes import forwarding, messages, reactions, statuses
from core.common.responses import created_response
from core.common.serializers.chat import (
    ForwardMessageSerializer,
    MessageCreateSerializer,
    MessageSerializer,
    ReactionCreateSerializer,
    ReactionSerializer,
)


class MessageViewSet(viewsets.ViewSet):
    """
    Messages of the caller. Every action requires membership in the
    message's conversation.
    """

    permission_classes = [IsAuthenticated]

    @swagger_auto_schema(
        request_body=MessageCreateSerializer,
        responses={status.HTTP_201_CREATED: MessageSerializer()},
        operation_description="Send a message, creating the private conversation if needed",
    )
    def create(self, request: Request) -> Response:
        serializer = MessageCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        message, _conversation = messages.send_or_create(
            request.user.pk,
            content=data["content"],
            receiver_id=data.get("receiver_id"),
            is_group=data.get("is_group", False),
            group_id=data.get("group_id"),
            conversation_id=data.get("conversation_id"),
            reply_to_id=data.get("reply_to"),
        )
        return created_response(MessageSerializer(message).data)

    def destroy(self, request: Request, pk=None) -> Response:
        """Delete a message; only its sender may"""
        messages.delete_message(pk, request.user.pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @swagger_auto_schema(
        request_body=ForwardMessageSerializer,
        responses={status.HTTP_201_CREATED: MessageSerializer()},
    )
    @action(detail=True, methods=["post"])
    def forward(self, request: Request, pk=None) -> Response:
        serializer = ForwardMessageSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        message = forwarding.forward(
            pk, serializer.validated_data["target_conversation_id"], request.user.pk
        )
        return created_response(MessageSerializer(message).data)

    @action(detail=True, methods=["post"])
    def delivered(self, request: Request, pk=None) -> Response:
        messages.get_message(pk, request.user.pk)
        message = statuses.mark_delivered(pk)
        return Response(MessageSerializer(message).data)

    @action(detail=True, methods=["post"])
    def read(self, request: Request, pk=None) -> Response:
        message = statuses.mark_read(pk, request.user.pk)
        return Response(MessageSerializer(message).data)

    @swagger_auto_schema(
        method="post",
        request_body=ReactionCreateSerializer,
        responses={status.HTTP_200_OK: ReactionSerializer()},
    )
    @action(detail=True, methods=["get", "post", "delete"], url_path="reactions")
    def message_reactions(self, request: Request, pk=None) -> Response:
        if request.method == "GET":
            messages.get_message(pk, request.user.pk)
            items = reactions.list_reactions(pk)
            return Response(ReactionSerializer(items, many=True).data)

        if request.method == "DELETE":
            reactions.unreact(pk, request.user.pk)
            return Response(status=status.HTTP_204_NO_CONTENT)

        serializer = ReactionCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        reaction = reactions.react(pk, request.user.pk, serializer.validated_data["reaction"])
        return Response(ReactionSerializer(reaction).data)
