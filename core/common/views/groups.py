"""
Group conversation views for Palaver.
"""

from drf_yasg.utils import swagger_auto_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response

from core.common.exceptions import AuthorizationException
from core.common.includes import conversations, memberships
from core.common.responses import created_response
from core.common.serializers.chat import (
    AddMemberSerializer,
    ConversationDetailSerializer,
    ConversationListSerializer,
    GroupCreateSerializer,
    GroupNameSerializer,
    GroupPhotoSerializer,
    MemberSerializer,
)


class GroupViewSet(viewsets.ViewSet):
    permission_classes = [IsAuthenticated]

    def _detail(self, conversation, request):
        return ConversationDetailSerializer(conversation, context={"request": request}).data

    def list(self, request: Request) -> Response:
        """Groups the caller belongs to"""
        groups = conversations.list_groups_for_user(request.user.pk)
        return Response(
            ConversationListSerializer(groups, many=True, context={"request": request}).data
        )

    @swagger_auto_schema(
        request_body=GroupCreateSerializer,
        responses={status.HTTP_201_CREATED: ConversationDetailSerializer()},
    )
    def create(self, request: Request) -> Response:
        """Create a group with the caller as its only member"""
        serializer = GroupCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        group = conversations.create_group(
            request.user.pk,
            serializer.validated_data["name"],
            serializer.validated_data.get("photo_url"),
        )
        return created_response(self._detail(group, request))

    @swagger_auto_schema(
        method="post",
        request_body=AddMemberSerializer,
        responses={status.HTTP_201_CREATED: MemberSerializer(many=True)},
    )
    @action(detail=True, methods=["get", "post"])
    def members(self, request: Request, pk=None) -> Response:
        if request.method == "GET":
            if not memberships.is_member(pk, request.user.pk):
                raise AuthorizationException("You are not a member of this conversation.")
            return Response(MemberSerializer(memberships.list_members(pk), many=True).data)

        serializer = AddMemberSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        if data.get("name"):
            memberships.add_member_by_name(pk, request.user.pk, data["name"])
        else:
            if not memberships.is_member(pk, request.user.pk):
                raise AuthorizationException("Only members can add users to this conversation.")
            memberships.add_member(pk, data["user_id"])

        return created_response(
            MemberSerializer(memberships.list_members(pk), many=True).data
        )

    @action(detail=True, methods=["delete"])
    def leave(self, request: Request, pk=None) -> Response:
        memberships.leave_group(pk, request.user.pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @swagger_auto_schema(method="put", request_body=GroupNameSerializer)
    @action(detail=True, methods=["put"], url_path="name")
    def set_name(self, request: Request, pk=None) -> Response:
        serializer = GroupNameSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        group = conversations.set_group_name(pk, request.user.pk, serializer.validated_data["name"])
        return Response(self._detail(group, request))

    @swagger_auto_schema(method="put", request_body=GroupPhotoSerializer)
    @action(detail=True, methods=["put"], url_path="photo")
    def set_photo(self, request: Request, pk=None) -> Response:
        serializer = GroupPhotoSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        group = conversations.set_group_photo(
            pk, request.user.pk, serializer.validated_data["photo_url"]
        )
        return Response(self._detail(group, request))
