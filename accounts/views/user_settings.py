"""
Views for the caller's own profile: display name and avatar.
"""

from drf_yasg.utils import swagger_auto_schema
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.serializers import (
    AccountSerializer,
    NameUpdateSerializer,
    PhotoUpdateSerializer,
)
from core.common.includes import identity


class UserNameAPIView(APIView):
    permission_classes = [IsAuthenticated]

    @swagger_auto_schema(
        request_body=NameUpdateSerializer,
        responses={
            status.HTTP_200_OK: AccountSerializer(),
            status.HTTP_409_CONFLICT: "Name already taken",
        },
        operation_description="Change the caller's user name",
    )
    def put(self, request: Request, *args, **kwargs) -> Response:
        serializer = NameUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = identity.set_user_name(request.user.pk, serializer.validated_data["new_name"])
        return Response(AccountSerializer(user).data)


class UserPhotoAPIView(APIView):
    permission_classes = [IsAuthenticated]

    @swagger_auto_schema(
        request_body=PhotoUpdateSerializer,
        responses={status.HTTP_200_OK: AccountSerializer()},
        operation_description="Change the caller's avatar reference",
    )
    def put(self, request: Request, *args, **kwargs) -> Response:
        serializer = PhotoUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = identity.set_user_photo(request.user.pk, serializer.validated_data["photo_url"])
        return Response(AccountSerializer(user).data)
