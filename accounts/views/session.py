from drf_yasg.utils import swagger_auto_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.serializers import SessionResponseSerializer, SessionSerializer
from core.common.includes import identity


class SessionAPIView(APIView):
    """
    Log in by name. The user is created on first login; there is no password.

    The returned ``identifier`` is what clients send back as
    ``Authorization: Bearer <identifier>``.
    """

    authentication_classes = []
    permission_classes = [AllowAny]

    @swagger_auto_schema(
        request_body=SessionSerializer,
        responses={status.HTTP_200_OK: SessionResponseSerializer()},
        operation_description="Log in (or sign up) with a user name",
    )
    def post(self, request: Request, *args, **kwargs) -> Response:
        serializer = SessionSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = identity.login(serializer.validated_data["name"])
        return Response(SessionResponseSerializer(user).data)
