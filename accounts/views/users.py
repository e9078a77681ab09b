from django.db.models import QuerySet
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import mixins
from rest_framework.permissions import IsAuthenticated
from rest_framework.viewsets import GenericViewSet

from accounts.filters import AccountUserFilter
from accounts.models import AccountUser
from accounts.serializers import AccountSerializer


class UserViewSet(
    mixins.RetrieveModelMixin,
    mixins.ListModelMixin,
    GenericViewSet,
):
    """Directory of users, searchable by name for starting conversations."""

    filter_backends = (DjangoFilterBackend,)
    filterset_class = AccountUserFilter

    serializer_class = AccountSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self) -> QuerySet:
        return AccountUser.objects.order_by("name")
