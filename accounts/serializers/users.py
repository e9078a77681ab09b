from rest_framework import serializers

from accounts.models import USERNAME_MAX_LENGTH, AccountUser


class AccountSerializer(serializers.ModelSerializer):
    class Meta:
        model = AccountUser
        fields = [
            "id",
            "name",
            "photo_url",
            "date_joined",
        ]
        read_only_fields = fields


class SessionSerializer(serializers.Serializer):
    """Login payload: the name typed on the login screen."""

    name = serializers.CharField(max_length=USERNAME_MAX_LENGTH)


class SessionResponseSerializer(serializers.Serializer):
    identifier = serializers.UUIDField(source="id")
    username = serializers.CharField(source="name")
    photo_url = serializers.CharField(allow_null=True)


class NameUpdateSerializer(serializers.Serializer):
    new_name = serializers.CharField()


class PhotoUpdateSerializer(serializers.Serializer):
    photo_url = serializers.CharField()
