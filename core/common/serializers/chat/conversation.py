"""
Conversation serializers for Palaver chat system.
"""

from rest_framework import serializers

from core.common.models import Conversation
from .participant import MemberSerializer


class ConversationDetailSerializer(serializers.ModelSerializer):
    """
    Conversation with its members.

    Private conversations are named after the other member, so a ``request``
    is expected in the context.
    """

    name = serializers.SerializerMethodField()
    members = serializers.SerializerMethodField()

    class Meta:
        model = Conversation
        fields = ["id", "name", "is_group", "photo_url", "created_at", "members"]
        read_only_fields = fields

    def _viewer(self):
        request = self.context.get("request")
        return request.user if request else None

    def get_name(self, obj):
        viewer = self._viewer()
        if viewer is None:
            return obj.name or ""
        return obj.display_name_for(viewer)

    def get_members(self, obj):
        return MemberSerializer(obj.get_members(), many=True).data


class ConversationListSerializer(ConversationDetailSerializer):
    """
    Conversation summary with last-message preview.

    Uses the annotations added by ``conversations.list_conversations_for_user``
    when present.
    """

    last_message_content = serializers.SerializerMethodField()
    last_message_sent_at = serializers.SerializerMethodField()

    class Meta(ConversationDetailSerializer.Meta):
        fields = [
            "id",
            "name",
            "is_group",
            "photo_url",
            "created_at",
            "last_message_content",
            "last_message_sent_at",
            "members",
        ]
        read_only_fields = fields

    def get_last_message_content(self, obj):
        if hasattr(obj, "last_message_content"):
            return obj.last_message_content
        last_message = obj.get_last_message()
        return last_message.content if last_message else None

    def get_last_message_sent_at(self, obj):
        if hasattr(obj, "last_message_sent_at"):
            value = obj.last_message_sent_at
        else:
            last_message = obj.get_last_message()
            value = last_message.sent_at if last_message else None
        return serializers.DateTimeField().to_representation(value) if value else None


class GroupCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    photo_url = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class GroupNameSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)


class GroupPhotoSerializer(serializers.Serializer):
    photo_url = serializers.CharField()


class AddMemberSerializer(serializers.Serializer):
    """Add by user name (as typed in the UI) or by user id"""

    name = serializers.CharField(required=False)
    user_id = serializers.UUIDField(required=False)

    def validate(self, attrs):
        if not attrs.get("name") and not attrs.get("user_id"):
            raise serializers.ValidationError("Either name or user_id is required")
        return attrs
