"""
Message serializers for Palaver chat system.
"""

from rest_framework import serializers

from core.common.models import Message, Reaction
from .participant import MemberSerializer


class ReactionSerializer(serializers.ModelSerializer):
    """A reaction with the reacting user's display name"""

    user_id = serializers.UUIDField(source="user.id", read_only=True)
    name = serializers.CharField(source="user.name", read_only=True)

    class Meta:
        model = Reaction
        fields = ["user_id", "name", "reaction", "reacted_at"]
        read_only_fields = fields


class MessageSerializer(serializers.ModelSerializer):
    """Message as shown inside a conversation"""

    sender = MemberSerializer(read_only=True)
    conversation_id = serializers.UUIDField(read_only=True)
    reply_to_id = serializers.UUIDField(read_only=True, allow_null=True)
    reactions = ReactionSerializer(many=True, read_only=True)
    is_image = serializers.ReadOnlyField()
    is_forwarded = serializers.ReadOnlyField()

    class Meta:
        model = Message
        fields = [
            "id",
            "conversation_id",
            "sender",
            "content",
            "is_image",
            "is_forwarded",
            "forwarded_label",
            "reply_to_id",
            "status",
            "sent_at",
            "delivered_at",
            "read_at",
            "reactions",
        ]
        read_only_fields = fields


class MessageCreateSerializer(serializers.Serializer):
    """Payload of the send-message action"""

    content = serializers.CharField(trim_whitespace=False)
    receiver_id = serializers.UUIDField(required=False, allow_null=True)
    is_group = serializers.BooleanField(required=False, default=False)
    group_id = serializers.UUIDField(required=False, allow_null=True)
    conversation_id = serializers.UUIDField(required=False, allow_null=True)
    reply_to = serializers.UUIDField(required=False, allow_null=True)

    def validate_content(self, value):
        if not value.strip():
            raise serializers.ValidationError("Message content cannot be empty")
        return value

    def validate(self, attrs):
        if attrs.get("is_group"):
            if not attrs.get("group_id"):
                raise serializers.ValidationError(
                    {"group_id": "A group id is required for group messages"}
                )
        elif not attrs.get("receiver_id") and not attrs.get("conversation_id"):
            raise serializers.ValidationError(
                "Either receiver_id or conversation_id is required"
            )
        return attrs


class ForwardMessageSerializer(serializers.Serializer):
    target_conversation_id = serializers.UUIDField()


class ReactionCreateSerializer(serializers.Serializer):
    reaction = serializers.CharField(max_length=64)
