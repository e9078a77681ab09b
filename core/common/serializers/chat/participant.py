"""
Member serializers for Palaver chat system.
"""

from rest_framework import serializers

from accounts.models import AccountUser


class MemberSerializer(serializers.ModelSerializer):
    """Serializer for user info shown inside conversations"""

    class Meta:
        model = AccountUser
        fields = ["id", "name", "photo_url"]
        read_only_fields = fields
