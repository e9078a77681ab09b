"""
Conversation model for Palaver.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _

from core.common.models.base import ObjectHistoryTracker, UUIDPrimaryKey


def private_key_for(user_a_id, user_b_id) -> str:
    """Order-independent key identifying the private conversation of a pair."""
    first, second = sorted([str(user_a_id), str(user_b_id)])
    return f"{first}:{second}"


class Conversation(UUIDPrimaryKey, ObjectHistoryTracker):
    """
    A private (exactly two members) or group (one or more members) conversation.

    Both variants share this table; ``is_group`` is the discriminant. Private
    conversations never store a name: it is derived from the other member.
    """

    name = models.CharField(
        max_length=255,
        verbose_name=_("Conversation Name"),
        help_text=_("Display name for a group (empty for private conversations)"),
        blank=True,
        null=True,
    )

    is_group = models.BooleanField(
        default=False,
        verbose_name=_("Is Group"),
        help_text=_("Whether this is a group conversation"),
    )

    photo_url = models.TextField(
        blank=True,
        null=True,
        verbose_name=_("Photo"),
        help_text=_("Reference to the group photo"),
    )

    private_key = models.CharField(
        max_length=100,
        unique=True,
        blank=True,
        null=True,
        editable=False,
        verbose_name=_("Private Key"),
        help_text=_("Sorted member pair of a private conversation; NULL for groups"),
    )

    class Meta:
        verbose_name = _("Conversation")
        verbose_name_plural = _("Conversations")
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["is_group", "created_at"], name="conv_group_created_idx"),
        ]

    def __str__(self):
        if self.is_group:
            return self.name or f"Group {self.id}"
        return f"Private {self.id}"

    def get_members(self):
        """
        Members ordered by when they joined.

        Reads ``memberships`` through ``all()`` so a
        ``prefetch_related("memberships__user")`` on the queryset is reused.
        """
        ordered = sorted(self.memberships.all(), key=lambda m: (m.joined_at, str(m.id)))
        return [membership.user for membership in ordered]

    def get_partner(self, viewer):
        """The other member of a private conversation, or None."""
        if self.is_group:
            return None
        for user in self.get_members():
            if user.pk != viewer.pk:
                return user
        return None

    def display_name_for(self, viewer):
        """Name shown to ``viewer``: the group name or the partner's name."""
        if self.is_group:
            return self.name or ""
        partner = self.get_partner(viewer)
        return partner.name if partner else ""

    def get_last_message(self):
        return self.messages.order_by("-sent_at", "-id").first()
