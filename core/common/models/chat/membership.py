"""
Membership model linking users to conversations.
"""

from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _

from core.common.models.base import UUIDPrimaryKey


class Membership(UUIDPrimaryKey):
    """
    A user's membership in a conversation. One row per (conversation, user).
    """

    conversation = models.ForeignKey(
        "common.Conversation",
        on_delete=models.CASCADE,
        related_name="memberships",
        verbose_name=_("Conversation"),
        help_text=_("The conversation this membership belongs to"),
    )

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="memberships",
        verbose_name=_("User"),
        help_text=_("The member"),
    )

    joined_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name=_("Joined At"),
        help_text=_("When the user joined this conversation"),
    )

    class Meta:
        verbose_name = _("Membership")
        verbose_name_plural = _("Memberships")
        ordering = ["joined_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["conversation", "user"], name="unique_membership_per_user"
            ),
        ]
        indexes = [
            models.Index(fields=["user", "conversation"], name="membership_user_conv_idx"),
        ]

    def __str__(self):
        return f"{self.user_id} in {self.conversation_id}"
