"""
Reaction model: one live reaction per (message, user).
"""

from django.conf import settings
from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from core.common.models.base import UUIDPrimaryKey


class Reaction(UUIDPrimaryKey):
    message = models.ForeignKey(
        "common.Message",
        on_delete=models.CASCADE,
        related_name="reactions",
        verbose_name=_("Message"),
    )

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="reactions",
        verbose_name=_("User"),
    )

    reaction = models.CharField(
        max_length=64,
        verbose_name=_("Reaction"),
        help_text=_("Reaction value, usually an emoji"),
    )

    reacted_at = models.DateTimeField(
        default=timezone.now,
        verbose_name=_("Reacted At"),
    )

    class Meta:
        verbose_name = _("Reaction")
        verbose_name_plural = _("Reactions")
        ordering = ["reacted_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["message", "user"], name="unique_reaction_per_user"
            ),
        ]

    def __str__(self):
        return f"{self.user_id} {self.reaction} on {self.message_id}"
