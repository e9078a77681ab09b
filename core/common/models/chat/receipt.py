"""
Read receipts, used to compute the group read quorum.
"""

from django.conf import settings
from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from core.common.models.base import UUIDPrimaryKey


class ReadReceipt(UUIDPrimaryKey):
    """One receipt per (message, reader)."""

    message = models.ForeignKey(
        "common.Message",
        on_delete=models.CASCADE,
        related_name="read_receipts",
        verbose_name=_("Message"),
    )

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="read_receipts",
        verbose_name=_("Reader"),
    )

    read_at = models.DateTimeField(
        default=timezone.now,
        verbose_name=_("Read At"),
    )

    class Meta:
        verbose_name = _("Read Receipt")
        verbose_name_plural = _("Read Receipts")
        constraints = [
            models.UniqueConstraint(
                fields=["message", "user"], name="unique_read_receipt_per_user"
            ),
        ]

    def __str__(self):
        return f"{self.user_id} read {self.message_id}"
