"""
Message model for Palaver chat system.
"""

from django.conf import settings
from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from core.common.models.base import UUIDPrimaryKey

IMAGE_CONTENT_PREFIX = "data:image/"


class MessageStatus(models.TextChoices):
    """Delivery lifecycle of a message. Only ever moves forward."""

    PENDING = "pending", _("Pending")
    SENT = "sent", _("Sent")
    DELIVERED = "delivered", _("Delivered")
    READ = "read", _("Read")

    @classmethod
    def rank(cls, value):
        return [cls.PENDING, cls.SENT, cls.DELIVERED, cls.READ].index(value)


class Message(UUIDPrimaryKey):
    """
    A message in a conversation.

    Visible order within a conversation is ``(sent_at, id)``; ``sent_at`` is
    strictly increasing per conversation.
    """

    conversation = models.ForeignKey(
        "common.Conversation",
        on_delete=models.CASCADE,
        related_name="messages",
        verbose_name=_("Conversation"),
        help_text=_("The conversation this message belongs to"),
    )

    sender = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="sent_messages",
        verbose_name=_("Sender"),
        help_text=_("The user who sent this message"),
    )

    content = models.TextField(
        verbose_name=_("Content"),
        help_text=_("Message text or an embedded media reference (data URI)"),
    )

    reply_to = models.ForeignKey(
        "self",
        on_delete=models.SET_NULL,
        blank=True,
        null=True,
        related_name="replies",
        verbose_name=_("Reply To"),
        help_text=_("The message this is a reply to"),
    )

    forwarded_label = models.CharField(
        max_length=255,
        blank=True,
        null=True,
        verbose_name=_("Forwarded Label"),
        help_text=_("Provenance marker for forwarded messages"),
    )

    status = models.CharField(
        max_length=20,
        choices=MessageStatus.choices,
        default=MessageStatus.SENT,
        verbose_name=_("Status"),
        help_text=_("Current delivery status of the message"),
    )

    sent_at = models.DateTimeField(
        default=timezone.now,
        verbose_name=_("Sent At"),
    )

    delivered_at = models.DateTimeField(
        blank=True,
        null=True,
        verbose_name=_("Delivered At"),
    )

    read_at = models.DateTimeField(
        blank=True,
        null=True,
        verbose_name=_("Read At"),
    )

    class Meta:
        verbose_name = _("Message")
        verbose_name_plural = _("Messages")
        ordering = ["sent_at", "id"]
        indexes = [
            models.Index(fields=["conversation", "sent_at"], name="message_conv_sent_idx"),
            models.Index(fields=["sender", "sent_at"], name="message_sender_sent_idx"),
        ]

    def __str__(self):
        preview = self.content[:50] + "..." if len(self.content) > 50 else self.content
        return f"{self.sender_id}: {preview}"

    @property
    def is_image(self):
        return self.content.startswith(IMAGE_CONTENT_PREFIX)

    @property
    def is_forwarded(self):
        return bool(self.forwarded_label)
