"""
Django app configuration for core.common.
"""

from django.apps import AppConfig


class CommonConfig(AppConfig):
    """
    Configuration for the core.common app: conversations, memberships,
    messages, reactions and read receipts.
    """
    default_auto_field = "django.db.models.BigAutoField"
    name = "core.common"
    label = "common"
    verbose_name = "Conversations"
