"""
Minimal logging for Palaver.
"""

import logging
from typing import Optional, Dict, Any
from django.conf import settings

logger = logging.getLogger('palaver')


def log_audit(
    event_type: str,
    user_id: Optional[str] = None,
    resource_type: Optional[str] = None,
    resource_id: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None
):
    """Log audit event (only in DEBUG mode for performance)."""
    if not settings.DEBUG:
        return

    logger.debug(
        f"AUDIT: {event_type} user={user_id} resource={resource_type}:{resource_id} details={details or {}}"
    )
