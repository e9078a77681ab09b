"""
Business logic for the Palaver conversation engine.

Each module is a set of plain functions operating on ids, wrapped in short
transactions scoped to a single action.
"""

from core.common.includes import lookups
from core.common.includes import identity
from core.common.includes import conversations
from core.common.includes import memberships
from core.common.includes import messages
from core.common.includes import forwarding
from core.common.includes import statuses
from core.common.includes import reactions

__all__ = [
    "lookups",
    "identity",
    "conversations",
    "memberships",
    "messages",
    "forwarding",
    "statuses",
    "reactions",
]
