from accounts.serializers.users import (
    AccountSerializer,
    NameUpdateSerializer,
    PhotoUpdateSerializer,
    SessionResponseSerializer,
    SessionSerializer,
)

__all__ = [
    "AccountSerializer",
    "NameUpdateSerializer",
    "PhotoUpdateSerializer",
    "SessionResponseSerializer",
    "SessionSerializer",
]
