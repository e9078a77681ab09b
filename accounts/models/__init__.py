from accounts.models.users import (
    USERNAME_MAX_LENGTH,
    USERNAME_MIN_LENGTH,
    AccountUser,
    UserManager,
)

__all__ = [
    "AccountUser",
    "UserManager",
    "USERNAME_MAX_LENGTH",
    "USERNAME_MIN_LENGTH",
]
