from accounts.views.session import SessionAPIView
from accounts.views.user_settings import UserNameAPIView, UserPhotoAPIView
from accounts.views.users import UserViewSet

__all__ = [
    "SessionAPIView",
    "UserNameAPIView",
    "UserPhotoAPIView",
    "UserViewSet",
]
