"""
URL patterns for the caller's own profile.
"""

from django.urls import path

from accounts.views import UserNameAPIView, UserPhotoAPIView

urlpatterns = [
    path("name/", UserNameAPIView.as_view(), name="user-name"),
    path("photo/", UserPhotoAPIView.as_view(), name="user-photo"),
]
