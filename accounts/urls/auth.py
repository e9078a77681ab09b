from django.urls import path

from accounts.views import SessionAPIView

urlpatterns = [
    path("", SessionAPIView.as_view(), name="session"),
]
