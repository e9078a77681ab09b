"""
URL patterns for core.common app.
"""

from django.urls import path, include
from rest_framework.routers import SimpleRouter

from core.common.views import ConversationViewSet, GroupViewSet, MessageViewSet

router = SimpleRouter(trailing_slash=True)
router.register(r'conversations', ConversationViewSet, basename='conversation')
router.register(r'messages', MessageViewSet, basename='message')
router.register(r'groups', GroupViewSet, basename='group')

urlpatterns = [
    path('', include(router.urls)),
]
