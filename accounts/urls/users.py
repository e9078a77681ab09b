from rest_framework.routers import SimpleRouter

from accounts.views.users import UserViewSet

router = SimpleRouter(trailing_slash=True)
router.register(r"", UserViewSet, basename="user")


urlpatterns = []

urlpatterns += router.urls
