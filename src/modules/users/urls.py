"""User URL configuration."""

from __future__ import annotations

from rest_framework.routers import SimpleRouter

from modules.users.views import UserViewSet

router = SimpleRouter(trailing_slash=False)
router.register("users", UserViewSet, basename="user")

urlpatterns = router.urls
