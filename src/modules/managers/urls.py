"""Manager URL configuration."""

from __future__ import annotations

from rest_framework.routers import SimpleRouter

from modules.managers.views import ManagerViewSet

router = SimpleRouter(trailing_slash=True)
router.register("managers", ManagerViewSet, basename="manager")

urlpatterns = router.urls
