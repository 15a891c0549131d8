"""Business statistics URL configuration."""

from __future__ import annotations

from rest_framework.routers import SimpleRouter

from modules.stats.views import BusinessStatsViewSet

router = SimpleRouter(trailing_slash=True)
router.register("business-stats", BusinessStatsViewSet, basename="business-stats")

urlpatterns = router.urls
