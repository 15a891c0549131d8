"""Business URL configuration."""

from __future__ import annotations

from rest_framework.routers import SimpleRouter

from modules.businesses.views import BusinessViewSet

router = SimpleRouter(trailing_slash=True)
router.register("businesses", BusinessViewSet, basename="business")

urlpatterns = router.urls
