"""Agent URL configuration."""

from __future__ import annotations

from rest_framework.routers import SimpleRouter

from modules.agents.views import AgentViewSet

router = SimpleRouter(trailing_slash=True)
router.register("agents", AgentViewSet, basename="agent")

urlpatterns = router.urls
