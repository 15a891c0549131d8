"""Order URL configuration.

Every module mounts its router under ``api/v1/``, so the routers are
``SimpleRouter``s: a ``DefaultRouter`` per module would register competing
API root views.
"""

from __future__ import annotations

from rest_framework.routers import SimpleRouter

from modules.orders.views import OrderViewSet

router = SimpleRouter(trailing_slash=True)
router.register("orders", OrderViewSet, basename="order")

urlpatterns = router.urls
