"""Root URL configuration.

Domain modules are mounted under ``api/v1/``.  ``/health`` and the OpenAPI
schema and docs are public; everything else requires a JWT.
"""

from django.contrib import admin
from django.urls import include, path
from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularRedocView,
    SpectacularSwaggerView,
)
from rest_framework_simplejwt.views import (
    TokenObtainPairView,
    TokenRefreshView,
    TokenVerifyView,
)

API_PREFIX = "api/v1/"
DOMAIN_MODULES = ("managers", "agents", "businesses", "customers", "orders", "stats")

urlpatterns = [
    path("admin/", admin.site.urls),
    path("", include("modules.core.urls")),
    *[path(API_PREFIX, include(f"modules.{module}.urls")) for module in DOMAIN_MODULES],
    # SimpleJWT: username is the manager's (or agent's) login email
    path(f"{API_PREFIX}auth/token/", TokenObtainPairView.as_view(), name="token_obtain"),
    path(f"{API_PREFIX}auth/token/refresh/", TokenRefreshView.as_view(), name="token_refresh"),
    path(f"{API_PREFIX}auth/token/verify/", TokenVerifyView.as_view(), name="token_verify"),
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path("api/docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
    path("api/redoc/", SpectacularRedocView.as_view(url_name="schema"), name="redoc"),
]
