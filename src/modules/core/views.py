import time
from typing import Any, Dict

import structlog
from django.core.cache import cache
from django.db import connections
from django.http import HttpRequest, JsonResponse
from django.utils import timezone

logger = structlog.get_logger(__name__)


def _check_database() -> Dict[str, Any]:
    start = time.monotonic()
    with connections["default"].cursor() as cursor:
        cursor.execute("SELECT 1")
        cursor.fetchone()
    return {"status": "up", "response_time_ms": round((time.monotonic() - start) * 1000, 2)}


def _check_cache() -> Dict[str, Any]:
    start = time.monotonic()
    cache.set("_health_check", "ok", 10)
    if cache.get("_health_check") != "ok":
        raise ConnectionError("Cache read-back mismatch")
    return {"status": "up", "response_time_ms": round((time.monotonic() - start) * 1000, 2)}


def health_check(request: HttpRequest) -> JsonResponse:
    """Liveness check for the database and the Redis cache.

    Returns 200 when both answer, 503 otherwise.
    """
    services: Dict[str, Dict[str, Any]] = {}

    try:
        services["database"] = _check_database()
    except Exception:
        logger.exception("health_check.database_down")
        services["database"] = {"status": "down"}

    try:
        services["cache"] = _check_cache()
    except Exception:
        logger.exception("health_check.cache_down")
        services["cache"] = {"status": "down"}

    healthy = all(service["status"] == "up" for service in services.values())
    return JsonResponse(
        {
            "status": "healthy" if healthy else "unhealthy",
            "timestamp": timezone.now().isoformat(),
            "services": services,
        },
        status=200 if healthy else 503,
    )
