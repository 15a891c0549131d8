"""Page-number pagination with a server-side cap on ``size``."""

from __future__ import annotations

from django.conf import settings
from rest_framework.pagination import PageNumberPagination


class StandardResultsSetPagination(PageNumberPagination):
    page_size_query_param = "size"

    @property
    def max_page_size(self) -> int:
        # requested sizes above the cap are clamped, not rejected
        return getattr(settings, "ORDER_MAX_PAGE_SIZE", 100)
