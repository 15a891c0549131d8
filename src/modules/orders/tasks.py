"""Celery tasks for the orders module.

``expire_empty_orders`` runs on the Celery beat schedule declared in
settings (``CELERY_BEAT_SCHEDULE``).  One extra run is dispatched when a
worker starts, delayed by ``ORDER_EXPIRATION_SWEEP_INITIAL_DELAY`` seconds.
"""

from __future__ import annotations

import structlog
from celery import shared_task
from celery.signals import worker_ready
from django.conf import settings

from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.orders.sweep import ExpirationSweep

logger = structlog.get_logger(__name__)


@shared_task(name="orders.expire_empty_orders", ignore_result=True)
def expire_empty_orders() -> int:
    return ExpirationSweep(repository=OrderDjangoRepository()).run()


@worker_ready.connect
def schedule_initial_sweep(sender=None, **kwargs) -> None:
    delay = getattr(settings, "ORDER_EXPIRATION_SWEEP_INITIAL_DELAY", 10)
    expire_empty_orders.apply_async(countdown=delay)
    logger.info("orders.expiration_sweep.initial_run_scheduled", countdown=delay)
