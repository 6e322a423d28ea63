"""Synchronous in-process broadcaster for invoice updates."""

from __future__ import annotations

import logging
import threading
from typing import Callable

logger = logging.getLogger(__name__)

InvoiceCallback = Callable[[int], None]


class InvoiceUpdateBroadcaster:
    """Publish/subscribe registry keyed by invoice id.

    Callbacks are called synchronously in subscription order. The same
    callback may be subscribed more than once and is then called once per
    subscription.
    """

    def __init__(self) -> None:
        self._subscribers: list[InvoiceCallback] = []
        self._lock = threading.Lock()

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscribers)

    def subscribe(self, callback: InvoiceCallback) -> None:
        with self._lock:
            self._subscribers.append(callback)

    def unsubscribe(self, callback: InvoiceCallback) -> None:
        """Remove the first subscription equal to *callback*, if any."""
        with self._lock:
            try:
                self._subscribers.remove(callback)
            except ValueError:
                logger.debug("unsubscribe: %r was not subscribed", callback)

    def notify(self, invoice_id: int) -> None:
        """Call every current subscriber with *invoice_id*.

        The subscriber list is copied first, so callbacks that subscribe or
        unsubscribe only affect later notifications. A failing callback is
        logged and does not prevent the rest from running.
        """
        with self._lock:
            callbacks = list(self._subscribers)

        logger.debug(
            "notifying %d subscriber(s) of invoice %s", len(callbacks), invoice_id
        )
        for callback in callbacks:
            try:
                callback(invoice_id)
            except Exception:
                logger.exception(
                    "subscriber %r failed for invoice %s", callback, invoice_id
                )
