"""Broadcaster subscribers — wired up at application startup."""

from __future__ import annotations

import logging

from invoicehub.domain.bus import InvoiceUpdateBroadcaster
from invoicehub.domain.models import InvoiceNotification
from invoicehub.repos.memory import InvoiceRepository, NotificationRepository

logger = logging.getLogger(__name__)


class HandlerRegistry:
    """Subscribes the notification feed to the broadcaster."""

    def __init__(
        self,
        broadcaster: InvoiceUpdateBroadcaster,
        invoice_repo: InvoiceRepository,
        notification_repo: NotificationRepository,
    ) -> None:
        self.broadcaster = broadcaster
        self.invoice_repo = invoice_repo
        self.notification_repo = notification_repo
        self._register()

    def _register(self) -> None:
        self.broadcaster.subscribe(self.on_invoice_updated)

    def close(self) -> None:
        self.broadcaster.unsubscribe(self.on_invoice_updated)

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    def on_invoice_updated(self, invoice_id: int) -> None:
        if not self.invoice_repo.contains(invoice_id):
            logger.info("ignoring notification for unknown invoice %s", invoice_id)
            return

        self.notification_repo.add(InvoiceNotification(invoice_id=invoice_id))
