"""FastAPI application — entry point for the invoice demo."""

from __future__ import annotations

import logging

from fastapi import Depends, FastAPI, Request

from invoicehub.core.config import Settings
from invoicehub.core.logging_setup import init_logging
from invoicehub.domain.bus import InvoiceUpdateBroadcaster
from invoicehub.domain.handlers import HandlerRegistry
from invoicehub.domain.models import (
    Invoice,
    InvoiceNotification,
    InvoiceUpdate,
    PaymentRequest,
)
from invoicehub.repos.memory import InvoiceRepository, NotificationRepository
from invoicehub.services.invoices import apply_payment, update_invoice

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the app and the shared instances every route works against."""
    settings = settings or Settings()
    init_logging(settings.LOG_LEVEL)

    app = FastAPI(title=settings.PROJECT_NAME)

    # ── Shared instances (one per app) ────────────────────────────────
    app.state.invoice_repo = InvoiceRepository()
    app.state.notification_repo = NotificationRepository()
    app.state.broadcaster = InvoiceUpdateBroadcaster()
    app.state.handler_registry = HandlerRegistry(
        broadcaster=app.state.broadcaster,
        invoice_repo=app.state.invoice_repo,
        notification_repo=app.state.notification_repo,
    )

    _register_routes(app)
    return app


# ── Dependencies ──────────────────────────────────────────────────────


def get_invoice_repo(request: Request) -> InvoiceRepository:
    return request.app.state.invoice_repo


def get_notification_repo(request: Request) -> NotificationRepository:
    return request.app.state.notification_repo


def get_broadcaster(request: Request) -> InvoiceUpdateBroadcaster:
    return request.app.state.broadcaster


# ── Routes ────────────────────────────────────────────────────────────


def _register_routes(app: FastAPI) -> None:
    @app.get("/invoices", response_model=list[Invoice])
    def list_invoices(
        invoice_repo: InvoiceRepository = Depends(get_invoice_repo),
    ) -> list[Invoice]:
        """Return every invoice looked up so far."""
        return invoice_repo.list_all()

    @app.get("/invoices/{invoice_id}", response_model=Invoice)
    def get_invoice(
        invoice_id: int,
        invoice_repo: InvoiceRepository = Depends(get_invoice_repo),
    ) -> Invoice:
        """Return the invoice, creating a new one on first access."""
        return invoice_repo.get_or_create(invoice_id)

    @app.patch("/invoices/{invoice_id}", response_model=Invoice)
    def patch_invoice(
        invoice_id: int,
        body: InvoiceUpdate,
        invoice_repo: InvoiceRepository = Depends(get_invoice_repo),
        broadcaster: InvoiceUpdateBroadcaster = Depends(get_broadcaster),
    ) -> Invoice:
        """Edit invoice fields and tell subscribers it changed."""
        invoice = update_invoice(invoice_repo.get_or_create(invoice_id), body)
        broadcaster.notify(invoice_id)
        return invoice

    @app.post("/invoices/{invoice_id}/payments", response_model=Invoice)
    def pay_invoice(
        invoice_id: int,
        body: PaymentRequest,
        invoice_repo: InvoiceRepository = Depends(get_invoice_repo),
        broadcaster: InvoiceUpdateBroadcaster = Depends(get_broadcaster),
    ) -> Invoice:
        """Apply a payment and tell subscribers the invoice changed."""
        invoice = apply_payment(invoice_repo.get_or_create(invoice_id), body.payment)
        logger.info(
            "payment of %s applied to invoice %s, balance now %s",
            body.payment,
            invoice_id,
            invoice.balance,
        )
        broadcaster.notify(invoice_id)
        return invoice

    @app.get(
        "/invoices/{invoice_id}/notifications",
        response_model=list[InvoiceNotification],
    )
    def list_notifications(
        invoice_id: int,
        notification_repo: NotificationRepository = Depends(get_notification_repo),
    ) -> list[InvoiceNotification]:
        """Return the notifications delivered for an invoice, oldest first."""
        return notification_repo.list_for_invoice(invoice_id)


app = create_app()
