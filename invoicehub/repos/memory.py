"""In-memory repositories for invoices and their notifications."""

from __future__ import annotations

import threading

from invoicehub.domain.models import Invoice, InvoiceNotification


class InvoiceRepository:
    """Dict-backed store for Invoice instances, keyed by id.

    Unknown ids are materialized with default values on first lookup, and
    every later lookup returns that same instance.
    """

    def __init__(self) -> None:
        self._store: dict[int, Invoice] = {}
        self._lock = threading.Lock()

    def get_or_create(self, invoice_id: int) -> Invoice:
        with self._lock:
            invoice = self._store.get(invoice_id)
            if invoice is None:
                invoice = Invoice(id=invoice_id)
                self._store[invoice_id] = invoice
            return invoice

    def contains(self, invoice_id: int) -> bool:
        with self._lock:
            return invoice_id in self._store

    def list_all(self) -> list[Invoice]:
        with self._lock:
            return list(self._store.values())


class NotificationRepository:
    """List-backed store for InvoiceNotification instances."""

    def __init__(self) -> None:
        self._entries: list[InvoiceNotification] = []
        self._lock = threading.Lock()

    def add(self, entry: InvoiceNotification) -> None:
        with self._lock:
            self._entries.append(entry)

    def list_for_invoice(self, invoice_id: int) -> list[InvoiceNotification]:
        with self._lock:
            entries = [e for e in self._entries if e.invoice_id == invoice_id]
        return sorted(entries, key=lambda e: e.timestamp)
