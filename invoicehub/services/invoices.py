"""Service for editing invoices in place."""

from __future__ import annotations

from decimal import Decimal

from invoicehub.domain.models import Invoice, InvoiceStatus, InvoiceUpdate


def update_invoice(invoice: Invoice, changes: InvoiceUpdate) -> Invoice:
    """Copy the fields explicitly set on *changes* onto *invoice*.

    The invoice is modified in place, so every holder of the reference sees
    the new values. Returns the same instance.
    """
    values = changes.model_dump(exclude_unset=True, exclude_none=True)
    for field, value in values.items():
        setattr(invoice, field, value)
    return invoice


def apply_payment(invoice: Invoice, payment: Decimal) -> Invoice:
    """Record *payment* against the invoice and update its status.

    The balance is reduced by the payment; a balance at or below zero marks
    the invoice as paid. A zero payment is recorded but leaves the balance
    and status as they were.
    """
    invoice.payment = payment
    if payment == 0:
        return invoice
    invoice.balance = invoice.balance - payment
    if invoice.balance <= 0:
        invoice.status = InvoiceStatus.PAID.value
    else:
        invoice.status = InvoiceStatus.PARTIALLY_PAID.value
    return invoice
