"""Domain models for the invoice demo."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, Field


class InvoiceStatus(str, Enum):
    NEW = "New"
    PARTIALLY_PAID = "Partially Paid"
    PAID = "Paid"


DEFAULT_AMOUNT = Decimal(100)
DEFAULT_BALANCE = Decimal(100)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return str(uuid.uuid4())


# ---------------------------------------------------------------------------
# Core domain models
# ---------------------------------------------------------------------------


class Invoice(BaseModel):
    id: int = Field(frozen=True)
    amount: Decimal = DEFAULT_AMOUNT
    balance: Decimal = DEFAULT_BALANCE
    payment: Decimal = Decimal(0)
    status: str = InvoiceStatus.NEW.value


class InvoiceNotification(BaseModel):
    """One delivered "invoice changed" notification."""

    id: str = Field(default_factory=_new_id)
    invoice_id: int
    timestamp: datetime = Field(default_factory=_utcnow)


# ---------------------------------------------------------------------------
# Request DTOs
# ---------------------------------------------------------------------------


class InvoiceUpdate(BaseModel):
    amount: Decimal | None = None
    balance: Decimal | None = None
    payment: Decimal | None = None
    status: str | None = None


class PaymentRequest(BaseModel):
    payment: Decimal
