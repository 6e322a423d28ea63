"""Tests for the broadcaster subscribers wired by HandlerRegistry."""

from __future__ import annotations

import pytest

from invoicehub.domain.bus import InvoiceUpdateBroadcaster
from invoicehub.domain.handlers import HandlerRegistry
from invoicehub.repos.memory import InvoiceRepository, NotificationRepository


@pytest.fixture()
def env():
    """Fresh broadcaster + repos + registry for each test."""
    broadcaster = InvoiceUpdateBroadcaster()
    invoice_repo = InvoiceRepository()
    notification_repo = NotificationRepository()

    registry = HandlerRegistry(
        broadcaster=broadcaster,
        invoice_repo=invoice_repo,
        notification_repo=notification_repo,
    )

    class Env:
        pass

    e = Env()
    e.broadcaster = broadcaster
    e.invoice_repo = invoice_repo
    e.notification_repo = notification_repo
    e.registry = registry
    return e


def test_registry_subscribes_on_construction(env):
    assert env.broadcaster.subscriber_count == 1


def test_notify_records_notification(env):
    env.invoice_repo.get_or_create(5)

    env.broadcaster.notify(5)
    env.broadcaster.notify(5)

    entries = env.notification_repo.list_for_invoice(5)
    assert len(entries) == 2
    assert all(e.invoice_id == 5 for e in entries)


def test_notify_for_unknown_invoice_is_ignored(env):
    env.broadcaster.notify(99)

    assert env.notification_repo.list_for_invoice(99) == []
    assert not env.invoice_repo.contains(99)


def test_close_unsubscribes(env):
    env.invoice_repo.get_or_create(1)
    env.registry.close()

    env.broadcaster.notify(1)

    assert env.broadcaster.subscriber_count == 0
    assert env.notification_repo.list_for_invoice(1) == []
