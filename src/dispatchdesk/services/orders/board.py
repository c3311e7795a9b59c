"""In-memory order board with status tracking and archiving."""

from __future__ import annotations

import functools
import logging
import threading
import dataclasses
from datetime import datetime, timezone
from typing import Iterable, Optional

from ...config import settings
from ...models.domain import Order, OrderStatus
from ...data.business_location import get_business_location
from .mock import generate_mock_orders

ACTIVE_STATUSES: frozenset[str] = frozenset({"ready", "out_for_delivery"})


class OrderNotFoundError(KeyError):
    """Raised when an order id is not on the board."""


def _now() -> datetime:
    return datetime.now(timezone.utc)


class OrderBoard:
    """Holds the current orders for one dispatch location."""

    def __init__(self, orders: Iterable[Order] = ()) -> None:
        self._lock = threading.Lock()
        self._orders: dict[str, Order] = {order.order_id: order for order in orders}

    def __len__(self) -> int:
        with self._lock:
            return len(self._orders)

    def get(self, order_id: str) -> Order:
        # called with the lock held by the mutators; a single dict lookup needs no lock of its own
        try:
            return self._orders[order_id]
        except KeyError:
            raise OrderNotFoundError(order_id) from None

    def _snapshot(self) -> list[Order]:
        with self._lock:
            return list(self._orders.values())

    def replace(self, orders: Iterable[Order]) -> None:
        incoming = list(orders)
        ids = [order.order_id for order in incoming]
        if len(set(ids)) != len(ids):
            raise ValueError("Order ids must be unique.")
        with self._lock:
            self._orders = {order.order_id: order for order in incoming}
        logging.info(f"Order board replaced with {len(incoming)} orders")

    def list_orders(self, *, show_archived: bool = False) -> list[Order]:
        """Orders in the selected archive view.

        The live view lists oldest orders first; the archive view lists the most
        recently archived first.
        """
        selected = [order for order in self._snapshot() if order.archived == show_archived]
        if show_archived:
            return sorted(selected, key=lambda order: order.archived_at or order.created_at, reverse=True)
        return sorted(selected, key=lambda order: order.created_at)

    def active_orders(self, *, show_archived: bool = False) -> list[Order]:
        """Orders that are ready or already out for delivery, oldest first."""
        return sorted(
            (
                order
                for order in self._snapshot()
                if order.status in ACTIVE_STATUSES and order.archived == show_archived
            ),
            key=lambda order: order.created_at,
        )

    def update_status(self, order_id: str, status: OrderStatus, now: Optional[datetime] = None) -> Order:
        stamp = now or _now()
        with self._lock:
            order = self.get(order_id)
            updated = dataclasses.replace(
                order,
                status=status,
                ready_time=stamp if status == "ready" else order.ready_time,
                picked_up_time=stamp if status == "out_for_delivery" else order.picked_up_time,
                delivered_time=stamp if status == "delivered" else order.delivered_time,
            )
            self._orders[order_id] = updated
        logging.info(f"Order {order_id} moved from {order.status} to {status}")
        return updated

    def archive(self, order_id: str, now: Optional[datetime] = None) -> Order:
        with self._lock:
            order = self.get(order_id)
            updated = dataclasses.replace(order, archived=True, archived_at=now or _now())
            self._orders[order_id] = updated
        logging.info(f"Archived order {order_id}")
        return updated

    def unarchive(self, order_id: str) -> Order:
        with self._lock:
            order = self.get(order_id)
            updated = dataclasses.replace(order, archived=False, archived_at=None)
            self._orders[order_id] = updated
        logging.info(f"Unarchived order {order_id}")
        return updated


@functools.lru_cache(maxsize=1)
def get_order_board() -> OrderBoard:
    """Process-wide order board, seeded with sample orders when configured."""

    if not settings.seed_mock_orders:
        return OrderBoard()
    orders = generate_mock_orders(
        get_business_location(),
        radius_miles=settings.mock_delivery_radius_miles,
        seed=settings.mock_order_seed,
    )
    logging.info(f"Seeded order board with {len(orders)} mock orders")
    return OrderBoard(orders)
