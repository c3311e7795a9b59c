"""Order board counters for the dashboard header."""

from __future__ import annotations

from collections import Counter
from typing import Sequence

from ...models.domain import Order


def compute_order_stats(orders: Sequence[Order]) -> dict:
    status_counts: Counter[str] = Counter(order.status for order in orders)
    total_revenue = sum(order.total_amount for order in orders)
    avg_order_value = total_revenue / len(orders) if orders else 0.0

    return {
        "pending": status_counts["pending"],
        "preparing": status_counts["preparing"],
        "ready": status_counts["ready"],
        "outForDelivery": status_counts["out_for_delivery"],
        "totalOrders": len(orders),
        "totalRevenue": round(total_revenue, 2),
        "avgOrderValue": round(avg_order_value, 2),
    }
