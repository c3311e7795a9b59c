"""Order service helpers."""

from .board import ACTIVE_STATUSES, OrderBoard, OrderNotFoundError, get_order_board
from .mock import generate_mock_orders
from .stats import compute_order_stats

__all__ = [
    "ACTIVE_STATUSES",
    "OrderBoard",
    "OrderNotFoundError",
    "get_order_board",
    "generate_mock_orders",
    "compute_order_stats",
]
