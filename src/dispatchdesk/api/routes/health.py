"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...services.orders import get_order_board

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


@router.get("/health/orders", status_code=status.HTTP_200_OK)
def health_orders() -> dict:
    """Report whether the order board is loaded and how many orders it holds."""
    try:
        board = get_order_board()
        return {"service": "order_board", "healthy": True, "orders": len(board)}
    except Exception as e:
        return {"service": "order_board", "healthy": False, "error": str(e)}
