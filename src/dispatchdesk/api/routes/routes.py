"""Routing endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Query, status

from ...schemas.routing import BatchRequest, BatchResponse
from ...services.orders import get_order_board
from ...services.routing.service import batch_request, route_orders

router = APIRouter(prefix="/routes", tags=["routes"])


@router.post("/batch", response_model=BatchResponse, status_code=status.HTTP_200_OK)
def batch(payload: BatchRequest) -> BatchResponse:
    try:
        return batch_request(payload)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logging.exception(f"Error batching routes: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to batch routes: {str(exc)}"
        ) from exc


@router.get("", response_model=BatchResponse, status_code=status.HTTP_200_OK)
def active_routes(
    show_archived: bool = Query(default=False, description="Route archived orders instead of live ones"),
    persist: bool = Query(default=False, description="Write the run to the data root"),
) -> BatchResponse:
    """Group the board's ready and out-for-delivery orders into routes."""
    try:
        orders = get_order_board().active_orders(show_archived=show_archived)
        return route_orders(orders, persist=persist)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logging.exception(f"Error routing active orders: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to route active orders: {str(exc)}"
        ) from exc
