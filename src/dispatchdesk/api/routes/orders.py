"""Order board endpoints."""

from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, HTTPException, Query, status

from ...config import settings
from ...data.business_location import get_business_location
from ...models.domain import Order, OrderItem, Point
from ...schemas.orders import (
    MockOrdersRequest,
    OrderItemModel,
    OrderModel,
    OrderStatsResponse,
    StatusUpdateRequest,
)
from ...schemas.routing import PointModel
from ...services.orders import (
    OrderNotFoundError,
    compute_order_stats,
    generate_mock_orders,
    get_order_board,
)

router = APIRouter(prefix="/orders", tags=["orders"])


def _to_model(order: Order) -> OrderModel:
    return OrderModel(
        id=order.order_id,
        source_order_id=order.source_order_id,
        customer_name=order.customer_name,
        customer_phone=order.customer_phone,
        items=[
            OrderItemModel(name=item.name, quantity=item.quantity, price=item.price, modifiers=list(item.modifiers))
            for item in order.items
        ],
        total_amount=order.total_amount,
        status=order.status,
        priority=order.priority,
        created_at=order.created_at,
        delivery_address=order.delivery_address,
        delivery_location=PointModel(lat=order.delivery_location.lat, lng=order.delivery_location.lng),
        payment_method=order.payment_method,
        order_source=order.order_source,
        special_instructions=order.special_instructions,
        estimated_delivery_time=order.estimated_delivery_time,
        distance=order.distance,
        ready_time=order.ready_time,
        picked_up_time=order.picked_up_time,
        delivered_time=order.delivered_time,
        archived=order.archived,
        archived_at=order.archived_at,
    )


def _from_model(model: OrderModel) -> Order:
    return Order(
        order_id=model.id,
        source_order_id=model.source_order_id,
        customer_name=model.customer_name,
        customer_phone=model.customer_phone,
        items=[
            OrderItem(name=item.name, quantity=item.quantity, price=item.price, modifiers=list(item.modifiers))
            for item in model.items
        ],
        total_amount=model.total_amount,
        status=model.status,
        priority=model.priority,
        created_at=model.created_at,
        delivery_address=model.delivery_address,
        delivery_location=Point(model.delivery_location.lat, model.delivery_location.lng),
        payment_method=model.payment_method,
        order_source=model.order_source,
        special_instructions=model.special_instructions,
        estimated_delivery_time=model.estimated_delivery_time,
        distance=model.distance,
        ready_time=model.ready_time,
        picked_up_time=model.picked_up_time,
        delivered_time=model.delivered_time,
        archived=model.archived,
        archived_at=model.archived_at,
    )


def _not_found(order_id: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Order '{order_id}' not found")


@router.get("", response_model=List[OrderModel], status_code=status.HTTP_200_OK)
def list_orders(
    show_archived: bool = Query(default=False, description="List archived orders instead of live ones"),
    active_only: bool = Query(default=False, description="Only orders that are ready or out for delivery"),
) -> List[OrderModel]:
    board = get_order_board()
    if active_only:
        orders = board.active_orders(show_archived=show_archived)
    else:
        orders = board.list_orders(show_archived=show_archived)
    return [_to_model(order) for order in orders]


@router.put("", response_model=List[OrderModel], status_code=status.HTTP_200_OK)
def replace_orders(payload: List[OrderModel]) -> List[OrderModel]:
    """Load orders from an external order source, replacing the board."""
    board = get_order_board()
    try:
        board.replace(_from_model(model) for model in payload)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return [_to_model(order) for order in board.list_orders()]


@router.post("/mock", response_model=List[OrderModel], status_code=status.HTTP_200_OK)
def regenerate_mock_orders(payload: MockOrdersRequest | None = None) -> List[OrderModel]:
    seed = payload.seed if payload and payload.seed is not None else settings.mock_order_seed
    orders = generate_mock_orders(
        get_business_location(),
        radius_miles=settings.mock_delivery_radius_miles,
        seed=seed,
    )
    board = get_order_board()
    board.replace(orders)
    return [_to_model(order) for order in board.list_orders()]


@router.get("/stats", response_model=OrderStatsResponse, status_code=status.HTTP_200_OK)
def order_stats(
    show_archived: bool = Query(default=False, description="Count archived orders instead of live ones"),
) -> OrderStatsResponse:
    orders = get_order_board().list_orders(show_archived=show_archived)
    return OrderStatsResponse(**compute_order_stats(orders))


@router.get("/{order_id}", response_model=OrderModel, status_code=status.HTTP_200_OK)
def get_order(order_id: str) -> OrderModel:
    try:
        return _to_model(get_order_board().get(order_id))
    except OrderNotFoundError as exc:
        raise _not_found(order_id) from exc


@router.patch("/{order_id}/status", response_model=OrderModel, status_code=status.HTTP_200_OK)
def update_order_status(order_id: str, payload: StatusUpdateRequest) -> OrderModel:
    try:
        return _to_model(get_order_board().update_status(order_id, payload.status))
    except OrderNotFoundError as exc:
        raise _not_found(order_id) from exc
    except Exception as exc:
        logging.exception(f"Error updating order status: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to update order status: {str(exc)}"
        ) from exc


@router.post("/{order_id}/archive", response_model=OrderModel, status_code=status.HTTP_200_OK)
def archive_order(order_id: str) -> OrderModel:
    try:
        return _to_model(get_order_board().archive(order_id))
    except OrderNotFoundError as exc:
        raise _not_found(order_id) from exc


@router.post("/{order_id}/unarchive", response_model=OrderModel, status_code=status.HTTP_200_OK)
def unarchive_order(order_id: str) -> OrderModel:
    try:
        return _to_model(get_order_board().unarchive(order_id))
    except OrderNotFoundError as exc:
        raise _not_found(order_id) from exc
