"""Order board API schemas."""

from __future__ import annotations

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from .routing import PointModel

OrderStatusLiteral = Literal["pending", "preparing", "ready", "out_for_delivery", "delivered", "cancelled"]


class OrderItemModel(BaseModel):
    name: str
    quantity: int = Field(..., ge=0)
    price: float
    modifiers: List[str] = Field(default_factory=list)


class OrderModel(BaseModel):
    id: str
    source_order_id: str
    customer_name: str
    customer_phone: str = ""
    items: List[OrderItemModel] = Field(default_factory=list)
    total_amount: float
    status: OrderStatusLiteral
    priority: Literal["low", "medium", "high"] = "medium"
    created_at: datetime
    delivery_address: str
    delivery_location: PointModel
    payment_method: str = ""
    order_source: Literal["web", "app", "phone"] = "app"
    special_instructions: Optional[str] = None
    estimated_delivery_time: Optional[str] = None
    distance: Optional[str] = None
    ready_time: Optional[datetime] = None
    picked_up_time: Optional[datetime] = None
    delivered_time: Optional[datetime] = None
    archived: bool = False
    archived_at: Optional[datetime] = None


class StatusUpdateRequest(BaseModel):
    status: OrderStatusLiteral


class MockOrdersRequest(BaseModel):
    seed: Optional[int] = Field(default=None, description="Seed for reproducible sample orders.")


class OrderStatsResponse(BaseModel):
    pending: int
    preparing: int
    ready: int
    outForDelivery: int
    totalOrders: int
    totalRevenue: float
    avgOrderValue: float


class BusinessLocationModel(BaseModel):
    name: str
    address: str
    lat: float
    lng: float
