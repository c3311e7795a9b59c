"""Domain models for orders, locations and delivery routes."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Literal, Optional

OrderStatus = Literal["pending", "preparing", "ready", "out_for_delivery", "delivered", "cancelled"]
OrderPriority = Literal["low", "medium", "high"]
OrderSource = Literal["web", "app", "phone"]


@dataclass(frozen=True, slots=True)
class Point:
    """A latitude/longitude pair in degrees."""

    lat: float
    lng: float


@dataclass(frozen=True, slots=True)
class Destination:
    """One delivery stop as seen by the batcher."""

    destination_id: str
    location: Point
    value: float
    address: Optional[str] = None


@dataclass(slots=True)
class RouteStop:
    destination: Destination
    sequence: int
    arrival_min: float
    distance_from_prev_miles: float


@dataclass(slots=True)
class Route:
    """An ordered batch of destinations served by one round trip from the origin."""

    sequence: int
    stops: List[RouteStop]
    total_value: float
    estimated_minutes: float
    return_distance_miles: float
    maps_url: str

    @property
    def route_id(self) -> str:
        return f"route_{self.sequence}"

    @property
    def name(self) -> str:
        return f"Route {self.sequence}"

    @property
    def index(self) -> int:
        return self.sequence - 1

    @property
    def destinations(self) -> List[Destination]:
        return [stop.destination for stop in self.stops]


@dataclass(slots=True)
class BusinessLocation:
    """The dispatch point every route starts and ends at."""

    name: str
    address: str
    latitude: float
    longitude: float

    @property
    def point(self) -> Point:
        return Point(self.latitude, self.longitude)


@dataclass(slots=True)
class OrderItem:
    name: str
    quantity: int
    price: float
    modifiers: List[str] = field(default_factory=list)


@dataclass(slots=True)
class Order:
    """Represents a customer order tracked on the dispatch board."""

    order_id: str
    source_order_id: str
    customer_name: str
    customer_phone: str
    items: List[OrderItem]
    total_amount: float
    status: OrderStatus
    priority: OrderPriority
    created_at: datetime
    delivery_address: str
    delivery_location: Point
    payment_method: str
    order_source: OrderSource
    special_instructions: Optional[str] = None
    estimated_delivery_time: Optional[str] = None
    distance: Optional[str] = None
    ready_time: Optional[datetime] = None
    picked_up_time: Optional[datetime] = None
    delivered_time: Optional[datetime] = None
    archived: bool = False
    archived_at: Optional[datetime] = None

    def to_destination(self) -> Destination:
        return Destination(
            destination_id=self.order_id,
            location=self.delivery_location,
            value=self.total_amount,
            address=self.delivery_address,
        )
