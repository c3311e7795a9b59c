"""Sample orders scattered around the business location."""

from __future__ import annotations

import math
import random
from datetime import datetime, timedelta, timezone
from typing import Optional

from ...models.domain import BusinessLocation, Order, OrderItem, Point
from ..geospatial import MILES_PER_DEGREE_LAT, offset_point

CUSTOMER_NAMES = (
    "Sarah Johnson",
    "Mike Chen",
    "Emily Rodriguez",
    "David Wilson",
    "Lisa Park",
    "James Thompson",
    "Maria Garcia",
    "Robert Kim",
)
PHONE_NUMBERS = tuple(f"(555) 123-{index:04d}" for index in range(1, len(CUSTOMER_NAMES) + 1))
STREET_NAMES = (
    "Oak Street",
    "Pine Avenue",
    "Maple Drive",
    "Cedar Lane",
    "Elm Street",
    "Birch Road",
    "Willow Way",
    "Cherry Street",
    "Hickory Lane",
    "Ash Avenue",
)
STREET_NUMBERS = ("123", "456", "789", "234", "567", "890", "345", "678", "901", "432")
DEFAULT_CITY_TAIL = "Local City, ST 12345"


def random_point_near(origin: Point, radius_miles: float, rng: random.Random) -> Point:
    angle = rng.random() * 2 * math.pi
    distance = rng.random() * radius_miles
    return offset_point(origin, distance, angle)


def local_address(business_address: str, index: int) -> str:
    """Street address on a fixed list, in the same city/state/zip as the business."""

    parts = business_address.split(",")
    city_tail = ",".join(parts[1:]).strip() if len(parts) > 1 else DEFAULT_CITY_TAIL
    street = STREET_NAMES[index % len(STREET_NAMES)]
    number = STREET_NUMBERS[index % len(STREET_NUMBERS)]
    return f"{number} {street}, {city_tail}"


def _rough_distance_label(origin: Point, point: Point) -> str:
    lat_diff = point.lat - origin.lat
    lng_diff = point.lng - origin.lng
    miles = math.sqrt(lat_diff * lat_diff + lng_diff * lng_diff) * MILES_PER_DEGREE_LAT
    return f"{miles:.1f} mi"


def _initial_status(index: int) -> str:
    if index < 2:
        return "ready"
    if index < 4:
        return "preparing"
    return "pending"


def generate_mock_orders(
    location: BusinessLocation,
    *,
    radius_miles: float = 2.0,
    seed: Optional[int] = None,
    now: Optional[datetime] = None,
) -> list[Order]:
    rng = random.Random(seed)
    now = now or datetime.now(timezone.utc)
    origin = location.point

    orders: list[Order] = []
    for index, name in enumerate(CUSTOMER_NAMES):
        point = random_point_near(origin, radius_miles, rng)
        orders.append(
            Order(
                order_id=str(index + 1),
                source_order_id=f"sq_00{index + 1}",
                customer_name=name,
                customer_phone=PHONE_NUMBERS[index],
                items=[OrderItem(name="Pizza", quantity=1, price=18.99)],
                total_amount=18.99,
                status=_initial_status(index),
                priority="medium",
                created_at=now - timedelta(minutes=(index + 1) * 10),
                delivery_address=local_address(location.address, index),
                delivery_location=point,
                payment_method="Square",
                order_source="app",
                distance=_rough_distance_label(origin, point),
            )
        )
    return orders
