"""Routing orchestration service."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from ...config import settings
from ...data.business_location import get_business_location
from ...models.domain import BusinessLocation, Destination, Order, Point, Route
from ...persistence.filesystem import FileStorage
from ...schemas.routing import (
    BatchRequest,
    BatchResponse,
    RouteModel,
    RouteStopModel,
)
from ..geospatial import is_valid_coordinate
from .batcher import batch
from .models import BatchRun

ROUTE_COLORS = (
    "#3b82f6",  # blue
    "#22c55e",  # green
    "#a855f7",  # purple
    "#f97316",  # orange
    "#ec4899",  # pink
    "#6366f1",  # indigo
    "#14b8a6",  # teal
    "#ef4444",  # red
)


class InvalidCoordinatesError(ValueError):
    """Raised under the ``reject`` policy when destinations carry unusable coordinates."""

    def __init__(self, destination_ids: Sequence[str]) -> None:
        self.destination_ids = list(destination_ids)
        super().__init__(
            f"Destinations with missing or invalid coordinates: {', '.join(self.destination_ids)}"
        )


def route_color(index: int) -> str:
    return ROUTE_COLORS[index % len(ROUTE_COLORS)]


def _check_coordinates(destinations: Sequence[Destination], policy: str) -> list[str]:
    """Apply the invalid-coordinate policy and return the ids that failed the check."""

    invalid_ids = [
        destination.destination_id
        for destination in destinations
        if not is_valid_coordinate(destination.location)
    ]
    if not invalid_ids:
        return []
    if policy == "reject":
        raise InvalidCoordinatesError(invalid_ids)
    if policy == "flag":
        logging.warning(
            f"{len(invalid_ids)} destination(s) have missing or invalid coordinates and will "
            f"likely be isolated into their own routes: {invalid_ids}"
        )
    return invalid_ids


def _route_overlay(origin: Point, route: Route) -> list[list[float]]:
    waypoints = [[origin.lat, origin.lng]]
    waypoints.extend([stop.destination.location.lat, stop.destination.location.lng] for stop in route.stops)
    waypoints.append([origin.lat, origin.lng])
    return waypoints


def _to_route_model(route: Route, origin: Point) -> RouteModel:
    return RouteModel(
        route_id=route.route_id,
        name=route.name,
        sequence=route.sequence,
        color=route_color(route.index),
        stop_count=len(route.stops),
        total_value=round(route.total_value, 2),
        estimated_minutes=round(route.estimated_minutes, 1),
        maps_url=route.maps_url,
        stops=[
            RouteStopModel(
                destination_id=stop.destination.destination_id,
                sequence=stop.sequence,
                lat=stop.destination.location.lat,
                lng=stop.destination.location.lng,
                value=stop.destination.value,
                address=stop.destination.address,
                arrival_min=round(stop.arrival_min, 1),
                distance_from_prev_miles=round(stop.distance_from_prev_miles, 2),
            )
            for stop in route.stops
        ],
        coordinates=_route_overlay(origin, route),
    )


def _persist_run(run: BatchRun) -> Optional[str]:
    try:
        run_dir = FileStorage().write_run(run)
    except OSError as exc:
        logging.warning(f"Failed to persist batching run: {exc}")
        return None
    logging.info(f"Batching run written to {run_dir}")
    return str(run_dir)


def batch_destinations(
    origin: BusinessLocation,
    destinations: Sequence[Destination],
    *,
    budget_minutes: Optional[float] = None,
    buffer_minutes: Optional[float] = None,
    persist: bool = False,
    source: str = "request",
) -> BatchResponse:
    budget = budget_minutes if budget_minutes is not None else settings.route_budget_minutes
    buffer = buffer_minutes if buffer_minutes is not None else settings.route_buffer_minutes
    if buffer >= budget:
        raise ValueError(f"buffer_minutes ({buffer}) must be smaller than budget_minutes ({budget}).")

    ids = [destination.destination_id for destination in destinations]
    if len(set(ids)) != len(ids):
        raise ValueError("Destination ids must be unique.")

    policy = settings.invalid_coordinate_policy
    flagged = _check_coordinates(destinations, policy)

    routes = batch(
        origin.point,
        destinations,
        budget,
        buffer,
        origin_address=origin.address,
        directions_base_url=settings.maps_directions_base_url,
    )
    logging.info(
        f"Batched {len(destinations)} destination(s) into {len(routes)} route(s) "
        f"from '{origin.name}' (budget={budget}min, buffer={buffer}min)"
    )

    metadata: dict = {
        "source": source,
        "origin": {
            "name": origin.name,
            "address": origin.address,
            "lat": origin.latitude,
            "lng": origin.longitude,
        },
        "budget_minutes": budget,
        "buffer_minutes": buffer,
        "destination_count": len(destinations),
        "route_count": len(routes),
        "total_value": round(sum(route.total_value for route in routes), 2),
        "coordinate_policy": policy,
        "overlay_source": "straight_line",
    }
    if policy == "flag":
        metadata["flagged_destinations"] = flagged

    run = BatchRun(origin=origin, routes=routes, metadata=metadata)
    if persist or settings.persist_route_runs:
        run_dir = _persist_run(run)
        if run_dir:
            metadata["run_directory"] = run_dir

    return BatchResponse(
        metadata=metadata,
        routes=[_to_route_model(route, origin.point) for route in routes],
    )


def batch_request(payload: BatchRequest) -> BatchResponse:
    """Batch ad-hoc destinations posted by a client."""

    if payload.origin is None:
        origin = get_business_location()
    else:
        origin = BusinessLocation(
            name="Custom origin",
            address=payload.origin.address or "",
            latitude=payload.origin.lat,
            longitude=payload.origin.lng,
        )
    destinations = [
        Destination(
            destination_id=item.id,
            location=Point(item.lat, item.lng),
            value=item.value,
            address=item.address,
        )
        for item in payload.destinations
    ]
    return batch_destinations(
        origin,
        destinations,
        budget_minutes=payload.budget_minutes,
        buffer_minutes=payload.buffer_minutes,
        persist=payload.persist,
    )


def route_orders(orders: Sequence[Order], *, persist: bool = False) -> BatchResponse:
    """Batch board orders from the configured business location."""

    return batch_destinations(
        get_business_location(),
        [order.to_destination() for order in orders],
        persist=persist,
        source="order_board",
    )
