"""Greedy nearest-neighbour batching of deliveries into time-bounded round trips."""

from __future__ import annotations

import math
from typing import Optional, Sequence
from urllib.parse import quote

from ...models.domain import Destination, Point, Route, RouteStop
from ..geospatial import distance_miles, stop_minutes, travel_minutes

DEFAULT_BUDGET_MINUTES = 45.0
DEFAULT_BUFFER_MINUTES = 10.0
DEFAULT_DIRECTIONS_BASE_URL = "https://www.google.com/maps/dir"


def _address_segment(address: Optional[str], point: Point) -> str:
    label = address if address else f"{point.lat},{point.lng}"
    return quote(label, safe="")


def build_directions_url(
    origin: Point,
    stops: Sequence[Destination],
    *,
    origin_address: Optional[str] = None,
    base_url: str = DEFAULT_DIRECTIONS_BASE_URL,
) -> str:
    """Deep link for origin -> stop1 -> ... -> origin, one URL-encoded segment per place."""

    origin_segment = _address_segment(origin_address, origin)
    segments = [origin_segment]
    segments.extend(_address_segment(stop.address, stop.location) for stop in stops)
    segments.append(origin_segment)
    return "/".join([base_url.rstrip("/"), *segments])


def _nearest_index(current: Point, pool: Sequence[Destination]) -> int:
    # Strict comparison keeps the earliest pool member on ties.
    nearest_distance = math.inf
    nearest_index = 0
    for index, destination in enumerate(pool):
        distance = distance_miles(current, destination.location)
        if distance < nearest_distance:
            nearest_distance = distance
            nearest_index = index
    return nearest_index


def _close_route(
    *,
    sequence: int,
    origin: Point,
    stops: list[RouteStop],
    elapsed: float,
    origin_address: Optional[str],
    base_url: str,
) -> Route:
    last_location = stops[-1].destination.location
    return_distance = distance_miles(last_location, origin)
    destinations = [stop.destination for stop in stops]
    return Route(
        sequence=sequence,
        stops=stops,
        total_value=sum(destination.value for destination in destinations),
        estimated_minutes=elapsed + travel_minutes(return_distance),
        return_distance_miles=return_distance,
        maps_url=build_directions_url(
            origin,
            destinations,
            origin_address=origin_address,
            base_url=base_url,
        ),
    )


def batch(
    origin: Point,
    destinations: Sequence[Destination],
    budget_minutes: float = DEFAULT_BUDGET_MINUTES,
    buffer_minutes: float = DEFAULT_BUFFER_MINUTES,
    *,
    origin_address: Optional[str] = None,
    directions_base_url: str = DEFAULT_DIRECTIONS_BASE_URL,
) -> list[Route]:
    """Partition destinations into round-trip routes from `origin`.

    Each route starts with the first unassigned destination and then greedily
    extends to the nearest remaining one. A route stops accepting stops once its
    elapsed time reaches ``budget_minutes - buffer_minutes``, or when the next
    stop plus the drive back to the origin would exceed ``budget_minutes``. A
    route always takes at least one stop, so far-away destinations end up
    alone rather than dropped.

    The input sequence is never modified; the same input order always yields
    the same routes.
    """

    if not (budget_minutes > 0 and 0 <= buffer_minutes < budget_minutes):
        raise ValueError(
            f"Invalid route budget: budget_minutes={budget_minutes}, buffer_minutes={buffer_minutes}. "
            "The buffer must be non-negative and smaller than the budget."
        )

    soft_cap = budget_minutes - buffer_minutes
    pool = list(destinations)
    routes: list[Route] = []

    while pool:
        stops: list[RouteStop] = []
        current = origin
        elapsed = 0.0
        candidate_index: Optional[int] = 0

        while candidate_index is not None and elapsed < soft_cap:
            candidate = pool[candidate_index]
            leg_distance = distance_miles(current, candidate.location)
            leg_minutes = stop_minutes(leg_distance)
            return_minutes = travel_minutes(distance_miles(candidate.location, origin))

            if elapsed + leg_minutes + return_minutes > budget_minutes and stops:
                break

            pool.pop(candidate_index)
            elapsed += leg_minutes
            current = candidate.location
            stops.append(
                RouteStop(
                    destination=candidate,
                    sequence=len(stops) + 1,
                    arrival_min=elapsed,
                    distance_from_prev_miles=leg_distance,
                )
            )

            candidate_index = _nearest_index(current, pool) if pool else None

        routes.append(
            _close_route(
                sequence=len(routes) + 1,
                origin=origin,
                stops=stops,
                elapsed=elapsed,
                origin_address=origin_address,
                base_url=directions_base_url,
            )
        )

    return routes
