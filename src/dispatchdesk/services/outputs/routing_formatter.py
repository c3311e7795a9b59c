"""Serializers for routing outputs."""

from __future__ import annotations

import csv
import io

from ..routing.models import BatchRun


def batch_run_to_json(run: BatchRun) -> dict:
    return {
        "origin": {
            "name": run.origin.name,
            "address": run.origin.address,
            "lat": run.origin.latitude,
            "lng": run.origin.longitude,
        },
        "metadata": run.metadata,
        "routes": [
            {
                "route_id": route.route_id,
                "name": route.name,
                "stop_count": len(route.stops),
                "total_value": route.total_value,
                "estimated_minutes": route.estimated_minutes,
                "maps_url": route.maps_url,
                "stops": [
                    {
                        "destination_id": stop.destination.destination_id,
                        "sequence": stop.sequence,
                        "lat": stop.destination.location.lat,
                        "lng": stop.destination.location.lng,
                        "value": stop.destination.value,
                        "address": stop.destination.address,
                        "arrival_min": stop.arrival_min,
                        "distance_from_prev_miles": stop.distance_from_prev_miles,
                    }
                    for stop in route.stops
                ],
            }
            for route in run.routes
        ],
    }


def batch_run_to_csv(run: BatchRun) -> str:
    buffer = io.StringIO()
    fieldnames = [
        "route_id",
        "sequence",
        "destination_id",
        "address",
        "lat",
        "lng",
        "value",
        "arrival_min",
        "distance_from_prev_miles",
        "route_total_value",
        "route_estimated_minutes",
    ]
    writer = csv.DictWriter(buffer, fieldnames=fieldnames)
    writer.writeheader()
    for route in run.routes:
        for stop in route.stops:
            writer.writerow(
                {
                    "route_id": route.route_id,
                    "sequence": stop.sequence,
                    "destination_id": stop.destination.destination_id,
                    "address": stop.destination.address or "",
                    "lat": stop.destination.location.lat,
                    "lng": stop.destination.location.lng,
                    "value": stop.destination.value,
                    "arrival_min": stop.arrival_min,
                    "distance_from_prev_miles": stop.distance_from_prev_miles,
                    "route_total_value": route.total_value,
                    "route_estimated_minutes": route.estimated_minutes,
                }
            )
    return buffer.getvalue()
