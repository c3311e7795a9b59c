"""Routing request/response schemas."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class PointModel(BaseModel):
    lat: float = Field(..., allow_inf_nan=False)
    lng: float = Field(..., allow_inf_nan=False)


class OriginModel(PointModel):
    address: Optional[str] = Field(default=None, description="Display address used in the directions link.")


class DestinationModel(BaseModel):
    id: str
    lat: float = Field(..., allow_inf_nan=False)
    lng: float = Field(..., allow_inf_nan=False)
    value: float = Field(default=0.0, allow_inf_nan=False)
    address: Optional[str] = None


class BatchRequest(BaseModel):
    origin: Optional[OriginModel] = Field(
        default=None,
        description="Dispatch point. Defaults to the configured business location.",
    )
    destinations: List[DestinationModel] = Field(default_factory=list)
    budget_minutes: Optional[float] = Field(default=None, gt=0)
    buffer_minutes: Optional[float] = Field(default=None, ge=0)
    persist: bool = False


class RouteStopModel(BaseModel):
    destination_id: str
    sequence: int
    lat: float
    lng: float
    value: float
    address: Optional[str] = None
    arrival_min: float
    distance_from_prev_miles: float


class RouteModel(BaseModel):
    route_id: str
    name: str
    sequence: int
    color: str
    stop_count: int
    total_value: float
    estimated_minutes: float
    maps_url: str
    stops: List[RouteStopModel]
    coordinates: List[List[float]] = Field(
        default_factory=list,
        description="Straight-line overlay from origin through every stop and back, as [lat, lng] pairs.",
    )


class BatchResponse(BaseModel):
    metadata: dict
    routes: List[RouteModel]
