"""Business location endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...data.business_location import get_business_location
from ...schemas.orders import BusinessLocationModel

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("/business-location", response_model=BusinessLocationModel, status_code=status.HTTP_200_OK)
def business_location() -> BusinessLocationModel:
    location = get_business_location()
    return BusinessLocationModel(
        name=location.name,
        address=location.address,
        lat=location.latitude,
        lng=location.longitude,
    )
