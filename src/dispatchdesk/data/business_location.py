"""Business location lookup backed by runtime settings."""

from __future__ import annotations

from ..config import settings
from ..models.domain import BusinessLocation


def get_business_location() -> BusinessLocation:
    """Return the configured dispatch location.

    Values come from ``DISPATCH_BUSINESS_*`` environment variables and fall back
    to the built-in defaults.
    """
    return BusinessLocation(
        name=settings.business_name.strip(),
        address=settings.business_address.strip(),
        latitude=settings.business_lat,
        longitude=settings.business_lng,
    )
