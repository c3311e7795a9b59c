"""Routing domain models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from ...models.domain import BusinessLocation, Route


@dataclass(slots=True)
class BatchRun:
    """One batching pass over a destination set, with its run metadata."""

    origin: BusinessLocation
    routes: List[Route]
    metadata: dict = field(default_factory=dict)
