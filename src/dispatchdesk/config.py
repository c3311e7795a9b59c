"""Application configuration and settings management."""

from pathlib import Path
from typing import Any, Literal, Optional

import json
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="DISPATCH_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Dispatch Desk API"
    api_prefix: str = "/api"
    data_root: Path = Field(default=Path("data"), description="Root directory for run outputs.")

    business_name: str = Field(default="Square Bistro")
    business_address: str = Field(
        default="123 Main Street, Middletown, CT 06457",
        description="Display address of the dispatch location, used in directions links.",
    )
    business_lat: float = Field(default=41.5623)
    business_lng: float = Field(default=-72.6509)

    route_budget_minutes: float = Field(default=45.0, gt=0.0, description="Hard round-trip ceiling per route.")
    route_buffer_minutes: float = Field(
        default=10.0,
        gt=0.0,
        description="Buffer subtracted from the budget to get the soft cap for adding stops.",
    )
    maps_directions_base_url: str = Field(default="https://www.google.com/maps/dir")
    invalid_coordinate_policy: Literal["include", "flag", "reject"] = Field(
        default="include",
        description="How the routing service treats destinations with missing or placeholder coordinates.",
    )

    seed_mock_orders: bool = Field(default=True, description="Populate the order board with sample orders on startup.")
    mock_order_seed: Optional[int] = Field(default=None)
    mock_delivery_radius_miles: float = Field(default=2.0, gt=0.0)
    persist_route_runs: bool = Field(default=False, description="Always write batching runs to the data root.")

    frontend_allowed_origins: tuple[str, ...] = Field(
        default=(
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    @field_validator("data_root", mode="before")
    @classmethod
    def _expand_path(cls, value: Any) -> Path:
        path_value = value if isinstance(value, Path) else Path(str(value))
        return path_value.expanduser().resolve()

    @field_validator("frontend_allowed_origins", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item) for item in parsed)
            except (json.JSONDecodeError, TypeError):
                pass
            if "," in value:
                return tuple(item.strip() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip(),)
        return tuple()

    @model_validator(mode="after")
    def _check_buffer_below_budget(self) -> "Settings":
        if self.route_buffer_minutes >= self.route_budget_minutes:
            raise ValueError(
                f"route_buffer_minutes ({self.route_buffer_minutes}) must be smaller than "
                f"route_budget_minutes ({self.route_budget_minutes})"
            )
        return self


settings = Settings()
