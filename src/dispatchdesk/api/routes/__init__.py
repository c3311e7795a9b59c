"""Route group exports."""

from . import business, health, orders, routes

__all__ = ["business", "health", "orders", "routes"]
