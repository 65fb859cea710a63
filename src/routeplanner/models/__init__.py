"""Data models for the Route Planner."""

from .definition import Definition
from .destination import Destination
from .route import Route, RoutePlan

__all__ = [
    "Definition",
    "Destination",
    "Route",
    "RoutePlan",
]
