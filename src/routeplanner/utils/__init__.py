"""Utility functions and exceptions."""

from .exceptions import (
    CyclicDependencyError,
    EmptyInputError,
    InvalidDefinitionError,
    RoutePlannerError,
    SelfDependencyError,
    UnknownDestinationError,
)

__all__ = [
    "RoutePlannerError",
    "EmptyInputError",
    "InvalidDefinitionError",
    "SelfDependencyError",
    "UnknownDestinationError",
    "CyclicDependencyError",
]
