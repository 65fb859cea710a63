"""Dependency management for destination ordering."""

from .graph import DestinationGraph, build_graph
from .orderer import RouteOrderer

__all__ = [
    "DestinationGraph",
    "RouteOrderer",
    "build_graph",
]
