"""Route and plan result models."""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .destination import Destination

if TYPE_CHECKING:
    from ..dependency.graph import DestinationGraph


class Route:
    """
    Insertion-ordered set of destinations.

    The first insertion of a destination fixes its position; adding it again
    is a no-op. Membership is decided by destination name.
    """

    def __init__(self) -> None:
        self._stops: dict[str, Destination] = {}

    def add(self, destination: Destination) -> bool:
        """
        Append a destination unless it is already on the route.

        Args:
            destination: Destination to place

        Returns:
            True if the destination was placed, False if it was already present
        """
        if destination.name in self._stops:
            return False
        self._stops[destination.name] = destination
        return True

    def position(self, name: str) -> int:
        """
        Zero-based position of a destination on the route.

        Raises:
            KeyError: If the destination is not on the route
        """
        for index, stop in enumerate(self._stops):
            if stop == name:
                return index
        raise KeyError(name)

    @property
    def names(self) -> list[str]:
        """Destination names in route order."""
        return list(self._stops)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Destination):
            return item.name in self._stops
        return item in self._stops

    def __iter__(self) -> Iterator[Destination]:
        return iter(self._stops.values())

    def __len__(self) -> int:
        return len(self._stops)

    def __repr__(self) -> str:
        return f"Route({self.names!r})"


@dataclass
class RoutePlan:
    """
    Result of a planning call.

    Attributes:
        graph: Destination graph built from the definitions
        route: Destinations in visiting order
        definition_count: Number of definitions the plan was built from
    """

    graph: "DestinationGraph"
    route: Route
    definition_count: int

    @property
    def destination_count(self) -> int:
        """Number of distinct destinations on the route."""
        return len(self.route)

    @property
    def edge_count(self) -> int:
        """Number of precedence edges in the graph."""
        return self.graph.edge_count
