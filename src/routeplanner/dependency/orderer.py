"""Route Orderer - depth-first topological ordering of destinations.

ALGORITHM:
For every destination, in graph registration order, insert it into the route
with a fresh ancestor path:

    insert(destination, route, ancestors):
        if destination already on route: return
        if destination has predecessors:
            push destination onto ancestors
            for each predecessor (first-declared order):
                if predecessor in ancestors: CYCLE
                insert(predecessor, route, ancestors)
        add destination to route

Notes:
- Route membership doubles as the "visited" marker; there is no separate set.
- Ancestors are never popped during one top-level insertion. Each top-level
  destination starts with an empty path.
- Every destination on a cycle eventually gets its own top-level insertion,
  so every cycle is reported.

Example:
    x, y => z, z
    x: no predecessors              route: x
    y: ancestors [y], insert z      route: x z
       then y                       route: x z y
    z: already placed
"""

from ..models.destination import Destination
from ..models.route import Route
from ..observability.logger import get_logger, trace, verbose
from ..utils.exceptions import CyclicDependencyError
from .graph import DestinationGraph

logger = get_logger(__name__)


class RouteOrderer:
    """Order destinations so every predecessor is visited first."""

    def order(self, graph: DestinationGraph) -> Route:
        """
        Compute the visiting order for all destinations in the graph.

        Args:
            graph: Populated destination graph

        Returns:
            Route holding every destination exactly once

        Raises:
            CyclicDependencyError: If the dependencies contain a cycle
        """
        route = Route()
        for destination in graph:
            ancestors: list[str] = []
            self._insert(graph, destination, route, ancestors)

        verbose(logger, "Route ordered", destinations=len(route), route=route.names)
        return route

    def _insert(
        self,
        graph: DestinationGraph,
        destination: Destination,
        route: Route,
        ancestors: list[str],
    ) -> None:
        """
        Place a destination after all of its predecessors.

        Args:
            graph: Graph the destination belongs to
            destination: Destination to place
            route: Route built so far
            ancestors: Destinations being resolved in this top-level insertion

        Raises:
            CyclicDependencyError: If a predecessor is already on the ancestor path
        """
        if destination in route:
            trace(logger, "Destination already placed", destination=destination.name)
            return

        if destination.has_dependencies:
            ancestors.append(destination.name)
            for predecessor in graph.dependencies_of(destination.name):
                if predecessor.name in ancestors:
                    logger.error(
                        "Cyclic dependency on destination",
                        destination=destination.name,
                        predecessor=predecessor.name,
                        path=list(ancestors),
                    )
                    raise CyclicDependencyError(destination.name, list(ancestors))
                trace(
                    logger,
                    "Resolving predecessor",
                    destination=destination.name,
                    predecessor=predecessor.name,
                    depth=len(ancestors),
                )
                self._insert(graph, predecessor, route, ancestors)

        route.add(destination)
        trace(logger, "Placed destination", destination=destination.name, position=len(route))
