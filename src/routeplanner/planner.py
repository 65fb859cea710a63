"""Route Planner - plans a holiday route from destination definitions.

A definition names a destination and optionally the one destination that has
to be visited before it ("y => z": visit z before y). Planning runs four
fixed steps, each fatal on error:

1. Parse    definitions -> Definition models      (InvalidDefinitionError)
2. Build    definitions -> DestinationGraph       (SelfDependencyError)
3. Order    graph       -> Route                  (CyclicDependencyError)
4. Render   route       -> "x z y"
"""

from collections.abc import Iterable, Sequence

from .config import PlannerConfig
from .core.parser import DefinitionParser
from .core.renderer import render_route
from .dependency.graph import DestinationGraph
from .dependency.orderer import RouteOrderer
from .models.definition import Definition
from .models.route import RoutePlan
from .observability.logger import get_logger, verbose
from .utils.exceptions import EmptyInputError

logger = get_logger(__name__)


class RoutePlanner:
    """
    Plan a holiday route.

    Every call builds its own graph and route; a planner holds no state
    between calls and can be reused.
    """

    def __init__(self, config: PlannerConfig | None = None) -> None:
        """
        Initialize the planner.

        Args:
            config: Planning behavior (default: PlannerConfig())
        """
        self.config = config or PlannerConfig()
        self.parser = DefinitionParser()
        self.orderer = RouteOrderer()

    def plan_route(self, definitions: Sequence[str] | None) -> str:
        """
        Plan a route and render it as text.

        Args:
            definitions: Destination definitions such as ["x", "y => z", "z"]

        Returns:
            Space-separated destination names in visiting order

        Raises:
            EmptyInputError: If no definitions were given
            InvalidDefinitionError: If a definition is malformed or self-dependent
            CyclicDependencyError: If the dependencies contain a cycle
        """
        plan = self.plan(definitions)
        result = render_route(plan.route)
        logger.info("Planned route", route=result)
        return result

    def plan(self, definitions: Sequence[str] | None) -> RoutePlan:
        """
        Plan a route from definition strings.

        Args:
            definitions: Destination definitions in input order

        Returns:
            RoutePlan with the graph and the ordered route
        """
        self._require_definitions(definitions)
        logger.info("Planning route for destinations", definitions=list(definitions))
        return self.plan_definitions(self.parser.parse(definitions))

    def plan_numbered(self, numbered: Sequence[tuple[int, str]]) -> RoutePlan:
        """
        Plan a route from definitions carrying their source line numbers.

        Args:
            numbered: (line_number, text) pairs, e.g. from DefinitionReader

        Returns:
            RoutePlan with the graph and the ordered route
        """
        self._require_definitions(numbered)
        logger.info("Planning route for destinations", definitions=[t for _, t in numbered])
        return self.plan_definitions(self.parser.parse_numbered(numbered))

    def plan_definitions(self, definitions: Iterable[Definition]) -> RoutePlan:
        """
        Plan a route from already parsed definitions.

        Args:
            definitions: Parsed definitions

        Returns:
            RoutePlan with the graph and the ordered route
        """
        definitions = list(definitions)
        self._require_definitions(definitions)

        graph = DestinationGraph()
        graph.build_from_definitions(definitions, strict_references=self.config.strict_references)
        verbose(
            logger,
            "Created destination definitions",
            destinations=len(graph),
            edges=graph.edge_count,
        )

        route = self.orderer.order(graph)
        logger.debug("Planned holiday route of destinations", route=route.names)

        return RoutePlan(graph=graph, route=route, definition_count=len(definitions))

    def _require_definitions(self, definitions: Sequence[object] | None) -> None:
        """Raise EmptyInputError for None or empty input."""
        if definitions is None or len(definitions) == 0:
            logger.error("No destinations were present")
            raise EmptyInputError()


def plan_route(definitions: Sequence[str] | None, config: PlannerConfig | None = None) -> str:
    """
    Plan a route and render it as text.

    Example:
        >>> plan_route(["x", "y => z", "z"])
        'x z y'

    Args:
        definitions: Destination definitions
        config: Optional planning behavior

    Returns:
        Space-separated destination names in visiting order
    """
    return RoutePlanner(config).plan_route(definitions)
