"""Destination Graph - named destinations with precedence edges.

Built once per planning call from parsed definitions and discarded afterwards.
"""

from collections.abc import Iterable, Iterator

from ..core.parser import DefinitionParser
from ..models.definition import Definition
from ..models.destination import Destination
from ..observability.logger import get_logger
from ..utils.exceptions import SelfDependencyError, UnknownDestinationError

logger = get_logger(__name__)


class DestinationGraph:
    """
    Directed graph of destinations keyed by name.

    Features:
    - Destinations deduplicated by name (one Destination object per name)
    - Registration order preserved (drives the route order)
    - Predecessors held by name, always pointing at a registered destination
    - Self-dependency rejection
    """

    def __init__(self) -> None:
        """Initialize empty destination graph."""
        self.nodes: dict[str, Destination] = {}

    def add_destination(self, name: str) -> Destination:
        """
        Register a destination, reusing an existing one with the same name.

        Args:
            name: Destination name

        Returns:
            The registered Destination
        """
        if name in self.nodes:
            return self.nodes[name]

        destination = Destination(name=name)
        self.nodes[name] = destination
        logger.debug("Added destination to graph", destination=name)
        return destination

    def add_dependency(self, dependent: str, dependency: str, line_number: int = 0) -> None:
        """
        Add a precedence edge: `dependency` must be visited before `dependent`.

        Unknown dependencies are registered on demand.

        Args:
            dependent: Destination that depends on another (visited AFTER)
            dependency: Destination that is depended upon (visited BEFORE)
            line_number: Definition line, for error messages

        Raises:
            ValueError: If the dependent destination is not registered
            SelfDependencyError: If a destination depends on itself
        """
        if dependent not in self.nodes:
            raise ValueError(f"Dependent destination not found: {dependent}")

        if dependent == dependency:
            logger.error("Destination depends on itself", destination=dependent, line=line_number)
            raise SelfDependencyError(dependent, line_number)

        if dependency not in self.nodes:
            self.add_destination(dependency)

        if self.nodes[dependent].add_dependency(dependency):
            logger.debug("Added dependency edge", dependent=dependent, dependency=dependency)

    def build_from_definitions(
        self, definitions: list[Definition], strict_references: bool = False
    ) -> None:
        """
        Populate the graph from parsed definitions.

        First pass registers every declared destination, second pass wires the
        dependencies, so the result does not depend on which line mentions a
        destination first.

        Args:
            definitions: Parsed definitions in input order
            strict_references: Reject dependencies on undeclared destinations
                instead of registering them on demand

        Raises:
            SelfDependencyError: If a destination depends on itself
            UnknownDestinationError: If strict_references is set and a
                dependency was never declared
        """
        logger.debug("Building destination graph", definition_count=len(definitions))

        # First pass: declared destinations
        for definition in definitions:
            self.add_destination(definition.name)

        declared = set(self.nodes)

        # Second pass: dependencies
        for definition in definitions:
            if not definition.has_dependency:
                continue

            if strict_references and definition.dependency not in declared:
                logger.error(
                    "Dependent destination is not a valid destination",
                    destination=definition.name,
                    dependency=definition.dependency,
                    line=definition.line_number,
                )
                raise UnknownDestinationError(
                    definition.name, definition.dependency, definition.line_number
                )

            self.add_dependency(definition.name, definition.dependency, definition.line_number)

        logger.debug(
            "Destination graph built",
            destinations=len(self.nodes),
            edges=self.edge_count,
        )

    @property
    def edge_count(self) -> int:
        """Number of precedence edges."""
        return sum(len(node.dependencies) for node in self.nodes.values())

    def dependencies_of(self, name: str) -> list[Destination]:
        """
        Resolve a destination's predecessors to Destination objects.

        Args:
            name: Destination name

        Returns:
            Predecessors in first-declared order
        """
        return [self.nodes[dep] for dep in self.nodes[name].dependencies]

    def to_dot(self) -> str:
        """
        Generate DOT format representation of the destination graph.

        Edges point from the destination visited first to the one visited after.

        Returns:
            String containing the Graphviz DOT definition
        """
        lines = ["digraph DestinationGraph {"]
        lines.append("    rankdir=LR;")
        lines.append("    node [shape=box style=filled];")

        for node in self.nodes.values():
            # Green for starting points, blue for destinations with predecessors
            color = "#cce5ff" if node.has_dependencies else "#d4edda"
            name = node.name.replace('"', '\\"')
            lines.append(f'    "{name}" [fillcolor="{color}"];')

            for dep in node.dependencies:
                dep_name = dep.replace('"', '\\"')
                lines.append(f'    "{dep_name}" -> "{name}";')

        lines.append("}")
        return "\n".join(lines)

    def __contains__(self, name: object) -> bool:
        return name in self.nodes

    def __iter__(self) -> Iterator[Destination]:
        return iter(self.nodes.values())

    def __len__(self) -> int:
        return len(self.nodes)


def build_graph(definitions: Iterable[str], strict_references: bool = False) -> DestinationGraph:
    """
    Parse definition strings and build their destination graph.

    Args:
        definitions: Definition strings such as ["x", "y => z", "z"]
        strict_references: Reject dependencies that are never declared

    Returns:
        Populated DestinationGraph

    Raises:
        InvalidDefinitionError: If a definition is malformed or self-dependent
    """
    graph = DestinationGraph()
    graph.build_from_definitions(
        DefinitionParser().parse(definitions), strict_references=strict_references
    )
    return graph
