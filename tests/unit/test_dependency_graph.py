"""Tests for the DestinationGraph class."""

import pytest

from src.routeplanner.dependency.graph import DestinationGraph, build_graph
from src.routeplanner.models.definition import Definition
from src.routeplanner.utils.exceptions import (
    InvalidDefinitionError,
    SelfDependencyError,
    UnknownDestinationError,
)


class TestDestinationGraph:
    """Test suite for DestinationGraph."""

    def create_definitions(self, *texts):
        """Helper to build numbered Definition models."""
        return [
            Definition(**Definition.split(text), line_number=line)
            for line, text in enumerate(texts, start=1)
        ]

    def test_add_destination(self, graph):
        """Test adding destinations to the graph."""
        node = graph.add_destination("x")

        assert "x" in graph
        assert graph.nodes["x"] is node
        assert node.dependencies == []

    def test_add_destination_reuses_existing(self, graph):
        """Same name, same Destination object."""
        first = graph.add_destination("x")
        second = graph.add_destination("x")

        assert first is second
        assert len(graph) == 1

    def test_add_dependency(self, graph):
        """Test adding dependencies between destinations."""
        graph.add_destination("y")
        graph.add_destination("z")

        graph.add_dependency("y", "z")

        assert graph.nodes["y"].dependencies == ["z"]
        assert graph.nodes["z"].dependencies == []
        assert graph.edge_count == 1

    def test_add_dependency_creates_unknown_dependency(self, graph):
        """Dependencies are registered on demand."""
        graph.add_destination("y")

        graph.add_dependency("y", "z")

        assert list(graph.nodes) == ["y", "z"]

    def test_add_dependency_twice_is_noop(self, graph):
        """Edges have set semantics."""
        graph.add_destination("y")
        graph.add_dependency("y", "z")
        graph.add_dependency("y", "z")

        assert graph.nodes["y"].dependencies == ["z"]
        assert graph.edge_count == 1

    def test_add_dependency_unknown_dependent(self, graph):
        """The dependent side must already be registered."""
        with pytest.raises(ValueError, match="Dependent destination not found"):
            graph.add_dependency("y", "z")

    def test_self_dependency(self, graph):
        """A destination can't depend on itself."""
        graph.add_destination("x")

        with pytest.raises(SelfDependencyError) as exc:
            graph.add_dependency("x", "x", line_number=4)

        assert exc.value.destination == "x"
        assert exc.value.line_number == 4
        assert graph.nodes["x"].dependencies == []

    def test_build_from_definitions(self, graph):
        """Declared destinations come first, on-demand ones after."""
        definitions = self.create_definitions("a => q", "b => a", "c", "a => c")

        graph.build_from_definitions(definitions)

        assert list(graph.nodes) == ["a", "b", "c", "q"]
        assert graph.nodes["a"].dependencies == ["q", "c"]
        assert graph.nodes["b"].dependencies == ["a"]
        assert graph.edge_count == 3

    def test_build_is_independent_of_declaration_position(self, graph):
        """A destination used as dependency before its own line is the same node."""
        definitions = self.create_definitions("y => z", "z")

        graph.build_from_definitions(definitions)

        assert list(graph.nodes) == ["y", "z"]
        assert graph.dependencies_of("y") == [graph.nodes["z"]]

    def test_build_strict_references(self, graph):
        """Strict mode rejects undeclared dependencies."""
        definitions = self.create_definitions("x", "y => z")

        with pytest.raises(UnknownDestinationError) as exc:
            graph.build_from_definitions(definitions, strict_references=True)

        assert exc.value.line_number == 2
        assert "[z]" in str(exc.value)

    def test_build_self_dependency(self, graph):
        """Self-dependency found during the second pass."""
        definitions = self.create_definitions("a", "b => b")

        with pytest.raises(SelfDependencyError):
            graph.build_from_definitions(definitions)

    def test_iteration_follows_registration_order(self, graph):
        """Iterating yields Destination objects in registration order."""
        for name in ("c", "a", "b"):
            graph.add_destination(name)

        assert [node.name for node in graph] == ["c", "a", "b"]


class TestGraphDot:
    """Test DOT export."""

    def test_to_dot(self):
        """Test DOT generation."""
        graph = DestinationGraph()
        graph.add_destination("y")
        graph.add_destination("z")
        graph.add_dependency("y", "z")

        dot = graph.to_dot()

        assert dot.startswith("digraph DestinationGraph {")
        assert '"y" [fillcolor="#cce5ff"];' in dot
        assert '"z" [fillcolor="#d4edda"];' in dot
        assert '"z" -> "y";' in dot
        assert dot.endswith("}")

    def test_to_dot_escapes_quotes(self):
        """Quotes in names don't break the DOT output."""
        graph = DestinationGraph()
        graph.add_destination('Cafe "Central"')

        assert '"Cafe \\"Central\\""' in graph.to_dot()

    def test_to_dot_empty_graph(self):
        """An empty graph is still valid DOT."""
        dot = DestinationGraph().to_dot()

        assert dot.splitlines()[0] == "digraph DestinationGraph {"
        assert dot.splitlines()[-1] == "}"


class TestBuildGraph:
    """Test build_graph() on definition strings."""

    def test_build_graph(self):
        graph = build_graph(["x", "y => z", "y => x", "z"])

        assert list(graph.nodes) == ["x", "y", "z"]
        assert graph.nodes["y"].dependencies == ["z", "x"]

    def test_build_graph_strict(self):
        with pytest.raises(UnknownDestinationError):
            build_graph(["y => z"], strict_references=True)

    def test_build_graph_invalid_definition(self):
        with pytest.raises(InvalidDefinitionError) as exc:
            build_graph(["x", "  => z"])

        assert exc.value.line_number == 2
