"""Unit tests for RouteOrderer."""

import pytest

from src.routeplanner.dependency.graph import DestinationGraph
from src.routeplanner.dependency.orderer import RouteOrderer
from src.routeplanner.utils.exceptions import CyclicDependencyError


def build_graph(edges, destinations=()):
    """Helper: register destinations, then (dependent, dependency) edges."""
    graph = DestinationGraph()
    for name in destinations:
        graph.add_destination(name)
    for dependent, dependency in edges:
        graph.add_destination(dependent)
        graph.add_dependency(dependent, dependency)
    return graph


class TestRouteOrderer:
    """Test RouteOrderer class."""

    @pytest.fixture
    def orderer(self):
        """Create an orderer."""
        return RouteOrderer()

    def test_empty_graph(self, orderer):
        """An empty graph yields an empty route."""
        route = orderer.order(DestinationGraph())

        assert len(route) == 0
        assert route.names == []

    def test_registration_order_without_edges(self, orderer):
        """Without edges the route keeps registration order."""
        graph = build_graph([], destinations=["c", "a", "b"])

        assert orderer.order(graph).names == ["c", "a", "b"]

    def test_predecessor_placed_first(self, orderer):
        """Dependencies are inserted before their dependents."""
        graph = build_graph([("y", "z")], destinations=["x", "y", "z"])

        assert orderer.order(graph).names == ["x", "z", "y"]

    def test_predecessor_order_is_declaration_order(self, orderer):
        """Predecessors are resolved in the order they were declared."""
        graph = build_graph([("y", "b"), ("y", "a")], destinations=["y", "a", "b"])

        assert orderer.order(graph).names == ["b", "a", "y"]

    def test_deep_chain(self, orderer):
        """A chain declared backwards is fully reversed."""
        edges = [("e", "d"), ("d", "c"), ("c", "b"), ("b", "a")]
        graph = build_graph(edges)

        assert orderer.order(graph).names == ["a", "b", "c", "d", "e"]

    def test_shared_leaf_predecessor(self, orderer):
        """A predecessor without own dependencies can be shared freely."""
        graph = build_graph([("a", "b"), ("a", "c"), ("c", "b")])

        assert orderer.order(graph).names == ["b", "c", "a"]

    def test_each_destination_placed_once(self, orderer):
        """Destinations reached several times are placed once."""
        edges = [("a", "d"), ("b", "d"), ("c", "d"), ("c", "a")]
        route = orderer.order(build_graph(edges))

        assert route.names == ["d", "a", "b", "c"]
        assert len(route) == 4

    def test_route_contains_destinations(self, orderer):
        """Route membership works by name and by Destination."""
        graph = build_graph([("y", "z")])
        route = orderer.order(graph)

        assert "z" in route
        assert graph.nodes["y"] in route
        assert "q" not in route
        assert route.position("z") == 0
        assert route.position("y") == 1


class TestCycleDetection:
    """Test cycle detection during ordering."""

    @pytest.fixture
    def orderer(self):
        """Create an orderer."""
        return RouteOrderer()

    def test_three_destination_cycle(self, orderer):
        """The destination closing the cycle is reported with the ancestor path."""
        graph = build_graph([("x", "y"), ("y", "z"), ("z", "x")])

        with pytest.raises(CyclicDependencyError) as exc:
            orderer.order(graph)

        assert exc.value.destination == "z"
        assert exc.value.path == ["x", "y", "z"]
        assert "(z)" in str(exc.value)

    def test_two_destination_cycle(self, orderer):
        """x <-> y."""
        graph = build_graph([("x", "y"), ("y", "x")])

        with pytest.raises(CyclicDependencyError) as exc:
            orderer.order(graph)

        assert exc.value.destination == "y"

    def test_cycle_after_placed_destinations(self, orderer):
        """A cycle later in registration order is still reported."""
        graph = build_graph([("b", "c"), ("c", "b")], destinations=["a"])

        with pytest.raises(CyclicDependencyError) as exc:
            orderer.order(graph)

        assert exc.value.destination == "c"
        assert exc.value.path == ["b", "c"]

    def test_ancestor_path_is_not_unwound_within_one_insertion(self, orderer):
        """
        Ancestors stay on the path for the whole top-level insertion.

        a needs b then c; b needs d; c needs b. b is already placed when c is
        resolved, but b is still on a's ancestor path, so c is reported.
        """
        graph = build_graph([("a", "b"), ("a", "c"), ("c", "b"), ("b", "d")])

        with pytest.raises(CyclicDependencyError) as exc:
            orderer.order(graph)

        assert exc.value.destination == "c"
        assert exc.value.path == ["a", "b", "c"]

    def test_fresh_ancestor_path_per_top_level_destination(self, orderer):
        """Separate top-level insertions don't share ancestors."""
        graph = build_graph([("b", "d"), ("c", "b"), ("a", "c")])

        assert orderer.order(graph).names == ["d", "b", "c", "a"]
