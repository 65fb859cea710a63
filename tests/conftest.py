"""Pytest configuration and shared fixtures.

Fixtures are organized by category:
- Logging: Quiet structlog output for the whole session
- Data fixtures: Definition lists for the documented planning scenarios
- File fixtures: Definition files written to a temp directory
- Component fixtures: Fresh planner, parser and graph instances
"""

from collections.abc import Callable
from pathlib import Path

import pytest

from src.routeplanner.core.parser import DefinitionParser
from src.routeplanner.dependency.graph import DestinationGraph
from src.routeplanner.observability import configure_logging
from src.routeplanner.planner import RoutePlanner

# =============================================================================
# Logging
# =============================================================================


@pytest.fixture(autouse=True, scope="session")
def quiet_logging() -> None:
    """Route all structlog output through stdlib logging at WARNING level."""
    configure_logging(level="WARNING")


# =============================================================================
# Data Fixtures
# =============================================================================


@pytest.fixture
def single_destination() -> list[str]:
    """One destination, no dependencies."""
    return ["x => "]


@pytest.fixture
def independent_destinations() -> list[str]:
    """Three destinations without dependencies."""
    return ["x => ", "y => ", "z => "]


@pytest.fixture
def one_dependency() -> list[str]:
    """Three destinations, y depends on z."""
    return ["x => ", "y => z", "z => "]


@pytest.fixture
def multi_dependency() -> list[str]:
    """y depends on both z and x (declared on two lines)."""
    return ["x => ", "y => z", "y => x", "z => "]


@pytest.fixture
def six_destinations() -> list[str]:
    """Six destinations with four dependencies forming two chains."""
    return ["u => ", "v => w", "w => z", "x => u", "y => v", "z => "]


@pytest.fixture
def cyclic_definitions() -> list[str]:
    """x -> y -> z -> x."""
    return ["x => y", "y => z", "z => x"]


# =============================================================================
# File Fixtures
# =============================================================================


@pytest.fixture
def write_definitions(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing definition lines to a file in tmp_path.

    Example:
        def test_something(write_definitions):
            path = write_definitions(["x", "y => z"], name="trip.txt")
    """

    def _write(lines: list[str], name: str = "trip.txt") -> Path:
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write


# =============================================================================
# Component Fixtures
# =============================================================================


@pytest.fixture
def planner() -> RoutePlanner:
    """Create a planner with default configuration."""
    return RoutePlanner()


@pytest.fixture
def parser() -> DefinitionParser:
    """Create a definition parser."""
    return DefinitionParser()


@pytest.fixture
def graph() -> DestinationGraph:
    """Create an empty destination graph."""
    return DestinationGraph()


# =============================================================================
# Assertion Helpers
# =============================================================================


def _assert_visited_before(route: str, before: str, after: str) -> None:
    """Assert that `before` appears earlier than `after` in a rendered route."""
    stops = route.split(" ")
    assert before in stops, f"{before} missing from route {route!r}"
    assert after in stops, f"{after} missing from route {route!r}"
    assert stops.index(before) < stops.index(after), f"{before} not before {after} in {route!r}"


@pytest.fixture
def assert_visited_before() -> Callable[[str, str, str], None]:
    """Precedence assertion for rendered routes."""
    return _assert_visited_before
