"""Route Planner - dependency-ordered holiday routes."""

__version__ = "0.1.0"

from .cli import app  # noqa: E402
from .config import RoutePlannerConfig  # noqa: E402
from .planner import RoutePlanner, plan_route  # noqa: E402

__all__ = ["app", "RoutePlannerConfig", "RoutePlanner", "plan_route"]
