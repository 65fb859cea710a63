"""Route rendering."""

from collections.abc import Iterable

from ..constants import ROUTE_SEPARATOR
from ..models.destination import Destination


def render_route(route: Iterable[Destination]) -> str:
    """
    Render destinations as a space-separated route.

    Names are written as given; names holding whitespace render ambiguously.

    Args:
        route: Destinations in visiting order

    Returns:
        Destination names separated by single spaces, without trailing whitespace
    """
    rendered = "".join(f"{destination.name}{ROUTE_SEPARATOR}" for destination in route)
    return rendered.rstrip()
