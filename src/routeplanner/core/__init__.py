"""Core definition handling: reading, parsing, rendering."""

from .parser import DefinitionParser
from .reader import DefinitionReader
from .renderer import render_route

__all__ = [
    "DefinitionParser",
    "DefinitionReader",
    "render_route",
]
