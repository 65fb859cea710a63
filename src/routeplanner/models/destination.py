"""Destination node model."""

from dataclasses import dataclass, field


@dataclass
class Destination:
    """
    A place to be visited, with the destinations that must come before it.

    Predecessors are held by name; the owning DestinationGraph maps names to
    Destination objects.

    Attributes:
        name: Unique destination name (trimmed, case-sensitive)
        dependencies: Predecessor names in first-declared order, no duplicates
    """

    name: str
    dependencies: list[str] = field(default_factory=list)

    def add_dependency(self, name: str) -> bool:
        """
        Register a predecessor.

        Args:
            name: Predecessor destination name

        Returns:
            True if the predecessor was new, False if it was already registered
        """
        if name in self.dependencies:
            return False
        self.dependencies.append(name)
        return True

    @property
    def has_dependencies(self) -> bool:
        """Whether any destination must be visited before this one."""
        return bool(self.dependencies)

    def __hash__(self) -> int:
        """Hash based on destination name."""
        return hash(self.name)

    def __str__(self) -> str:
        return f"Destination is {self.name} [{','.join(self.dependencies)}]"
