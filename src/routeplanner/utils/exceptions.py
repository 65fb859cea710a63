"""Custom exceptions for the Route Planner.

Exception Hierarchy:
-------------------
RoutePlannerError (base)
├── EmptyInputError              # No definitions given at all
├── InvalidDefinitionError       # Malformed definition line
│   ├── SelfDependencyError      # "x => x"
│   └── UnknownDestinationError  # Predecessor never declared (strict mode only)
└── CyclicDependencyError        # Circular dependency found while ordering

Usage Guidelines:
----------------
1. Every error is fatal to the planning call that raised it. There is no
   partial route and nothing is retried.

2. Use RoutePlannerError as catch-all at the outer surface (CLI).

3. Include context in exceptions:
   - Line number for definition errors
   - Destination name for graph and ordering errors
"""


class RoutePlannerError(Exception):
    """Base exception for all route planner errors."""

    pass


class EmptyInputError(RoutePlannerError):
    """Raised when no destination definitions were given."""

    def __init__(self, message: str = "No destinations were present") -> None:
        """
        Initialize EmptyInputError.

        Args:
            message: Error message (default: "No destinations were present").
        """
        super().__init__(message)


class InvalidDefinitionError(RoutePlannerError):
    """Raised when a destination definition cannot be used."""

    def __init__(
        self,
        message: str,
        line_number: int | None = None,
        original_error: Exception | None = None,
    ) -> None:
        """
        Initialize InvalidDefinitionError.

        Args:
            message: Error message.
            line_number: Optional line number of the offending definition.
            original_error: Optional original exception that caused this error.
        """
        super().__init__(message)
        self.line_number = line_number
        self.original_error = original_error

    def __str__(self) -> str:
        """
        Return string representation with line number if available.

        Returns:
            str: Error message prefixed with line number if set.
        """
        if self.line_number:
            return f"Line {self.line_number}: {self.args[0]}"
        return str(self.args[0]) if self.args else "Invalid destination definition"


class SelfDependencyError(InvalidDefinitionError):
    """Raised when a destination names itself as its own predecessor."""

    def __init__(self, destination: str, line_number: int | None = None) -> None:
        """
        Initialize SelfDependencyError.

        Args:
            destination: Name of the destination depending on itself.
            line_number: Optional line number of the offending definition.
        """
        super().__init__(f"Destination [{destination}] can't depend on itself!", line_number)
        self.destination = destination


class UnknownDestinationError(InvalidDefinitionError):
    """Raised in strict mode when a predecessor was never declared as a destination."""

    def __init__(self, destination: str, dependency: str, line_number: int | None = None) -> None:
        """
        Initialize UnknownDestinationError.

        Args:
            destination: Name of the destination declaring the dependency.
            dependency: Name of the undeclared predecessor.
            line_number: Optional line number of the offending definition.
        """
        super().__init__(
            f"Dependent destination [{dependency}] of [{destination}] is not a valid destination!",
            line_number,
        )
        self.destination = destination
        self.dependency = dependency


class CyclicDependencyError(RoutePlannerError):
    """
    Raised when circular dependencies are detected while ordering destinations.

    Example cycles:
    1. x => y, y => x
    2. x => y, y => z, z => x

    The error names the destination whose predecessor closed the cycle, which
    is not necessarily every destination taking part in it.
    """

    def __init__(self, destination: str, path: list[str] | None = None) -> None:
        """
        Initialize CyclicDependencyError.

        Args:
            destination: Destination whose predecessor is already on the ancestor path.
            path: Ancestor path (destination names) at the time of detection.
        """
        super().__init__(f"Cyclic dependency detected on destination ({destination})!")
        self.destination = destination
        self.path = path or []
