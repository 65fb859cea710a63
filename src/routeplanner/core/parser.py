"""Definition parser.

Overview:
--------
The DefinitionParser turns definition strings into validated Definition
models. Each string names a destination and optionally the one destination
that must be visited before it:

```
x
y => z
y => x
z
```

Parsing Rules:
-------------
1. The text is split on the "=>" separator.
2. The left part, trimmed, is the destination name. It must not be blank.
3. A right part that is non-blank after trimming names the predecessor.
4. A line declares at most one predecessor. Text after a second separator
   is ignored: "a => b => c" reads as "a => b".

Error Handling:
--------------
- InvalidDefinitionError: Blank name or control characters in a name.
  The error carries the 1-based line number of the offending definition.
"""

from collections.abc import Iterable

from pydantic import ValidationError

from ..models.definition import Definition
from ..observability.logger import get_logger
from ..utils.exceptions import InvalidDefinitionError

logger = get_logger(__name__)


class DefinitionParser:
    """Parse definition strings into Definition models."""

    def parse(self, definitions: Iterable[str]) -> list[Definition]:
        """
        Parse definitions, numbering them by their position in the input.

        Args:
            definitions: Definition strings in input order

        Returns:
            Parsed definitions in input order

        Raises:
            InvalidDefinitionError: If any definition is malformed
        """
        return self.parse_numbered(enumerate(definitions, start=1))

    def parse_numbered(self, numbered: Iterable[tuple[int, str]]) -> list[Definition]:
        """
        Parse definitions that already carry their source line numbers.

        Args:
            numbered: (line_number, text) pairs, e.g. from DefinitionReader

        Returns:
            Parsed definitions in input order

        Raises:
            InvalidDefinitionError: If any definition is malformed
        """
        parsed: list[Definition] = []
        for line_number, text in numbered:
            definition = self.parse_one(text, line_number)
            logger.debug(
                "Parsed definition",
                line=line_number,
                destination=definition.name,
                dependency=definition.dependency,
            )
            parsed.append(definition)
        return parsed

    def parse_one(self, text: str, line_number: int = 0) -> Definition:
        """
        Parse a single definition.

        Args:
            text: Definition text such as "y => z"
            line_number: 1-based position of the definition (0 if unknown)

        Returns:
            Validated Definition

        Raises:
            InvalidDefinitionError: If the definition is malformed
        """
        if not isinstance(text, str):
            raise InvalidDefinitionError(
                f"Definition must be a string, got {type(text).__name__}", line_number
            )

        try:
            fields = Definition.split(text)
            return Definition(**fields, line_number=line_number)
        except ValidationError as e:
            logger.error("Invalid definition", line=line_number, definition=text)
            raise InvalidDefinitionError(
                f"{self._format_validation_error(e)} in definition {text!r}",
                line_number=line_number,
                original_error=e,
            ) from e

    def _format_validation_error(self, error: ValidationError) -> str:
        """
        Format Pydantic validation error into human-readable message.

        Args:
            error: Pydantic ValidationError

        Returns:
            Formatted error message
        """
        errors = error.errors()
        if not errors:
            return str(error)

        first_error = errors[0]
        field = ".".join(str(loc) for loc in first_error["loc"])
        msg = first_error["msg"]

        if len(errors) > 1:
            return f"{field}: {msg} (and {len(errors) - 1} more errors)"
        return f"{field}: {msg}"
