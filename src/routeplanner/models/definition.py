"""Destination definition model with Pydantic v2 validation."""

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator

from ..constants import DEFINITION_SEPARATOR


def strip_whitespace(v: Any) -> Any:
    """
    Strip surrounding whitespace, mapping blank strings to None.

    Used for the optional dependency name: "y => " declares no dependency.

    Args:
        v: The value to process.

    Returns:
        Any: The stripped value, or None when nothing is left.
    """
    if isinstance(v, str):
        stripped = v.strip()
        if not stripped:
            return None
        return stripped
    return v


def strip_whitespace_preserve_empty(v: Any) -> Any:
    """
    Strip surrounding whitespace but keep empty strings as "".

    The destination name is required, so a blank name must reach the field
    validator as "" to produce a readable error instead of a type error.

    Args:
        v: The value to process.

    Returns:
        Any: The processed value.
    """
    if isinstance(v, str):
        return v.strip()
    return v


def validate_name_characters(v: Any) -> Any:
    """
    Reject control characters in destination names.

    Tab, newline and carriage return are allowed and passed through;
    they only make the rendered route ambiguous.

    Args:
        v: The name to check.

    Returns:
        Any: The unchanged value.

    Raises:
        ValueError: If the name contains control characters or null bytes.
    """
    if not v or not isinstance(v, str):
        return v

    allowed_control_chars = {"\t", "\n", "\r"}
    for char in v:
        if ord(char) < 32 and char not in allowed_control_chars:
            raise ValueError(
                f"Name contains control character (ASCII {ord(char)}): {repr(v)}. "
                "Please remove control characters from destination names."
            )
    return v


class Definition(BaseModel):
    """
    One destination definition.

    Example:
        "y => z"  -> name="y", dependency="z"
        "x"       -> name="x", dependency=None
        "x => "   -> name="x", dependency=None
    """

    model_config = ConfigDict(frozen=True)

    name: Annotated[
        str,
        Field(description="Destination name"),
        BeforeValidator(strip_whitespace_preserve_empty),
    ]
    dependency: Annotated[
        str | None,
        Field(default=None, description="Destination that must be visited first"),
        BeforeValidator(strip_whitespace),
    ]
    line_number: Annotated[int, Field(default=0, ge=0, description="1-based input position")]
    raw: Annotated[str, Field(default="", description="Definition text as given")]

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Require a non-blank destination name."""
        if not v:
            raise ValueError("Destination name must not be blank")
        return validate_name_characters(v)

    @field_validator("dependency")
    @classmethod
    def validate_dependency(cls, v: str | None) -> str | None:
        """Apply the same character rules as the destination name."""
        return validate_name_characters(v)

    @property
    def has_dependency(self) -> bool:
        """Whether this definition declares a predecessor."""
        return self.dependency is not None

    @classmethod
    def split(cls, text: str) -> dict[str, Any]:
        """
        Split definition text into model fields.

        Only the text between the first and a second separator names the
        dependency; anything after a second separator is ignored, so
        "a => b => c" declares "a" after "b".

        Args:
            text: Definition such as "y => z"

        Returns:
            Field dictionary for model validation
        """
        parts = text.split(DEFINITION_SEPARATOR)
        name = parts[0]
        dependency = parts[1] if len(parts) > 1 else ""
        return {"name": name, "dependency": dependency, "raw": text}
