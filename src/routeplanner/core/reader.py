"""Definition file reader.

Reads one definition per line. Comment lines (starting with "#") and blank
lines are skipped, but line numbers always refer to the physical line in the
file so that parser errors point at the right place.
"""

from pathlib import Path

from ..constants import COMMENT_PREFIX, DEFINITION_FILE_ENCODING
from ..observability.logger import get_logger
from ..utils.exceptions import InvalidDefinitionError

logger = get_logger(__name__)


class DefinitionReader:
    """Read destination definitions from a text file."""

    def __init__(
        self,
        path: Path,
        skip_comments: bool = True,
        skip_blank_lines: bool = True,
    ) -> None:
        """
        Initialize reader with definition file path.

        Args:
            path: Path to definition file
            skip_comments: Ignore lines starting with "#"
            skip_blank_lines: Ignore lines holding only whitespace
        """
        self.path = path
        self.skip_comments = skip_comments
        self.skip_blank_lines = skip_blank_lines
        self.lines_skipped = 0

    def read_numbered(self) -> list[tuple[int, str]]:
        """
        Read definitions with their physical line numbers.

        Returns:
            (line_number, text) pairs in file order

        Raises:
            FileNotFoundError: If the definition file doesn't exist
            InvalidDefinitionError: If a line is not valid UTF-8
        """
        if not self.path.exists():
            raise FileNotFoundError(f"Definition file not found: {self.path}")

        logger.info("Reading definitions", path=str(self.path))

        self.lines_skipped = 0
        numbered: list[tuple[int, str]] = []
        # Decoded per line so a bad byte is reported with its line number
        with open(self.path, "rb") as f:
            for line_number, raw in enumerate(f, start=1):
                try:
                    line = raw.decode(DEFINITION_FILE_ENCODING)
                except UnicodeDecodeError as e:
                    logger.error("Definition file is not valid UTF-8", line=line_number)
                    raise InvalidDefinitionError(
                        f"Not valid UTF-8 ({e.reason}) in definition file {self.path}",
                        line_number=line_number,
                        original_error=e,
                    ) from e

                text = line.rstrip("\r\n")
                stripped = text.strip()

                if self.skip_blank_lines and not stripped:
                    self.lines_skipped += 1
                    continue
                if self.skip_comments and stripped.startswith(COMMENT_PREFIX):
                    self.lines_skipped += 1
                    continue

                numbered.append((line_number, text))

        if not numbered:
            logger.warning(
                "Definition file is empty or contains only comments", path=str(self.path)
            )

        logger.debug(
            "Definitions read",
            path=str(self.path),
            definitions=len(numbered),
            skipped=self.lines_skipped,
        )
        return numbered

    def read(self) -> list[str]:
        """
        Read definitions without line numbers.

        Returns:
            Definition strings in file order
        """
        return [text for _, text in self.read_numbered()]
