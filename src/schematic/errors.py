"""
Parse errors for the schematic engine.

Both kinds are fatal: the parser raises, the solver lets them through, and
only the CLI turns them into an exit code.
"""

from typing import Optional


class SchematicError(ValueError):
    """Base class for schematic parse failures."""

    def __init__(self, message: str, *, line: int, column: Optional[int] = None, text: str = ""):
        self.message = message
        self.line = line
        self.column = column
        self.text = text
        super().__init__(self._format())

    def _format(self) -> str:
        where = f"line {self.line}"
        if self.column is not None:
            where += f", column {self.column}"
        if self.text:
            return f"{where}: {self.message} ({self.text!r})"
        return f"{where}: {self.message}"


class MalformedGrid(SchematicError):
    """Row contains a character outside the grid alphabet."""


class NumberParseFailure(SchematicError):
    """Digit run does not fit a part value, or is empty when flushed."""
