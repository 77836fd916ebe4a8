"""Exception hierarchy for indentkit.

Every failure in the tokenizer and its consumers is fatal: the exception
propagates out of the current parse call and no partial result is returned.
"""

from __future__ import annotations


class IndentKitError(Exception):
    """Base class for every error raised by indentkit."""


class IndentError(IndentKitError):
    """Leading whitespace that does not fit the block's indent unit.

    Raised for a mix of TABs and spaces, for indentation that is not an exact
    multiple of the established unit, and for TABs where spaces were
    established (or the reverse).
    """


class StructureError(IndentKitError):
    """A token appeared where the consuming grammar does not allow it."""


class IndentJumpError(IndentError, StructureError):
    """A line is indented more than one level deeper than the previous line."""

    def __init__(self, line_number: int, from_level: int, to_level: int) -> None:
        self.line_number = line_number
        self.from_level = from_level
        self.to_level = to_level
        super().__init__(
            f"Line {line_number}: unexpected indentation jump "
            f"from level {from_level} to level {to_level}"
        )


class PreconditionError(IndentKitError):
    """The environment does not satisfy what an operation requires."""
