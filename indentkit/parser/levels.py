"""Indentation level tracking.

A ``LevelTracker`` remembers the indent unit of one block of text (a single
TAB, or a run of N spaces) and converts between leading whitespace and an
integer nesting level. One tracker is created per parse and threaded through
every call that needs it, so two parses never share a unit.

Usage::

    tracker = LevelTracker()
    tracker.compute_level("    x")      # establishes a 4-space unit -> 1
    tracker.compute_level("        y")  # -> 2
    tracker.indented("z", 2)            # -> "        z"
"""

from __future__ import annotations

import re
from typing import Optional, Union, overload

from indentkit.errors import IndentError

DEFAULT_UNIT = "\t"

_NEWLINE_RE = re.compile(r"\r?\n")


def block_lines(block: str) -> list[str]:
    """Split *block* on newlines only (``\\n`` or ``\\r\\n``).

    Unlike ``str.splitlines()``, form feeds and other Unicode line
    boundaries stay part of the line they appear in.
    """
    return _NEWLINE_RE.split(block)


def _leading_whitespace(line: str) -> str:
    return line[: len(line) - len(line.lstrip(" \t"))]


def _check_unit(unit: str) -> str:
    if unit == "\t" or (unit and set(unit) == {" "}):
        return unit
    raise ValueError(f"Indent unit must be one TAB or a run of spaces, got {unit!r}")


class LevelTracker:
    """Translate leading whitespace to and from an integer nesting level.

    Attributes:
        unit: The indent unit established for the current block, or ``None``
            until the first indented line is seen.
        default_unit: Unit used by :meth:`indented` when no unit has been
            established yet.
    """

    def __init__(self, unit: Optional[str] = None, default_unit: str = DEFAULT_UNIT) -> None:
        self.unit = _check_unit(unit) if unit is not None else None
        self.default_unit = _check_unit(default_unit)

    def __repr__(self) -> str:
        return f"LevelTracker(unit={self.unit!r}, default_unit={self.default_unit!r})"

    # -- Unit state ----------------------------------------------------------

    def reset_unit(self, unit: Optional[str] = None) -> None:
        """Forget the remembered unit (or replace it with *unit*)."""
        self.unit = _check_unit(unit) if unit is not None else None

    def detect_unit(self, block: str) -> Optional[str]:
        """Establish the unit from the first indented line of *block*.

        An already established unit is kept. Returns the unit, or ``None``
        when *block* has no indented non-blank line.
        """
        if self.unit is None:
            for line in block_lines(block):
                if line.strip() and _leading_whitespace(line):
                    self.compute_level(line)
                    break
        return self.unit

    # -- Whitespace -> level -------------------------------------------------

    def compute_level(self, line: str) -> int:
        """Return the number of indent units at the start of *line*.

        The first indented line seen establishes the unit: a TAB prefix sets a
        one-TAB unit (and its level is the number of TABs), a space prefix sets
        the unit to the whole run of spaces (level 1).

        Raises:
            IndentError: If the prefix mixes TABs and spaces, uses the other
                kind of whitespace than the established unit, or is not an
                exact multiple of the unit.
        """
        prefix = _leading_whitespace(line)
        if not prefix:
            return 0

        num_tabs = prefix.count("\t")
        num_spaces = prefix.count(" ")
        if num_tabs and num_spaces:
            raise IndentError(f"Invalid mix of TABs and spaces in {line!r}")

        if self.unit is None:
            if num_tabs:
                self.unit = "\t"
                return num_tabs
            self.unit = prefix
            return 1

        if self.unit == "\t":
            if num_spaces:
                raise IndentError(f"Expecting TABs, found spaces in {line!r}")
            return num_tabs

        if num_tabs:
            raise IndentError(f"Expecting spaces, found TABs in {line!r}")
        if num_spaces % len(self.unit):
            raise IndentError(
                f"Invalid number of spaces ({num_spaces}) in {line!r}, "
                f"indent unit is {len(self.unit)} spaces"
            )
        return num_spaces // len(self.unit)

    def split_line(self, line: str) -> tuple[int, str]:
        """Separate *line* into ``(level, text)``."""
        return self.compute_level(line), line.strip()

    # -- Level -> whitespace -------------------------------------------------

    @overload
    def indented(self, content: str, level: int = 1) -> str: ...

    @overload
    def indented(self, content: list[str], level: int = 1) -> list[str]: ...

    def indented(self, content: Union[str, list[str]], level: int = 1) -> Union[str, list[str]]:
        """Prepend *level* indent units to every line of *content*.

        Empty lines stay empty and trailing whitespace is trimmed. Returns the
        same shape as the input: a block string or a list of lines. When no
        unit has been established, ``default_unit`` becomes the unit.
        """
        if isinstance(level, bool) or not isinstance(level, int):
            raise TypeError(f"Invalid level: {level!r}")
        if level < 0:
            raise ValueError(f"Invalid level: {level}")
        if level == 0:
            return content

        if self.unit is None:
            self.unit = self.default_unit
        to_add = self.unit * level

        lines = content if isinstance(content, list) else block_lines(content)
        new_lines = []
        for line in lines:
            line = line.rstrip()
            new_lines.append(f"{to_add}{line}" if line else "")

        return new_lines if isinstance(content, list) else "\n".join(new_lines)

    def undented(self, content: Union[str, list[str]]) -> Union[str, list[str]]:
        """Remove the first indented line's indentation from every line.

        Lines before the first indented line are left as they are.

        Raises:
            IndentError: If a later line does not start with that indentation.
        """
        lines = content if isinstance(content, list) else block_lines(content)
        to_remove: Optional[str] = None
        new_lines = []
        for line in lines:
            line = line.rstrip()
            if not line:
                new_lines.append("")
            elif to_remove is None:
                prefix = _leading_whitespace(line)
                if prefix:
                    to_remove = prefix
                new_lines.append(line[len(prefix):])
            elif not line.startswith(to_remove):
                raise IndentError(f"Can't remove {to_remove!r} from {line!r}")
            else:
                new_lines.append(line[len(to_remove):])

        return new_lines if isinstance(content, list) else "\n".join(new_lines)
