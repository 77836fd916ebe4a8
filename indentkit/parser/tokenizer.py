"""Indentation-structured block tokenizer.

Turns a block of text into an ordered list of tokens: ``indent`` / ``undent``
markers derived from each line's nesting level, interleaved with the content
tokens a per-DSL ``Classifier`` produces for every non-blank line. The output
is balanced by construction, so every consumer can rely on each ``indent``
being closed by exactly one later ``undent``.

Quick usage::

    from indentkit.parser import tokenize, TokenQueue

    tokens = tokenize("abc\\n\\tdef")
    # [line 'abc', indent, line 'def', undent]
    queue = TokenQueue(tokens)
    queue.next()
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, Optional

from rich.table import Table
from rich.text import Text

from indentkit.errors import IndentJumpError, StructureError
from indentkit.parser.levels import LevelTracker, block_lines
from indentkit.parser.models import INDENT, LINE, UNDENT, Token
from indentkit.utils import read_text


# ---------------------------------------------------------------------------
# Classifiers
# ---------------------------------------------------------------------------


class Classifier(ABC):
    """Strategy that converts one content line into zero or more tokens.

    *line* has its indentation already removed; *level* is the line's
    nesting level.
    """

    @abstractmethod
    def classify(self, line: str, level: int) -> list[Token]:
        raise NotImplementedError


class DefaultClassifier(Classifier):
    """One ``line`` token per line."""

    def classify(self, line: str, level: int) -> list[Token]:
        return [Token(kind=LINE, text=line)]


# ---------------------------------------------------------------------------
# Tokenizer
# ---------------------------------------------------------------------------


def tokenize(
    text: str,
    classifier: Optional[Classifier] = None,
    tracker: Optional[LevelTracker] = None,
) -> list[Token]:
    """Tokenize an indentation-structured block.

    Blank lines are skipped. Moving one level deeper emits an ``indent``;
    moving back out emits one ``undent`` per level. At the end of input
    enough ``undent`` tokens are emitted to return to level 0.

    Args:
        text: The block to tokenize.
        classifier: Produces the content tokens of each line. Defaults to
            ``DefaultClassifier``.
        tracker: Level tracker holding the block's indent unit. A fresh one is
            created when omitted; pass one in to reuse its unit afterwards
            (e.g. to re-indent file contents).

    Returns:
        The tokens in document order.

    Raises:
        IndentError: On indentation that does not fit the block's unit.
        IndentJumpError: When a line is more than one level deeper than the
            line before it.
    """
    classifier = classifier or DefaultClassifier()
    tracker = tracker if tracker is not None else LevelTracker()

    tokens: list[Token] = []
    cur_level = 0
    for line_number, line in enumerate(block_lines(text), start=1):
        if not line.strip():
            continue

        level, content = tracker.split_line(line)
        if level > cur_level + 1:
            raise IndentJumpError(line_number, cur_level, level)
        if level > cur_level:
            tokens.append(Token.indent())
        while cur_level > level:
            tokens.append(Token.undent())
            cur_level -= 1
        cur_level = level

        tokens.extend(classifier.classify(content, cur_level))

    tokens.extend(Token.undent() for _ in range(cur_level))
    return tokens


def tokenize_file(
    path: str | Path,
    classifier: Optional[Classifier] = None,
    tracker: Optional[LevelTracker] = None,
) -> list[Token]:
    """Read *path* and tokenize its contents."""
    return tokenize(read_text(path), classifier, tracker)


def check_balanced(tokens: Iterable[Token]) -> int:
    """Verify that ``indent`` / ``undent`` tokens nest correctly.

    Returns:
        The maximum nesting depth reached.

    Raises:
        StructureError: If an ``undent`` closes nothing or an ``indent`` is
            left open.
    """
    depth = 0
    max_depth = 0
    for tok in tokens:
        if tok.kind == INDENT:
            depth += 1
            max_depth = max(max_depth, depth)
        elif tok.kind == UNDENT:
            depth -= 1
            if depth < 0:
                raise StructureError("UNDENT without a matching INDENT")
    if depth:
        raise StructureError(f"{depth} INDENT token(s) left unmatched")
    return max_depth


# ---------------------------------------------------------------------------
# Token queue
# ---------------------------------------------------------------------------


class TokenQueue:
    """Cursor over a materialized token list, for recursive-descent parsing.

    The underlying list is never mutated; consuming a token only advances
    the cursor.
    """

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._tokens: list[Token] = list(tokens)
        self._pos = 0

    def __len__(self) -> int:
        return len(self._tokens) - self._pos

    def __repr__(self) -> str:
        return f"TokenQueue(pos={self._pos}, remaining={len(self)})"

    @property
    def position(self) -> int:
        return self._pos

    def is_empty(self) -> bool:
        return self._pos >= len(self._tokens)

    def peek(self) -> Optional[Token]:
        """Return the next token without consuming it, ``None`` at the end."""
        if self.is_empty():
            return None
        return self._tokens[self._pos]

    def at(self, *kinds: str) -> bool:
        """``True`` if the next token is of one of *kinds*."""
        tok = self.peek()
        return tok is not None and tok.kind in kinds

    def next(self) -> Token:
        """Consume and return the next token.

        Raises:
            StructureError: If the queue is exhausted.
        """
        if self.is_empty():
            raise StructureError("Unexpected end of input")
        tok = self._tokens[self._pos]
        self._pos += 1
        return tok

    def expect(self, kind: str) -> Token:
        """Consume the next token, which must be of *kind*.

        Raises:
            StructureError: If the queue is exhausted or the token differs.
        """
        tok = self.peek()
        if tok is None:
            raise StructureError(f"Expected {kind.upper()}, found end of input")
        if tok.kind != kind:
            raise StructureError(f"Expected {kind.upper()}, found {_describe(tok)}")
        self._pos += 1
        return tok

    def remaining(self) -> list[Token]:
        """The tokens not yet consumed."""
        return self._tokens[self._pos:]


def _describe(tok: Token) -> str:
    if tok.is_structural:
        return tok.kind.upper()
    return f"{tok.kind} {tok.text!r}"


# ---------------------------------------------------------------------------
# Diagnostics
# ---------------------------------------------------------------------------


def token_table(tokens: Iterable[Token], title: str = "Tokens") -> Table:
    """Build a two-column ``kind`` / ``str`` Rich table of *tokens*."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("kind", no_wrap=True)
    table.add_column("str")
    for tok in tokens:
        table.add_row(Text(tok.kind), Text(tok.text))
    return table
