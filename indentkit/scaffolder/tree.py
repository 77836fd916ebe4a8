"""Directory/file tree builder driven by an indented outline.

The outline names one directory or file per line. A line ending in a path
separator is a directory whose indented block lists its contents; any other
line is a file whose indented block is the file's literal text::

    src/
        main.py
            print("hello")
    README.md

``build_tree`` parses the outline with a recursive-descent parser over the
tokenizer's output and either creates the tree on disk or, in scaffold mode,
only returns the ordered list of operations it would perform.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field
from rich.table import Table
from rich.text import Text

from indentkit.errors import PreconditionError, StructureError
from indentkit.parser.levels import LevelTracker
from indentkit.parser.models import INDENT, LINE, UNDENT, Token
from indentkit.parser.tokenizer import (
    Classifier,
    TokenQueue,
    token_table,
    tokenize,
)
from indentkit.utils import (
    clear_dir,
    console,
    ensure_dir,
    path_type,
    print_debug,
    read_text,
    write_text,
)

DIR_SEPARATORS: tuple[str, ...] = tuple(sorted({"/", os.sep}))


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class FileOp(BaseModel):
    """A recorded filesystem mutation."""

    op: Literal["mkdir", "write"] = Field(..., description="Kind of mutation")
    path: str = Field(..., description="Target path")
    contents: Optional[str] = Field(default=None, description="File text for 'write'")


class ScaffoldClassifier(Classifier):
    """Every outline line becomes a single ``line`` token, kept verbatim."""

    def classify(self, line: str, level: int) -> list[Token]:
        return [Token(kind=LINE, text=line)]


def is_dir_entry(name: str) -> bool:
    """``True`` if an outline entry names a directory."""
    return name.endswith(DIR_SEPARATORS)


def dir_entry_name(name: str) -> str:
    """Strip the trailing separator(s) from a directory entry."""
    return name.rstrip("".join(DIR_SEPARATORS))


# ---------------------------------------------------------------------------
# Builder
# ---------------------------------------------------------------------------


class TreeBuilder:
    """Recursive-descent interpreter for one outline.

    Grammar::

        block     := (directory | file)*            until UNDENT or end
        directory := DIRLINE [INDENT block UNDENT]
        file      := FILELINE [INDENT contents UNDENT]

    Args:
        root_dir: Directory the outline is built into.
        debug: Trace grammar rules and the token table to the console.
        clear: Empty *root_dir* first if it already exists.
        scaffold: Record operations instead of touching the filesystem.
        tracker: Level tracker for the parse. A fresh one is used when
            omitted.
    """

    def __init__(
        self,
        root_dir: str | Path,
        *,
        debug: bool = False,
        clear: bool = False,
        scaffold: bool = False,
        tracker: Optional[LevelTracker] = None,
    ) -> None:
        self.root_dir = str(root_dir)
        self.debug = debug
        self.clear = clear
        self.scaffold = scaffold
        self.tracker = tracker if tracker is not None else LevelTracker()
        self.file_ops: list[FileOp] = []
        self._depth = 0

    # -- Public API --------------------------------------------------------

    def build(self, spec_text: str) -> list[FileOp]:
        """Build the tree described by *spec_text*.

        Returns:
            The recorded operations (empty unless ``scaffold`` is set).

        Raises:
            PreconditionError: If the root exists and is not a directory.
            IndentError: On bad indentation (raised before any mutation).
            StructureError: On a token the grammar does not allow.
        """
        ptype = path_type(self.root_dir)
        if ptype not in ("dir", "missing"):
            raise PreconditionError(f"{self.root_dir} is a {ptype}, not a directory")

        self.file_ops = []
        self._depth = 0
        self.tracker.reset_unit()
        tokens = tokenize(spec_text, ScaffoldClassifier(), self.tracker)
        if self.debug:
            console.print(token_table(tokens))

        queue = TokenQueue(tokens)
        self._make_dir(self.root_dir, clear=self.clear)
        self._block(self.root_dir, queue)
        if not queue.is_empty():
            leftover = ", ".join(t.text or t.kind.upper() for t in queue.remaining())
            raise StructureError(f"Tokens remaining after parse: {leftover}")
        return self.file_ops

    # -- Grammar rules -----------------------------------------------------

    def _block(self, dir_path: str, queue: TokenQueue) -> None:
        self._enter("block", dir_path)
        while not queue.is_empty() and not queue.at(UNDENT):
            tok = queue.next()
            if tok.kind == INDENT:
                raise StructureError(f"Unexpected INDENT in {dir_path}")
            if is_dir_entry(tok.text):
                self._directory(f"{dir_path}/{dir_entry_name(tok.text)}", queue)
            else:
                self._file(f"{dir_path}/{tok.text}", queue)
        self._exit("block", dir_path)

    def _directory(self, path: str, queue: TokenQueue) -> None:
        self._enter("directory", path)
        self._make_dir(path)
        if queue.at(INDENT):
            queue.next()
            self._block(path, queue)
            queue.expect(UNDENT)
        self._exit("directory", path)

    def _file(self, path: str, queue: TokenQueue) -> None:
        self._enter("file", path)
        contents = ""
        if queue.at(INDENT):
            queue.next()
            lines: list[str] = []
            level = 0
            while level > 0 or not queue.at(UNDENT):
                if queue.is_empty():
                    break
                tok = queue.next()
                if tok.kind == INDENT:
                    level += 1
                elif tok.kind == UNDENT:
                    level -= 1
                else:
                    line = self.tracker.indented(tok.text, level)
                    self._trace(line)
                    lines.append(line)
            queue.expect(UNDENT)
            contents = "\n".join(lines)
        self._write(path, contents)
        self._exit("file", path)

    # -- Effects -----------------------------------------------------------

    def _make_dir(self, path: str, clear: bool = False) -> None:
        if self.scaffold:
            self.file_ops.append(FileOp(op="mkdir", path=path))
            return
        if clear and path_type(path) == "dir":
            clear_dir(path)
        ensure_dir(path)

    def _write(self, path: str, contents: str) -> None:
        if self.scaffold:
            self.file_ops.append(FileOp(op="write", path=path, contents=contents))
            return
        write_text(path, contents)

    # -- Tracing -----------------------------------------------------------

    def _enter(self, rule: str, path: str) -> None:
        if self.debug:
            print_debug(f"{'   ' * self._depth}-> {rule}({path!r})")
        self._depth += 1

    def _exit(self, rule: str, path: str) -> None:
        self._depth -= 1
        if self.debug:
            print_debug(f"{'   ' * self._depth}<- {rule}({path!r})")

    def _trace(self, line: str) -> None:
        if self.debug:
            print_debug(f"{'   ' * self._depth}-- {line!r}")


# ---------------------------------------------------------------------------
# Convenience API
# ---------------------------------------------------------------------------


def build_tree(
    root_dir: str | Path,
    spec_text: str,
    *,
    debug: bool = False,
    clear: bool = False,
    scaffold: bool = False,
) -> list[FileOp]:
    """Build the directory/file tree described by *spec_text* under *root_dir*.

    See :class:`TreeBuilder` for the options. In scaffold mode nothing is
    written and the ordered ``FileOp`` list is returned.
    """
    builder = TreeBuilder(root_dir, debug=debug, clear=clear, scaffold=scaffold)
    return builder.build(spec_text)


def build_tree_from_file(
    root_dir: str | Path,
    spec_path: str | Path,
    *,
    debug: bool = False,
    clear: bool = False,
    scaffold: bool = False,
) -> list[FileOp]:
    """Like :func:`build_tree`, reading the outline from *spec_path*."""
    return build_tree(
        root_dir, read_text(spec_path), debug=debug, clear=clear, scaffold=scaffold
    )


def file_ops_table(file_ops: list[FileOp], title: str = "File Ops") -> Table:
    """Build a two-column Rich table of recorded operations.

    Each ``write`` row is followed by one row per line of its contents, with
    TABs shown as three spaces.
    """
    table = Table(title=title, show_header=False)
    table.add_column("op", style="bold", no_wrap=True)
    table.add_column("path")
    for file_op in file_ops:
        table.add_row(file_op.op, Text(file_op.path))
        if file_op.op == "write" and file_op.contents:
            for line in file_op.contents.split("\n"):
                table.add_row("", Text(line.replace("\t", "   "), style="dim"))
    return table


def print_file_ops(file_ops: list[FileOp], title: str = "File Ops") -> None:
    """Print :func:`file_ops_table` to the shared console."""
    console.print(file_ops_table(file_ops, title=title))
