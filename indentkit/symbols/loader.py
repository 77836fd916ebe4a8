"""Symbol -> library lookup table.

Parses a symbols file (conventionally ``src/.symbols``) that lists libraries
at level 0 and, indented one level below each, the symbols it exports::

    src/lib/fs.ts
        isFile isDir
        fileExt withExt
    src/lib/str.ts
        pad trim

and answers "which library defines this symbol?", groups symbols by library,
and generates the import statements a module using those symbols needs.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from indentkit.errors import PreconditionError, StructureError
from indentkit.parser.levels import LevelTracker
from indentkit.parser.models import INDENT, UNDENT, Token
from indentkit.parser.tokenizer import Classifier, tokenize
from indentkit.utils import print_debug, print_warning, read_text

if TYPE_CHECKING:
    from indentkit.config import Config

LIB = "lib"
SYMBOL = "symbol"

_BARE_MODULE_RE = re.compile(r"^[A-Za-z][A-Za-z0-9_]*$")
_ROOTED_RE = re.compile(r"^[@./]")


class SymbolsClassifier(Classifier):
    """Level 0 lines name a library, level 1 lines list its symbols."""

    def classify(self, line: str, level: int) -> list[Token]:
        if level == 0:
            return [Token(kind=LIB, text=line)]
        if level == 1:
            return [Token(kind=SYMBOL, text=word) for word in line.split()]
        raise StructureError(f"Symbols file nested too deep (level {level}): {line!r}")


# ---------------------------------------------------------------------------
# Symbol table
# ---------------------------------------------------------------------------


class SymbolTable(Mapping[str, str]):
    """Read-only mapping of symbol name -> owning library."""

    def __init__(self, entries: Optional[Mapping[str, str]] = None) -> None:
        self._entries: dict[str, str] = dict(entries or {})

    def __getitem__(self, symbol: str) -> str:
        return self._entries[symbol]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"SymbolTable({self._entries!r})"

    @classmethod
    def from_file(
        cls,
        path: str | Path,
        *,
        check_files: bool = False,
        base_dir: Optional[str | Path] = None,
        debug: bool = False,
    ) -> "SymbolTable":
        """Load a symbols file from disk."""
        return load_symbols(
            read_text(path), check_files=check_files, base_dir=base_dir, debug=debug
        )

    def source_lib(self, symbol: str) -> Optional[str]:
        """Return the library that defines *symbol*, or ``None``."""
        return self._entries.get(symbol)

    def libraries(self) -> list[str]:
        """Distinct libraries, in the order they were first seen."""
        return list(dict.fromkeys(self._entries.values()))

    def libs_and_symbols(self, symbols: Iterable[str]) -> dict[str, list[str]]:
        """Group *symbols* by owning library.

        Unknown symbols are dropped. Libraries appear in the order their first
        symbol appears in *symbols*; within a library, symbols keep their
        first-seen order and duplicates are dropped.
        """
        groups: dict[str, list[str]] = {}
        for symbol in symbols:
            lib = self.source_lib(symbol)
            if lib is None:
                continue
            bucket = groups.setdefault(lib, [])
            if symbol not in bucket:
                bucket.append(symbol)
        return groups

    def needed_import_statements(self, symbols: Iterable[str]) -> list[str]:
        """One ``import {...} from '...';`` statement per contributing library."""
        return [
            f"import {{{', '.join(names)}}} from '{import_specifier(lib)}';"
            for lib, names in self.libs_and_symbols(symbols).items()
        ]


def import_specifier(lib: str) -> str:
    """Module specifier for *lib* as it appears in an import statement.

    Bare module names (``fs``) and rooted specifiers (``@std/path``,
    ``./x.ts``, ``/abs/x.ts``) are used as-is; any other relative filename
    gets a ``./`` prefix.
    """
    if _BARE_MODULE_RE.match(lib) or _ROOTED_RE.match(lib):
        return lib
    return f"./{lib}"


# ---------------------------------------------------------------------------
# Loader
# ---------------------------------------------------------------------------


def load_symbols(
    text: str,
    *,
    check_files: bool = False,
    base_dir: Optional[str | Path] = None,
    debug: bool = False,
) -> SymbolTable:
    """Parse a symbols document into a ``SymbolTable``.

    Args:
        text: The symbols document.
        check_files: Require every library to be an existing file.
        base_dir: Directory library paths are checked against (defaults to
            the current directory).
        debug: Trace each recorded symbol to the console.

    Raises:
        PreconditionError: If ``check_files`` is set and a library is missing.
        StructureError: If a symbol appears before any library, or lines are
            nested deeper than one level.
        IndentError: On indentation that does not fit the document's unit.
    """
    base = Path(base_dir) if base_dir is not None else Path(".")
    entries: dict[str, str] = {}
    cur_lib: Optional[str] = None
    level = 0

    for tok in tokenize(text, SymbolsClassifier(), LevelTracker()):
        if tok.kind == INDENT:
            level += 1
            if level > 1:
                raise StructureError(f"Symbols file nested too deep (level {level})")
        elif tok.kind == UNDENT:
            level -= 1
        elif tok.kind == LIB:
            if check_files and not (base / tok.text).is_file():
                raise PreconditionError(f"No such file: {tok.text}")
            cur_lib = tok.text
        elif tok.kind == SYMBOL:
            if cur_lib is None:
                raise StructureError(f"Symbol {tok.text!r} outside any library")
            previous = entries.get(tok.text)
            if previous is not None and previous != cur_lib:
                # Last definition wins.
                if debug:
                    print_warning(f"{tok.text} redefined: {previous} -> {cur_lib}")
            elif debug:
                print_debug(f"ADD {tok.text} from {cur_lib}")
            entries[tok.text] = cur_lib
        else:
            raise StructureError(f"Unknown token kind: {tok.kind}")

    return SymbolTable(entries)


def default_symbol_table(config: "Config") -> SymbolTable:
    """Load ``config.symbols_path`` if it exists, else return an empty table.

    The caller owns the returned table; nothing is cached.
    """
    if not config.symbols_path.is_file():
        return SymbolTable()
    return SymbolTable.from_file(
        config.symbols_path, check_files=config.check_files, debug=config.debug
    )


# ---------------------------------------------------------------------------
# Function-style helpers
# ---------------------------------------------------------------------------


def source_lib(symbol: str, table: Mapping[str, str]) -> Optional[str]:
    """Return the library that defines *symbol* in *table*, or ``None``."""
    return table.get(symbol)


def libs_and_symbols(symbols: Iterable[str], table: SymbolTable) -> dict[str, list[str]]:
    return table.libs_and_symbols(symbols)


def needed_import_statements(symbols: Iterable[str], table: SymbolTable) -> list[str]:
    return table.needed_import_statements(symbols)
