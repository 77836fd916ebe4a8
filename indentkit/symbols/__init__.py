"""indentkit symbols -- symbol -> library lookup from an indented listing.

Usage::

    from indentkit.symbols import load_symbols

    table = load_symbols(text)
    table.source_lib("isFile")
    table.needed_import_statements(["isFile", "pad"])
"""

from indentkit.symbols.loader import (
    SymbolTable,
    SymbolsClassifier,
    default_symbol_table,
    import_specifier,
    libs_and_symbols,
    load_symbols,
    needed_import_statements,
    source_lib,
)

__all__ = [
    "SymbolTable",
    "SymbolsClassifier",
    "default_symbol_table",
    "import_specifier",
    "libs_and_symbols",
    "load_symbols",
    "needed_import_statements",
    "source_lib",
]
