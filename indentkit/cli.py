"""indentkit command-line entry point.

Usage::

    python -m indentkit.cli scaffold outline.txt ./my-project
    python -m indentkit.cli scaffold outline.txt ./my-project --dry-run
    python -m indentkit.cli tokens src/.symbols --symbols
    python -m indentkit.cli symbols isFile pad --imports
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional

from rich.markup import escape

from indentkit.config import Config
from indentkit.errors import IndentKitError
from indentkit.parser.tokenizer import token_table, tokenize
from indentkit.scaffolder.tree import build_tree, print_file_ops
from indentkit.symbols.loader import SymbolsClassifier, default_symbol_table
from indentkit.utils import (
    console,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
    read_text,
)


def scaffold_cmd(args: argparse.Namespace, config: Config) -> int:
    spec_text = read_text(args.spec)
    file_ops = build_tree(
        args.root,
        spec_text,
        debug=config.debug,
        clear=config.clear,
        scaffold=args.dry_run,
    )
    if args.dry_run:
        print_file_ops(file_ops)
    else:
        print_success(f"Built {args.root} from {args.spec}")
    return 0


def tokens_cmd(args: argparse.Namespace, config: Config) -> int:
    classifier = SymbolsClassifier() if args.symbols else None
    tokens = tokenize(read_text(args.file), classifier)
    console.print(token_table(tokens, title=str(args.file)))
    return 0


def symbols_cmd(args: argparse.Namespace, config: Config) -> int:
    if not config.symbols_path.is_file():
        print_error(f"Symbols file not found: {config.symbols_path}")
        return 1
    table = default_symbol_table(config)

    if args.imports:
        for stmt in table.needed_import_statements(args.names):
            console.print(stmt, markup=False, highlight=False)
        return 0

    found = {name: table.source_lib(name) or "-" for name in args.names}
    print_summary_table(found, title="Symbols")
    missing = [name for name, lib in found.items() if lib == "-"]
    if missing:
        print_warning(f"Unknown symbols: {', '.join(missing)}")
        return 1
    return 0


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="indentkit",
        description="indentkit -- indentation-structured outlines and symbol tables",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  indentkit scaffold outline.txt ./my-project --dry-run\n"
            "  indentkit tokens src/.symbols --symbols\n"
            "  indentkit symbols isFile pad --imports\n"
        ),
    )
    p.add_argument("--debug", action="store_true", default=None, help="Trace parser activity")
    sub = p.add_subparsers(dest="command", required=True)

    s = sub.add_parser("scaffold", help="Build a directory tree from an indented outline")
    s.add_argument("spec", type=Path, help="Path to the outline file")
    s.add_argument("root", type=Path, help="Directory to build into")
    s.add_argument("--dry-run", action="store_true", help="Only print the operations")
    s.add_argument("--clear", action="store_true", default=None, help="Empty the root first")
    s.set_defaults(func=scaffold_cmd)

    t = sub.add_parser("tokens", help="Print the token stream of an indented file")
    t.add_argument("file", type=Path, help="File to tokenize")
    t.add_argument("--symbols", action="store_true", help="Use the symbols-file classifier")
    t.set_defaults(func=tokens_cmd)

    y = sub.add_parser("symbols", help="Look up the libraries defining symbols")
    y.add_argument("names", nargs="+", help="Symbol names")
    y.add_argument("--symbols-file", type=Path, default=None, help="Symbols file (default: src/.symbols)")
    y.add_argument("--check-files", action="store_true", default=None, help="Require libraries to exist")
    y.add_argument("--imports", action="store_true", help="Print import statements instead")
    y.set_defaults(func=symbols_cmd)

    return p


def _apply_overrides(config: Config, args: argparse.Namespace) -> Config:
    updates: dict[str, object] = {}
    if args.debug is not None:
        updates["debug"] = args.debug
    if getattr(args, "clear", None) is not None:
        updates["clear"] = args.clear
    if getattr(args, "check_files", None) is not None:
        updates["check_files"] = args.check_files
    if getattr(args, "symbols_file", None) is not None:
        updates["symbols_path"] = args.symbols_file
    return config.model_copy(update=updates)


def main(argv: Optional[list[str]] = None) -> int:
    """CLI entry point for ``python -m indentkit.cli`` and ``indentkit``."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    config = _apply_overrides(Config.from_env(), args)

    try:
        return int(args.func(args, config))
    except FileNotFoundError as e:
        print_error(f"Error: File not found: {escape(str(e.filename))}")
        return 1
    except IndentKitError as e:
        print_error(f"Error: {escape(str(e))}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
