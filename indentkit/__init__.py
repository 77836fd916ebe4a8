"""indentkit package

Indentation-structured block tokenizer and the two consumers built on it.

Key responsibilities are split across sub-packages:
- `parser`: level tracking, the tokenizer and the token queue
- `scaffolder`: builds directory/file trees from an indented outline
- `symbols`: symbol -> library lookup table and import statements
- `cli.py`: command-line entry point
"""

from __future__ import annotations

from indentkit.errors import (
    IndentError,
    IndentJumpError,
    IndentKitError,
    PreconditionError,
    StructureError,
)

__all__ = [
    "IndentError",
    "IndentJumpError",
    "IndentKitError",
    "PreconditionError",
    "StructureError",
    "__version__",
]

__version__ = "0.1.0"
