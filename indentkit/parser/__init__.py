"""indentkit block tokenizer.

Converts indentation-structured text into a balanced stream of ``indent`` /
``undent`` markers and classifier-produced content tokens.

Usage::

    from indentkit.parser import LevelTracker, TokenQueue, tokenize

    tracker = LevelTracker()
    tokens = tokenize(text, tracker=tracker)
    queue = TokenQueue(tokens)
"""

from indentkit.parser.levels import LevelTracker, block_lines
from indentkit.parser.models import INDENT, LINE, UNDENT, Token
from indentkit.parser.tokenizer import (
    Classifier,
    DefaultClassifier,
    TokenQueue,
    check_balanced,
    token_table,
    tokenize,
    tokenize_file,
)

__all__ = [
    "INDENT",
    "LINE",
    "UNDENT",
    "Classifier",
    "DefaultClassifier",
    "LevelTracker",
    "Token",
    "TokenQueue",
    "block_lines",
    "check_balanced",
    "token_table",
    "tokenize",
    "tokenize_file",
]
