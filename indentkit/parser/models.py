"""Pydantic v2 models for the indentation tokenizer.

A token is either structural (``indent`` / ``undent``) or a content token
whose kind is chosen by the classifier of the consuming DSL.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Token kinds
# ---------------------------------------------------------------------------

INDENT = "indent"
UNDENT = "undent"
LINE = "line"

STRUCTURAL_KINDS = frozenset({INDENT, UNDENT})


# ---------------------------------------------------------------------------
# Token
# ---------------------------------------------------------------------------

class Token(BaseModel):
    """A single tokenizer output unit."""

    model_config = ConfigDict(frozen=True)

    kind: str = Field(..., min_length=1, description="'indent', 'undent' or a classifier tag")
    text: str = Field(default="", description="Content text; empty for structural tokens")
    value: Optional[Any] = Field(default=None, description="Optional classifier payload")

    @classmethod
    def indent(cls) -> "Token":
        return cls(kind=INDENT)

    @classmethod
    def undent(cls) -> "Token":
        return cls(kind=UNDENT)

    @property
    def is_structural(self) -> bool:
        """``True`` for ``indent`` and ``undent`` tokens."""
        return self.kind in STRUCTURAL_KINDS

    def is_kind(self, *kinds: str) -> bool:
        return self.kind in kinds
