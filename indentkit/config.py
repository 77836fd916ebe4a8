"""indentkit configuration.

Typed settings shared by the CLI and the library entry points. All settings
use a Pydantic v2 model so they are validated at construction time and can be
serialised to/from JSON or read from environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str) -> bool | None:
    """Read a boolean environment variable, ``None`` when it is unset."""
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return None
    return raw.strip().lower() in _TRUTHY


class Config(BaseModel):
    """Global indentkit configuration.

    Instances are typically created once by the CLI entry point (or by a
    test) and then passed explicitly to the functions that need them.
    Nothing in the library reads a configuration implicitly.
    """

    symbols_path: Path = Field(
        default=Path("src/.symbols"),
        description="Conventional location of the symbols file",
    )
    check_files: bool = Field(
        default=False, description="Require every library in the symbols file to exist"
    )
    debug: bool = Field(default=False, description="Trace parser activity to the console")
    clear: bool = Field(
        default=False, description="Empty an existing scaffold root before building into it"
    )

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Args:
            path: Destination file. Parent directories are created.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            INDENTKIT_SYMBOLS_PATH, INDENTKIT_CHECK_FILES, INDENTKIT_DEBUG,
            INDENTKIT_CLEAR.
        """
        kwargs: dict[str, object] = {}
        if os.environ.get("INDENTKIT_SYMBOLS_PATH"):
            kwargs["symbols_path"] = Path(os.environ["INDENTKIT_SYMBOLS_PATH"])

        for field_name, env_name in (
            ("check_files", "INDENTKIT_CHECK_FILES"),
            ("debug", "INDENTKIT_DEBUG"),
            ("clear", "INDENTKIT_CLEAR"),
        ):
            flag = _env_flag(env_name)
            if flag is not None:
                kwargs[field_name] = flag

        return cls(**kwargs)
