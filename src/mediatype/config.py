"""Registry configuration."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import dotenv_values, find_dotenv

# Seed table shipped with the package
DEFAULT_TYPES_PATH = Path(__file__).parent / "data" / "mime.types"

_FALSE_VALUES = {"0", "false", "no", "off"}


def _read_env() -> dict[str, str | None]:
    """Return .env values from the working directory, overridden by os.environ."""
    env: dict[str, str | None] = {}
    dotenv_path = find_dotenv(usecwd=True)
    if dotenv_path:
        env.update(dotenv_values(dotenv_path))
    env.update(os.environ)
    return env


@dataclass
class RegistryConfig:
    """
    Configuration for a media type registry.

    Attributes:
        types_path: Seed file in mime.types format. None uses the bundled table.
        include_types_without_extensions: Whether types listed with no
            extensions are registered. When False, such add_type calls are
            ignored.
    """

    types_path: Path | None = None
    include_types_without_extensions: bool = True

    @classmethod
    def from_env(cls) -> "RegistryConfig":
        """
        Build a config from the environment and a .env file in the working directory.

        Reads MEDIA_TYPES_FILE and MEDIA_TYPES_INCLUDE_EMPTY. The .env file is
        read but never written into os.environ.
        """
        env = _read_env()

        types_file = env.get("MEDIA_TYPES_FILE")
        include_empty = env.get("MEDIA_TYPES_INCLUDE_EMPTY") or "true"

        return cls(
            types_path=Path(types_file) if types_file else None,
            include_types_without_extensions=include_empty.strip().lower() not in _FALSE_VALUES,
        )

    def resolve_types_path(self) -> Path:
        """Return the seed file to load."""
        return Path(self.types_path) if self.types_path else DEFAULT_TYPES_PATH
