"""Bidirectional registry of media types and file extensions."""

from collections.abc import Iterable, Iterator
from dataclasses import replace
from pathlib import Path

from src.logging import get_logger

from .aliases import aliases_for, normalise, split_type
from .config import RegistryConfig
from .exceptions import SeedFileError, UnknownExtensionError

logger = get_logger(__name__)


class MediaTypeRegistry:
    """
    Registry mapping media types to file extensions and back.

    Both directions preserve insertion order and keep duplicates. The first
    entry of a list is treated as the preferred answer. Instances share no
    mutable state; use clone() to fork one.
    """

    def __init__(self, config: RegistryConfig | None = None):
        """
        Create an empty registry.

        Args:
            config: Registry configuration (defaults to RegistryConfig())
        """
        self.config = config or RegistryConfig()
        # category -> subtype -> extensions
        self._types: dict[str, dict[str, list[str]]] = {}
        # extension -> media types
        self._extensions: dict[str, list[str]] = {}

    @classmethod
    def new(
        cls,
        source: Iterable[str] | str | Path | None = None,
        config: RegistryConfig | None = None,
    ) -> "MediaTypeRegistry":
        """
        Create a registry seeded from a mime.types source.

        Args:
            source: Lines or a path to read. Defaults to the configured seed file.
            config: Registry configuration

        Returns:
            The populated registry

        Raises:
            SeedFileError: If the seed file cannot be read
        """
        registry = cls(config)
        if source is None:
            source = registry.config.resolve_types_path()
        return registry.add_types_from_file(source)

    @classmethod
    def from_config(cls, config: RegistryConfig) -> "MediaTypeRegistry":
        """Create a registry seeded from the file named by config."""
        return cls.new(config=config)

    def clone(self) -> "MediaTypeRegistry":
        """Return an independent copy of this registry."""
        copy = type(self)(replace(self.config))
        copy._types = {
            category: {subtype: list(exts) for subtype, exts in subtypes.items()}
            for category, subtypes in self._types.items()
        }
        copy._extensions = {ext: list(types) for ext, types in self._extensions.items()}
        return copy

    def add_types_from_file(self, source: Iterable[str] | str | Path) -> "MediaTypeRegistry":
        """
        Import types from mime.types formatted data.

        Each line holds a media type followed by zero or more extensions,
        separated by whitespace. "#" starts a comment.

        Args:
            source: Iterable of lines, or a path to a file

        Returns:
            This registry, for chaining
        """
        if isinstance(source, (str, Path)):
            path = Path(source)
            try:
                with open(path, encoding="utf-8") as f:
                    lines = f.readlines()
            except (OSError, UnicodeDecodeError) as e:
                logger.error(f"Failed to read media types from {path}: {e}")
                raise SeedFileError(path, str(e)) from e
            count = self._add_lines(lines)
            logger.debug(f"Loaded {count} media type records from {path}")
        else:
            self._add_lines(source)
        return self

    def _add_lines(self, lines: Iterable[str]) -> int:
        count = 0
        for line in lines:
            line = line.lstrip().split("#", 1)[0].rstrip()
            if line:
                self.add_type(*line.split())
                count += 1
        return count

    def add_type(self, media_type: str, *extensions: str) -> None:
        """
        Add a media type with optional extensions.

        Types without a "/" are ignored. Nothing is deduplicated.

        Args:
            media_type: Media type, e.g. "image/jpeg"
            *extensions: Extensions to associate, without a leading dot
        """
        if not media_type:
            return

        category, subtype = split_type(media_type)
        if subtype is None:
            logger.debug(f"Ignoring malformed media type: {media_type!r}")
            return

        if not extensions and not self.config.include_types_without_extensions:
            return

        self._types.setdefault(category, {}).setdefault(subtype, []).extend(extensions)
        for ext in extensions:
            self._extensions.setdefault(ext, []).append(media_type)

    def is_type(self, media_type: str) -> list[str] | None:
        """
        Look up a media type.

        Note that a registered type may have no extensions, in which case an
        empty list is returned.

        Returns:
            The registered extension list, or None if the type is unknown
        """
        category, subtype = split_type(media_type)
        if not subtype:
            return None
        return self._types.get(category, {}).get(subtype)

    def __contains__(self, media_type: object) -> bool:
        return isinstance(media_type, str) and self.is_type(media_type) is not None

    def ext_from_type(self, media_type: str, first: bool = False) -> list[str] | str | None:
        """
        Get the extensions of a media type, in the order they were added.

        Args:
            media_type: Media type to look up
            first: Return only the first (preferred) extension

        Returns:
            List of extensions (empty if unknown), or the first one / None when first=True
        """
        exts = list(self.is_type(media_type) or [])
        if first:
            return exts[0] if exts else None
        return exts

    def ext3_from_type(self, media_type: str, first: bool = False) -> list[str] | str | None:
        """Like ext_from_type, but only extensions of at most three characters."""
        exts = [ext for ext in self.ext_from_type(media_type) if len(ext) <= 3]
        if first:
            return exts[0] if exts else None
        return exts

    def is_ext(self, extension: str) -> list[str] | None:
        """Return the media types registered for an extension, or None if unknown."""
        return self._extensions.get(extension)

    def type_from_ext(self, extension: str, first: bool = False) -> list[str] | str:
        """
        Get the media types of an extension, in the order they were added.

        Args:
            extension: Extension without a leading dot
            first: Return only the first media type

        Raises:
            UnknownExtensionError: If the extension was never registered
        """
        types = self.is_ext(extension)
        if types is None:
            raise UnknownExtensionError(extension)
        if first:
            return types[0]
        return list(types)

    def alt_types(self, media_type: str) -> list[str]:
        """
        Return registered media types equivalent or related to media_type.

        For instance alt_types("model/dwg") includes "image/vnd.dwg".
        The result is sorted and has no duplicates.
        """
        category, subtype = normalise(media_type)
        if subtype is None:
            return []

        candidates = [
            f"{category}/{subtype}",
            f"{category}/x-{subtype}",
            f"x-{category}/x-{subtype}",
            f"{category}/vnd.{subtype}",
        ]
        candidates.extend(aliases_for(media_type))

        return sorted({c for c in candidates if self.is_type(c) is not None})

    def types(self) -> Iterator[str]:
        """Yield every registered media type."""
        for category, subtypes in self._types.items():
            for subtype in subtypes:
                yield f"{category}/{subtype}"

    def extensions(self) -> Iterator[str]:
        """Yield every registered extension."""
        yield from self._extensions
