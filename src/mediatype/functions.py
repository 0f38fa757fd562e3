"""Function-style access to a default media type registry.

Each function delegates to the matching MediaTypeRegistry method. Pass
``registry=`` to use a specific instance; otherwise the default registry is
used, built from RegistryConfig.from_env() on first use.
"""

from src.logging import get_logger

from .config import RegistryConfig
from .registry import MediaTypeRegistry

logger = get_logger(__name__)

_default_registry: MediaTypeRegistry | None = None


def get_default_registry() -> MediaTypeRegistry:
    """Return the default registry, creating it if needed."""
    global _default_registry
    if _default_registry is None:
        _default_registry = MediaTypeRegistry.from_config(RegistryConfig.from_env())
        logger.debug("Default media type registry initialised")
    return _default_registry


def set_default_registry(registry: MediaTypeRegistry | None) -> None:
    """Install the default registry. None resets it to lazy creation."""
    global _default_registry
    _default_registry = registry


def _resolve(registry: MediaTypeRegistry | None) -> MediaTypeRegistry:
    return registry if registry is not None else get_default_registry()


def is_type(media_type: str, registry: MediaTypeRegistry | None = None) -> list[str] | None:
    """Return the extensions registered for a media type, or None if unknown."""
    return _resolve(registry).is_type(media_type)


def alt_types(media_type: str, registry: MediaTypeRegistry | None = None) -> list[str]:
    """Return registered media types equivalent or related to media_type."""
    return _resolve(registry).alt_types(media_type)


def ext_from_type(
    media_type: str, first: bool = False, registry: MediaTypeRegistry | None = None
) -> list[str] | str | None:
    """Get the extensions of a media type (first=True for the preferred one)."""
    return _resolve(registry).ext_from_type(media_type, first=first)


def ext3_from_type(
    media_type: str, first: bool = False, registry: MediaTypeRegistry | None = None
) -> list[str] | str | None:
    """Get the extensions of at most three characters of a media type."""
    return _resolve(registry).ext3_from_type(media_type, first=first)


def is_ext(extension: str, registry: MediaTypeRegistry | None = None) -> list[str] | None:
    """Return the media types registered for an extension, or None if unknown."""
    return _resolve(registry).is_ext(extension)


def type_from_ext(
    extension: str, first: bool = False, registry: MediaTypeRegistry | None = None
) -> list[str] | str:
    """Get the media types of an extension; raises UnknownExtensionError if unknown."""
    return _resolve(registry).type_from_ext(extension, first=first)


def add_type(media_type: str, *extensions: str, registry: MediaTypeRegistry | None = None) -> None:
    """Add a media type with optional extensions."""
    _resolve(registry).add_type(media_type, *extensions)
