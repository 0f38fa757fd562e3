"""
mediatype - Media types and their file extensions.

Looks up file extensions from media types and media types from file
extensions, seeded from a mime.types table and extensible at runtime.
"""

from .aliases import normalise, split_type
from .config import DEFAULT_TYPES_PATH, RegistryConfig
from .exceptions import MediaTypeError, SeedFileError, UnknownExtensionError
from .functions import (
    add_type,
    alt_types,
    ext3_from_type,
    ext_from_type,
    get_default_registry,
    is_ext,
    is_type,
    set_default_registry,
    type_from_ext,
)
from .registry import MediaTypeRegistry

__version__ = "0.40.0"
__all__ = [
    # Registry
    "MediaTypeRegistry",
    "RegistryConfig",
    "DEFAULT_TYPES_PATH",
    # Functions
    "is_type",
    "alt_types",
    "ext_from_type",
    "ext3_from_type",
    "is_ext",
    "type_from_ext",
    "add_type",
    "get_default_registry",
    "set_default_registry",
    # Helpers
    "split_type",
    "normalise",
    # Errors
    "MediaTypeError",
    "UnknownExtensionError",
    "SeedFileError",
]
