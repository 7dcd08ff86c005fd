"""Error hierarchy and exception system for the Pangolin packer."""

from pathlib import Path
from typing import Optional, Dict, Any, Union


class PangolinError(Exception):
    """Base exception for all Pangolin errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


# Configuration and Setup Errors
class ConfigurationError(PangolinError):
    """Error in packer configuration."""


# Data and Codec Errors
class CodecError(PangolinError):
    """Data encoding/decoding error."""


class SerializationError(CodecError):
    """Data serialization error."""


class DeserializationError(CodecError):
    """Data deserialization error."""


# Filesystem and IO Errors
class FilesystemError(PangolinError):
    """Filesystem operation error."""


class PathError(FilesystemError):
    """Path resolution or validation error."""


class AtomicWriteError(FilesystemError):
    """Atomic write operation failed."""


# Packing Errors
class PackingError(PangolinError):
    """Error while packing test suites into bundles."""


class NoSuitesError(PackingError):
    """No test suites were discovered, so there is nothing to pack."""

    DEFAULT_MESSAGE = (
        "Found no test suites.\n"
        "Perhaps you forgot to 'build-for-testing' before discovery?"
    )

    def __init__(self, message: str = DEFAULT_MESSAGE,
                 details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, details)


class EstimateSourceError(PackingError):
    """Test time estimates could not be read or parsed."""

    def __init__(self, message: str, source: Union[str, Path, None] = None,
                 details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, details)
        self.source = source


class ManifestError(PackingError):
    """Suite manifest could not be read or validated."""


# Warnings
class MissingEstimateWarning(UserWarning):
    """Some tests had no time estimate and were given the default duration."""
