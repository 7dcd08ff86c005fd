"""Tests for error hierarchy and exception handling."""

from pathlib import Path

import pytest

from pangolin.core.errors import (
    PangolinError,
    ConfigurationError,
    CodecError,
    SerializationError,
    DeserializationError,
    FilesystemError,
    PathError,
    AtomicWriteError,
    PackingError,
    NoSuitesError,
    EstimateSourceError,
    ManifestError,
    MissingEstimateWarning,
)


class TestBaseError:
    """Test base PangolinError class."""

    def test_basic_error_creation(self) -> None:
        error = PangolinError("Test error")
        assert str(error) == "Test error"
        assert error.message == "Test error"
        assert error.details == {}

    def test_error_with_details(self) -> None:
        error = PangolinError("Test error", {"key": "value"})
        assert error.details == {"key": "value"}


class TestHierarchy:
    """Test the inheritance structure."""

    @pytest.mark.parametrize(
        "error_class,parent",
        [
            (ConfigurationError, PangolinError),
            (CodecError, PangolinError),
            (SerializationError, CodecError),
            (DeserializationError, CodecError),
            (FilesystemError, PangolinError),
            (PathError, FilesystemError),
            (AtomicWriteError, FilesystemError),
            (PackingError, PangolinError),
            (NoSuitesError, PackingError),
            (EstimateSourceError, PackingError),
            (ManifestError, PackingError),
        ],
    )
    def test_subclass(self, error_class, parent) -> None:
        assert issubclass(error_class, parent)

    def test_missing_estimate_is_a_warning(self) -> None:
        assert issubclass(MissingEstimateWarning, UserWarning)
        assert not issubclass(MissingEstimateWarning, PangolinError)


class TestPackingErrors:
    """Test packing-specific errors."""

    def test_no_suites_default_hint(self) -> None:
        error = NoSuitesError()
        assert "Found no test suites" in error.message
        assert "build-for-testing" in error.message

    def test_estimate_source_carries_source(self) -> None:
        error = EstimateSourceError("bad", source=Path("times.json"))
        assert error.source == Path("times.json")
        assert error.message == "bad"
