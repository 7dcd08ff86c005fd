"""Test configuration and fixtures for framework unit tests."""

import json
import shutil
import tempfile
from pathlib import Path
from typing import Iterable, Optional

import pytest

from pangolin.core.log import shutdown_logging
from pangolin.core.types import PackingConfig
from pangolin.core.value_objects import Suite


def make_suite(
    name: str,
    tests: Iterable[str],
    skip: Iterable[str] = (),
    path: Optional[str] = None,
) -> Suite:
    """Build a suite whose path defaults to ``/build/<name>``."""
    return Suite(
        path=path or f"/build/{name}",
        name=name,
        test_cases=tuple(tests),
        skip_test_identifiers=tuple(skip),
    )


def numbered_tests(prefix: str, count: int) -> list:
    """``count`` zero-padded test identifiers so lexical and numeric order agree."""
    return [f"{prefix}/test{i:03d}" for i in range(count)]


@pytest.fixture(name="make_suite")
def make_suite_fixture():
    """Factory for suites, see ``make_suite``."""
    return make_suite


@pytest.fixture(name="numbered_tests")
def numbered_tests_fixture():
    """Factory for numbered test identifiers, see ``numbered_tests``."""
    return numbered_tests


@pytest.fixture
def temp_dir():
    """Provide a temporary directory for tests."""
    temp_path = Path(tempfile.mkdtemp(prefix="pangolin_test_"))
    try:
        yield temp_path
    finally:
        if temp_path.exists():
            shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def count_config():
    """Count-based configuration with two bundles and no lists."""
    return PackingConfig(num_bundles=2)


@pytest.fixture
def estimates_file(temp_dir):
    """Write an estimates JSON file and return its path."""

    def _write(data, name: str = "estimates.json") -> Path:
        path = temp_dir / name
        path.write_text(
            data if isinstance(data, str) else json.dumps(data), encoding="utf-8"
        )
        return path

    return _write


@pytest.fixture(autouse=True)
def cleanup_logging():
    """Undo any logging configuration a test (or the CLI) installed."""
    yield
    shutdown_logging()
