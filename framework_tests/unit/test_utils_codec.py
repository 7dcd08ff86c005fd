"""Tests for JSON codec and filesystem helpers."""

from pathlib import Path

import pytest

from pangolin.core.errors import (
    DeserializationError,
    PathError,
    SerializationError,
)
from pangolin.core.types import PackingConfig
from pangolin.core.value_objects import ExecutionBundle, Suite
from pangolin.utils.codec import from_json_string, to_json_string
from pangolin.utils.filesystem import atomic_write, read_text


class TestCodec:
    """Test JSON helpers."""

    def test_special_types(self):
        bundle = ExecutionBundle(Suite("/p", "A", ("t1",)))
        encoded = to_json_string(
            {"path": Path("/tmp/x"), "set": {"b", "a"}, "bundle": bundle,
             "config": PackingConfig(num_bundles=2)}
        )

        decoded = from_json_string(encoded)
        assert decoded["path"] == "/tmp/x"
        assert decoded["set"] == ["a", "b"]
        assert decoded["bundle"]["name"] == "A"
        assert decoded["config"]["num_bundles"] == 2

    def test_unserializable(self):
        with pytest.raises(SerializationError):
            to_json_string({"x": object()})

    def test_invalid_json(self):
        with pytest.raises(DeserializationError):
            from_json_string("{")


class TestFilesystem:
    """Test read_text and atomic_write."""

    def test_atomic_write_then_read(self, temp_dir):
        target = temp_dir / "nested" / "plan.json"

        atomic_write(target, '{"ok": true}')

        assert read_text(target) == '{"ok": true}'
        assert [p.name for p in target.parent.iterdir()] == ["plan.json"]

    def test_read_missing(self, temp_dir):
        with pytest.raises(PathError):
            read_text(temp_dir / "missing.txt")
