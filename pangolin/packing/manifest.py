"""Suite manifests and packing plans.

A manifest is what the discovery step hands over: a JSON or YAML document
listing the suites to pack. A plan is the serialized packing result.
"""

from pathlib import Path
from typing import Any, Dict, List, Sequence, Union

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from ..core.enums import PackingStrategy
from ..core.errors import (
    DeserializationError,
    FilesystemError,
    ManifestError,
)
from ..core.log import get_logger
from ..core.value_objects import Suite, ExecutionBundle
from ..utils.codec import from_json_string
from ..utils.filesystem import read_text

logger = get_logger(__name__)


class SuiteEntry(BaseModel):
    """One suite as listed in a manifest."""

    path: str = Field(min_length=1)
    name: str = Field(min_length=1)
    tests: List[str] = Field(default_factory=list)
    skip_tests: List[str] = Field(default_factory=list)

    @field_validator("path", "name", mode="before")
    @classmethod
    def _strip(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    def to_suite(self) -> Suite:
        return Suite(
            path=self.path,
            name=self.name,
            test_cases=tuple(self.tests),
            skip_test_identifiers=tuple(self.skip_tests),
        )


class SuiteManifest(BaseModel):
    """Top-level manifest document."""

    suites: List[SuiteEntry] = Field(default_factory=list)


def parse_manifest(data: Any) -> List[Suite]:
    """Validate manifest data, either ``{"suites": [...]}`` or a bare list."""
    if isinstance(data, list):
        data = {"suites": data}
    try:
        manifest = SuiteManifest.model_validate(data)
    except ValidationError as e:
        raise ManifestError(f"Invalid suite manifest: {e}", details={"errors": e.errors()}) from e
    try:
        return [entry.to_suite() for entry in manifest.suites]
    except ValueError as e:
        raise ManifestError(f"Invalid suite manifest: {e}") from e


def load_manifest(path: Union[str, Path]) -> List[Suite]:
    """Load suites from a JSON or YAML manifest file."""
    path = Path(path)
    try:
        text = read_text(path)
        if path.suffix.lower() in (".yml", ".yaml"):
            data = yaml.safe_load(text)
        else:
            data = from_json_string(text)
    except (FilesystemError, DeserializationError) as e:
        raise ManifestError(f"Could not load suite manifest '{path}': {e.message}") from e
    except yaml.YAMLError as e:
        raise ManifestError(f"Could not parse suite manifest '{path}': {e}") from e

    suites = parse_manifest(data)
    logger.debug("Loaded %s suites from %s", len(suites), path)
    return suites


def bundles_to_plan(
    bundles: Sequence[ExecutionBundle], strategy: PackingStrategy
) -> Dict[str, Any]:
    """JSON-ready description of a packing result."""
    return {
        "strategy": strategy.value,
        "bundle_count": len(bundles),
        "bundles": [bundle.to_dict() for bundle in bundles],
    }
