"""Core type definitions for the Pangolin packer."""

from pathlib import Path
from typing import List, Optional, Any

from pydantic import BaseModel, Field, field_validator

from .enums import PackingStrategy


def _split_identifiers(value: Any) -> Any:
    """Accept comma-separated strings where a list of identifiers is expected."""
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    return value


class PackingConfig(BaseModel):
    """Configuration consumed by the packers."""

    num_bundles: int = Field(4, gt=0, description="Desired number of bundles")
    test_cases_to_run: Optional[List[str]] = None  # allow-list
    test_cases_to_skip: Optional[List[str]] = None  # deny-list
    no_split: List[str] = Field(default_factory=list)  # suite names
    test_time_estimates_file: Optional[Path] = None

    @field_validator("test_cases_to_run", "test_cases_to_skip", mode="before")
    @classmethod
    def _coerce_identifier_lists(cls, value: Any) -> Any:
        return _split_identifiers(value)

    @field_validator("no_split", mode="before")
    @classmethod
    def _coerce_no_split(cls, value: Any) -> Any:
        if value is None:
            return []
        return _split_identifiers(value)

    @property
    def strategy(self) -> PackingStrategy:
        """Strategy implied by the presence of a time estimates source."""
        if self.test_time_estimates_file is None:
            return PackingStrategy.COUNT
        return PackingStrategy.TIME


class PangolinConfig(BaseModel):
    """Main packer configuration."""

    packing: PackingConfig = Field(default_factory=PackingConfig)
    log_level: str = "INFO"
