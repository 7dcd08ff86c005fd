"""Core enumerations for the Pangolin packer.

Separated from types.py to break circular dependencies. This module contains
only enum definitions with no dependencies on other core modules.
"""

from enum import Enum


class PackingStrategy(Enum):
    """How test suites are distributed into execution bundles."""

    COUNT = "count"
    TIME = "time"
