"""Packing of discovered test suites into execution bundles."""

from .selection import select_eligible, eligible_tests
from .count_packer import pack_by_count, compute_target_size
from .time_packer import pack_by_time, estimate_duration
from .estimates import load_time_estimates, DEFAULT_TEST_DURATION
from .packer import pack_tests, select_strategy
from .assignment import assign_bundles, WorkerLoad
from .manifest import load_manifest, parse_manifest, bundles_to_plan

__all__ = [
    # Selection
    "select_eligible",
    "eligible_tests",
    # Strategies
    "pack_by_count",
    "compute_target_size",
    "pack_by_time",
    "estimate_duration",
    "load_time_estimates",
    "DEFAULT_TEST_DURATION",
    # Facade
    "pack_tests",
    "select_strategy",
    # Supporting
    "assign_bundles",
    "WorkerLoad",
    "load_manifest",
    "parse_manifest",
    "bundles_to_plan",
]
