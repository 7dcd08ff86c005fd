"""
Pangolin: Test Bundle Packing for Parallel Test Runners

Distributes discovered test suites across a fixed number of execution
bundles so that concurrent test workers finish in roughly balanced time.
Packing is either count-based (equal-sized chunks of test cases) or
time-based (one bundle per suite, annotated with estimated durations).
"""

__version__ = "1.0.0"

from .core.enums import PackingStrategy
from .core.errors import (
    PangolinError,
    NoSuitesError,
    EstimateSourceError,
    MissingEstimateWarning,
)
from .core.types import PackingConfig, PangolinConfig
from .core.value_objects import Suite, ExecutionBundle
from .packing import pack_tests

__all__ = [
    "__version__",
    "PackingStrategy",
    "PangolinError",
    "NoSuitesError",
    "EstimateSourceError",
    "MissingEstimateWarning",
    "PackingConfig",
    "PangolinConfig",
    "Suite",
    "ExecutionBundle",
    "pack_tests",
]
