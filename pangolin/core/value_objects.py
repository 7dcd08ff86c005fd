"""Domain primitives for discovered suites and packed execution bundles."""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Optional, Tuple


def _normalize_identifiers(identifiers: Optional[Iterable[str]]) -> Tuple[str, ...]:
    """Sorted, de-duplicated tuple of test identifiers."""
    if not identifiers:
        return ()
    return tuple(sorted(set(identifiers)))


@dataclass(frozen=True)
class Suite:
    """A discovered, buildable test target.

    Suites are read-only input to the packers. Packing never mutates a suite;
    every bundle holds a reference to the original value plus its own skip list.
    """

    path: str
    name: str
    test_cases: Tuple[str, ...] = ()
    skip_test_identifiers: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.path or not self.path.strip():
            raise ValueError("Suite path cannot be empty")
        if not self.name or not self.name.strip():
            raise ValueError("Suite name cannot be empty")
        # Accept any iterable from callers but store tuples
        object.__setattr__(self, "test_cases", tuple(self.test_cases))
        object.__setattr__(
            self, "skip_test_identifiers", tuple(self.skip_test_identifiers)
        )

    @property
    def num_tests(self) -> int:
        return len(self.test_cases)

    def __str__(self) -> str:
        return f"{self.name} ({self.num_tests} tests)"


@dataclass(frozen=True)
class ExecutionBundle:
    """One unit of packed work handed to a single worker.

    The worker runs every test of ``suite`` except the identifiers in
    ``skip_test_identifiers``.
    """

    suite: Suite
    skip_test_identifiers: Tuple[str, ...] = field(default=())
    estimated_execution_time: Optional[float] = None

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "skip_test_identifiers",
            _normalize_identifiers(self.skip_test_identifiers),
        )

    @property
    def suite_path(self) -> str:
        return self.suite.path

    @property
    def name(self) -> str:
        return self.suite.name

    @property
    def tests_to_run(self) -> Tuple[str, ...]:
        """Suite tests left over once the skip list is applied."""
        skipped = set(self.skip_test_identifiers)
        return tuple(sorted(t for t in set(self.suite.test_cases) if t not in skipped))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "path": self.suite_path,
            "name": self.name,
            "skip_test_identifiers": list(self.skip_test_identifiers),
            "estimated_execution_time": self.estimated_execution_time,
        }

    def __str__(self) -> str:
        if self.estimated_execution_time is not None:
            return f"{self.name}[~{self.estimated_execution_time:.2f}s]"
        return f"{self.name}[{len(self.tests_to_run)} tests]"
