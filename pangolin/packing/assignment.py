"""Greedy longest-processing-time-first preview of worker assignment.

Packing only orders bundles; the worker scheduler decides placement. This
module mirrors that scheduler's greedy policy so callers can see how
balanced a packing is expected to be.
"""

from dataclasses import dataclass, field
from typing import List, Sequence

from ..core.value_objects import ExecutionBundle


def bundle_weight(bundle: ExecutionBundle) -> float:
    """Estimated time when known, otherwise the number of tests to run."""
    if bundle.estimated_execution_time is not None:
        return bundle.estimated_execution_time
    return float(len(bundle.tests_to_run))


@dataclass
class WorkerLoad:
    """Bundles placed on one worker and their combined weight."""

    worker: int
    bundles: List[ExecutionBundle] = field(default_factory=list)
    load: float = 0.0


def assign_bundles(bundles: Sequence[ExecutionBundle], num_workers: int) -> List[WorkerLoad]:
    """Assign bundles, heaviest first, to the currently least loaded worker.

    Ties go to the lowest worker index.
    """
    if num_workers <= 0:
        raise ValueError("num_workers must be positive")

    workers = [WorkerLoad(worker=i) for i in range(num_workers)]
    for bundle in sorted(bundles, key=bundle_weight, reverse=True):
        target = min(workers, key=lambda w: w.load)
        target.bundles.append(bundle)
        target.load += bundle_weight(bundle)
    return workers


def imbalance(workers: Sequence[WorkerLoad]) -> float:
    """Ratio of the heaviest worker's load to the mean load (1.0 is perfect)."""
    if not workers:
        return 1.0
    mean = sum(w.load for w in workers) / len(workers)
    if mean == 0:
        return 1.0
    return max(w.load for w in workers) / mean
