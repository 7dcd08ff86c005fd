"""Time-based packing: one bundle per suite, ordered by estimated duration."""

import math
import warnings
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Sequence

from ..core.errors import ConfigurationError, MissingEstimateWarning, NoSuitesError
from ..core.log import get_logger
from ..core.types import PackingConfig
from ..core.value_objects import Suite, ExecutionBundle
from .estimates import DEFAULT_TEST_DURATION, load_time_estimates
from .selection import eligible_tests

logger = get_logger(__name__)

EstimateLoader = Callable[..., Mapping[str, float]]


def estimate_duration(
    tests: Iterable[str],
    estimates: Mapping[str, float],
    default: float = DEFAULT_TEST_DURATION,
) -> float:
    """Sum the estimates of ``tests``, using ``default`` for unknown ones.

    The sum is exact (``math.fsum``) and therefore independent of order.
    """
    durations = []
    missing = []
    for test in tests:
        if test in estimates:
            durations.append(estimates[test])
        else:
            logger.debug(
                "Estimated test execution time not found for %s. Settling for a default.",
                test,
            )
            missing.append(test)
            durations.append(default)
    if missing:
        warnings.warn(
            f"No time estimate for {len(missing)} test(s), assuming {default}s each: "
            f"{', '.join(sorted(missing)[:5])}{' ...' if len(missing) > 5 else ''}",
            MissingEstimateWarning,
            stacklevel=2,
        )
    return math.fsum(durations)


def pack_by_time(
    suites: Sequence[Suite],
    config: PackingConfig,
    loader: Optional[EstimateLoader] = None,
) -> List[ExecutionBundle]:
    """Emit one bundle per suite tagged with its estimated execution time.

    Bundles come back longest first, ready for a greedy
    longest-remaining-work-first assignment to workers. Suites are never
    split and the result is not bounded by ``config.num_bundles``.

    Args:
        suites: Discovered suites
        config: Packing configuration with ``test_time_estimates_file`` set
        loader: Callable reading the estimates source, for injection in tests

    Raises:
        NoSuitesError: If ``suites`` is empty
        EstimateSourceError: If the estimates cannot be loaded
    """
    source = config.test_time_estimates_file
    logger.info("Packing based on individual test execution times in file path: %s", source)
    if not suites:
        raise NoSuitesError()
    if source is None:
        raise ConfigurationError("Time-based packing requires test_time_estimates_file")

    estimates = (loader or load_time_estimates)(source)

    estimated_by_suite: Dict[int, float] = {}
    for index, suite in enumerate(suites):
        eligible = eligible_tests(suite, config)
        if eligible:
            estimated_by_suite[index] = estimate_duration(sorted(eligible), estimates)
        else:
            logger.debug("Suite %s has no eligible tests, no estimate recorded", suite.name)

    skip = tuple(config.test_cases_to_skip or ())
    bundles = [
        ExecutionBundle(suite, skip, estimated_by_suite.get(index))
        for index, suite in enumerate(suites)
    ]
    # Suites without eligible tests sort as zero-length work
    bundles.sort(key=lambda b: b.estimated_execution_time or 0.0, reverse=True)

    logger.info(
        "Packed %s suites, %.2fs of estimated work in total",
        len(bundles), math.fsum(estimated_by_suite.values()),
    )
    return bundles
