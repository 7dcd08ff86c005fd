"""Loading of per-test execution time estimates."""

import math
from numbers import Real
from pathlib import Path
from typing import Dict, Union

from ..core.errors import EstimateSourceError, FilesystemError, DeserializationError
from ..core.log import get_logger
from ..utils.codec import from_json_string
from ..utils.filesystem import read_text

logger = get_logger(__name__)

DEFAULT_TEST_DURATION = 1.0


def load_time_estimates(source: Union[str, Path]) -> Dict[str, float]:
    """Read a JSON object mapping test identifiers to durations in seconds.

    Raises:
        EstimateSourceError: If the file is missing, unreadable, not valid
            JSON, or does not map strings to finite non-negative numbers
    """
    try:
        data = from_json_string(read_text(Path(source)))
    except (FilesystemError, DeserializationError) as e:
        raise EstimateSourceError(
            f"Could not load test time estimates from '{source}'\n{e.message}",
            source=source,
        ) from e

    if not isinstance(data, dict):
        raise EstimateSourceError(
            f"Test time estimates in '{source}' must be a JSON object, "
            f"got {type(data).__name__}",
            source=source,
        )

    estimates: Dict[str, float] = {}
    for test, duration in data.items():
        # bool is a Real subclass but never a duration
        if isinstance(duration, bool) or not isinstance(duration, Real):
            raise EstimateSourceError(
                f"Estimate for '{test}' in '{source}' is not a number: {duration!r}",
                source=source,
                details={"test": test},
            )
        if not math.isfinite(duration):
            raise EstimateSourceError(
                f"Estimate for '{test}' in '{source}' is not finite: {duration}",
                source=source,
                details={"test": test},
            )
        if duration < 0:
            raise EstimateSourceError(
                f"Estimate for '{test}' in '{source}' is negative: {duration}",
                source=source,
                details={"test": test},
            )
        estimates[test] = float(duration)

    logger.debug(
        "Loaded %s test time estimates from %s", len(estimates), source,
        extra={"event_type": "estimate", "estimate_count": len(estimates)},
    )
    return estimates
