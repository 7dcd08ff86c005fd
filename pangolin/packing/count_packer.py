"""Count-based packing: split suites into equally sized chunks of test cases."""

from typing import List, Sequence, Set, Tuple

from ..core.errors import NoSuitesError
from ..core.log import get_logger
from ..core.types import PackingConfig
from ..core.value_objects import Suite, ExecutionBundle
from .selection import eligible_tests

logger = get_logger(__name__)


def compute_target_size(total_tests: int, num_bundles: int) -> int:
    """Global chunk size shared by every suite; never less than one."""
    return max(1, total_tests // num_bundles)


def chunk(identifiers: Sequence[str], size: int) -> List[Sequence[str]]:
    """Slice into contiguous chunks of ``size``; the last one may be shorter."""
    return [identifiers[i:i + size] for i in range(0, len(identifiers), size)]


def pack_by_count(suites: Sequence[Suite], config: PackingConfig) -> List[ExecutionBundle]:
    """Pack suites into bundles of roughly ``total / num_bundles`` tests each.

    Suites in the no-split set, and suites small enough to fit in a single
    chunk, become one bundle each and lead the result, most recently
    processed first. Larger suites are split into contiguous chunks of their
    sorted eligible tests, appended in processing order.

    Raises:
        NoSuitesError: If ``suites`` is empty
    """
    logger.info("Packing test bundles based on test counts.")
    if not suites:
        raise NoSuitesError()

    no_split = set(config.no_split)
    candidates: List[Tuple[Suite, Set[str]]] = [
        (suite, eligible_tests(suite, config)) for suite in suites
    ]
    # Largest first; sorted() keeps ties in discovery order
    candidates.sort(key=lambda pair: len(pair[1]), reverse=True)

    total_tests = sum(
        len(eligible) for suite, eligible in candidates if suite.name not in no_split
    )
    target_size = compute_target_size(total_tests, config.num_bundles)
    logger.debug(
        "%s eligible tests across %s suites, %s tests per bundle",
        total_tests, len(candidates), target_size,
    )

    front: List[ExecutionBundle] = []
    tail: List[ExecutionBundle] = []
    for suite, eligible in candidates:
        to_run = sorted(eligible)
        if suite.name in no_split or 0 < len(to_run) <= target_size:
            # Whole suite; the deny-list is the only thing skipped
            front.append(ExecutionBundle(suite, tuple(config.test_cases_to_skip or ())))
            continue
        if not to_run:
            logger.debug("Suite %s has no eligible tests, skipping", suite.name)
            continue

        all_tests = set(suite.test_cases)
        chunks = chunk(to_run, target_size)
        for selection in chunks:
            skipped = (all_tests - set(selection)) | set(suite.skip_test_identifiers)
            tail.append(ExecutionBundle(suite, tuple(skipped)))
        packed = sum(len(selection) for selection in chunks)
        assert packed == len(to_run), f"lost tests while splitting {suite.name}"
        logger.debug(
            "Split %s into %s bundles", suite.name, len(chunks),
            extra={"event_type": "bundle", "suite": suite.name, "chunks": len(chunks)},
        )

    # Whole-suite bundles were collected in processing order but lead the
    # result in reverse processing order
    front.reverse()
    bundles = front + tail
    logger.info("Packed %s suites into %s bundles", len(candidates), len(bundles))
    return bundles
