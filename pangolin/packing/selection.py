"""Selection of the test cases of a suite that are eligible to run."""

from typing import Iterable, Optional, Set

from ..core.types import PackingConfig
from ..core.value_objects import Suite


def select_eligible(
    all_tests: Iterable[str],
    allow: Optional[Iterable[str]] = None,
    deny: Optional[Iterable[str]] = None,
) -> Set[str]:
    """Compute the eligible subset of a suite's tests.

    ``allow`` and ``deny`` distinguish "not configured" (None) from "configured
    but empty": an empty allow-list selects nothing.

    Args:
        all_tests: Every test identifier the suite contains
        allow: Optional allow-list; when given, only these tests survive
        deny: Optional deny-list; these tests never survive

    Returns:
        Set of eligible test identifiers (possibly empty)
    """
    eligible = set(all_tests)
    if allow is not None:
        eligible &= set(allow)
    if deny is not None:
        eligible -= set(deny)
    return eligible


def eligible_tests(suite: Suite, config: PackingConfig) -> Set[str]:
    """Eligible tests of ``suite`` under the configured allow/deny lists."""
    return select_eligible(
        suite.test_cases, config.test_cases_to_run, config.test_cases_to_skip
    )
