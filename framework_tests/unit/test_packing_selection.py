"""Unit tests for eligible test selection."""

from pangolin.core.types import PackingConfig
from pangolin.packing.selection import select_eligible, eligible_tests


class TestSelectEligible:
    """Test select_eligible."""

    def test_no_lists_selects_everything(self):
        assert select_eligible(["t1", "t2", "t3"]) == {"t1", "t2", "t3"}

    def test_allow_then_deny(self):
        """Allow {t1, t3} and deny {t3} leave only t1."""
        assert select_eligible(["t1", "t2", "t3"], allow=["t1", "t3"], deny=["t3"]) == {"t1"}

    def test_allow_list_unknown_tests_ignored(self):
        """Allow-list entries from other suites do not leak in."""
        assert select_eligible(["t1", "t2"], allow=["t2", "other"]) == {"t2"}

    def test_empty_allow_list_selects_nothing(self):
        """A configured but empty allow-list differs from no allow-list."""
        assert select_eligible(["t1", "t2"], allow=[]) == set()

    def test_empty_result_is_valid(self):
        assert select_eligible(["t1"], deny=["t1"]) == set()

    def test_inputs_not_modified(self):
        tests = ["t1", "t2"]
        allow = ["t1"]
        deny = ["t2"]

        select_eligible(tests, allow, deny)

        assert tests == ["t1", "t2"]
        assert allow == ["t1"]
        assert deny == ["t2"]


class TestEligibleTests:
    """Test eligible_tests with a configuration."""

    def test_uses_configured_lists(self, make_suite):
        suite = make_suite("A", ["A/t1", "A/t2", "A/t3"])
        config = PackingConfig(test_cases_to_run=["A/t1", "A/t2"], test_cases_to_skip=["A/t2"])

        assert eligible_tests(suite, config) == {"A/t1"}

    def test_inherited_skips_not_applied(self, make_suite):
        """Only the configured lists filter; the suite's own skips are separate."""
        suite = make_suite("A", ["A/t1", "A/t2"], skip=["A/t1"])

        assert eligible_tests(suite, PackingConfig()) == {"A/t1", "A/t2"}
