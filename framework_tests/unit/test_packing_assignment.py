"""Unit tests for the greedy assignment preview."""

import pytest

from pangolin.core.value_objects import ExecutionBundle
from pangolin.packing.assignment import assign_bundles, bundle_weight, imbalance


def _timed(make_suite, name, seconds):
    return ExecutionBundle(make_suite(name, [f"{name}/t"]), (), seconds)


class TestBundleWeight:
    """Test bundle_weight."""

    def test_prefers_estimate(self, make_suite):
        assert bundle_weight(_timed(make_suite, "A", 7.5)) == 7.5

    def test_falls_back_to_test_count(self, make_suite):
        bundle = ExecutionBundle(make_suite("A", ["t1", "t2", "t3"]), ("t3",))
        assert bundle_weight(bundle) == 2.0


class TestAssignBundles:
    """Test longest-processing-time-first assignment."""

    def test_lpt_assignment(self, make_suite):
        bundles = [_timed(make_suite, n, s) for n, s in
                   [("A", 3.0), ("B", 7.0), ("C", 5.0), ("D", 4.0), ("E", 1.0)]]

        workers = assign_bundles(bundles, 2)

        # B(7)->w0, C(5)->w1, D(4)->w1, A(3)->w0, E(1)->w1
        assert [[b.name for b in w.bundles] for w in workers] == [["B", "A"], ["C", "D", "E"]]
        assert [w.load for w in workers] == [10.0, 10.0]

    def test_more_workers_than_bundles(self, make_suite):
        workers = assign_bundles([_timed(make_suite, "A", 1.0)], 3)

        assert [len(w.bundles) for w in workers] == [1, 0, 0]

    def test_invalid_worker_count(self):
        with pytest.raises(ValueError):
            assign_bundles([], 0)

    def test_imbalance(self, make_suite):
        workers = assign_bundles([_timed(make_suite, "A", 4.0), _timed(make_suite, "B", 4.0)], 2)
        assert imbalance(workers) == 1.0
        assert imbalance(assign_bundles([_timed(make_suite, "A", 4.0)], 2)) == 2.0
