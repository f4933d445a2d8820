"""Tests for picking the winning solution among samples."""
import unittest

from roommatch.core.errors import EmptyInputError
from roommatch.core.rng import SeededRNG
from roommatch.core.types import Solution
from roommatch.matching.selection import best_solutions, select_best


def _sol(preferred, accepted, unpreferred, tag):
    # distinct pairs so equal scores are still distinguishable
    return Solution(
        pairs=((tag, f"{tag}-mate"),),
        preferred=preferred,
        accepted=accepted,
        unpreferred=unpreferred,
    )


class TestBestSolutions(unittest.TestCase):

    def test_preferred_dominates_accepted(self):
        a = _sol(2, 0, 2, "a")
        b = _sol(1, 3, 0, "b")
        self.assertEqual(best_solutions([b, a]), [a])

    def test_accepted_breaks_preferred_tie(self):
        a = _sol(2, 1, 1, "a")
        b = _sol(2, 2, 0, "b")
        c = _sol(1, 3, 0, "c")
        self.assertEqual(best_solutions([a, b, c]), [b])

    def test_full_ties_all_returned_in_order(self):
        a = _sol(1, 1, 0, "a")
        b = _sol(1, 1, 0, "b")
        c = _sol(0, 2, 0, "c")
        self.assertEqual(best_solutions([a, c, b]), [a, b])

    def test_empty_input(self):
        with self.assertRaises(EmptyInputError):
            best_solutions([])


class TestSelectBest(unittest.TestCase):

    def test_empty_input(self):
        with self.assertRaises(EmptyInputError):
            select_best([], SeededRNG(1))

    def test_single_solution(self):
        only = _sol(0, 0, 1, "x")
        self.assertIs(select_best([only], SeededRNG(1)), only)

    def test_result_matches_maximum_scores(self):
        pool = [
            _sol(p, a, 4 - p - a, f"s{p}{a}")
            for p in range(3) for a in range(3) if p + a <= 4
        ]
        for seed in range(20):
            best = select_best(pool, SeededRNG(seed))
            self.assertEqual(best.preferred, max(s.preferred for s in pool))
            tied = [s for s in pool if s.preferred == best.preferred]
            self.assertEqual(best.accepted, max(s.accepted for s in tied))

    def test_ties_broken_randomly(self):
        a = _sol(1, 1, 0, "a")
        b = _sol(1, 1, 0, "b")
        loser = _sol(1, 0, 1, "c")
        rng = SeededRNG(5)
        picked = {select_best([a, loser, b], rng).pairs for _ in range(100)}
        self.assertEqual(picked, {a.pairs, b.pairs})

    def test_unpreferred_count_is_ignored(self):
        a = _sol(1, 1, 0, "a")
        b = _sol(1, 1, 5, "b")
        rng = SeededRNG(8)
        picked = {select_best([a, b], rng).pairs for _ in range(100)}
        self.assertEqual(picked, {a.pairs, b.pairs})

    def test_input_not_mutated(self):
        pool = [_sol(0, 1, 0, "a"), _sol(1, 0, 0, "b"), _sol(1, 0, 0, "c")]
        before = list(pool)
        select_best(pool, SeededRNG(2))
        self.assertEqual(pool, before)

    def test_deterministic_with_seed(self):
        pool = [_sol(1, 1, 0, t) for t in "abcdef"]
        a = [select_best(pool, SeededRNG(42)).pairs for _ in range(3)]
        b = [select_best(pool, SeededRNG(42)).pairs for _ in range(3)]
        self.assertEqual(a, b)


if __name__ == "__main__":
    unittest.main()
