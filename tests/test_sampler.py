"""Tests for repeated sampling and fan-out determinism."""
import unittest

from roommatch.core.errors import MissingConstraintError
from roommatch.core.rng import SeededRNG
from roommatch.core.types import ConstraintEntry
from roommatch.matching.sampler import generate_solutions


def _neutral(names):
    return {n: ConstraintEntry((), ()) for n in names}


class TestGenerateSolutions(unittest.TestCase):

    def setUp(self):
        self.people = [f"p{i}" for i in range(8)]
        self.constraints = _neutral(self.people)
        self.constraints["p0"] = ConstraintEntry(("p1",), ("p2",))
        self.constraints["p1"] = ConstraintEntry(("p0",), ())

    def test_returns_requested_count(self):
        sols = generate_solutions(self.people, self.constraints, 25, SeededRNG(1))
        self.assertEqual(len(sols), 25)
        for s in sols:
            self.assertEqual(sorted(s.people()), sorted(self.people))

    def test_zero_samples(self):
        self.assertEqual(
            generate_solutions(self.people, self.constraints, 0, SeededRNG(1)), []
        )

    def test_negative_count_rejected(self):
        with self.assertRaises(ValueError):
            generate_solutions(self.people, self.constraints, -1, SeededRNG(1))

    def test_zero_workers_rejected(self):
        with self.assertRaises(ValueError):
            generate_solutions(self.people, self.constraints, 3, SeededRNG(1), workers=0)

    def test_deterministic_with_seed(self):
        a = generate_solutions(self.people, self.constraints, 30, SeededRNG(77))
        b = generate_solutions(self.people, self.constraints, 30, SeededRNG(77))
        self.assertEqual([s.pairs for s in a], [s.pairs for s in b])

    def test_samples_are_independent(self):
        sols = generate_solutions(self.people, self.constraints, 40, SeededRNG(3))
        distinct = {s.pairs for s in sols}
        self.assertGreater(len(distinct), 1)

    def test_worker_count_does_not_change_results(self):
        serial = generate_solutions(self.people, self.constraints, 20, SeededRNG(9))
        parallel = generate_solutions(
            self.people, self.constraints, 20, SeededRNG(9), workers=2,
        )
        self.assertEqual([s.pairs for s in serial], [s.pairs for s in parallel])
        self.assertEqual(
            [s.preferred for s in serial], [s.preferred for s in parallel]
        )

    def test_sample_failure_propagates(self):
        constraints = dict(self.constraints)
        del constraints["p5"]
        with self.assertRaises(MissingConstraintError):
            generate_solutions(self.people, constraints, 5, SeededRNG(1))


if __name__ == "__main__":
    unittest.main()
