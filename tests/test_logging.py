"""Tests for duration formatting, step timing and the JSONL event log."""
import json
import os
import tempfile
import unittest

from roommatch.core.logging import EventLogger, StepTimer, format_duration
from roommatch.core.types import MatchTier, Solution


class _RecordingLogger:
    def __init__(self):
        self.records = []

    def info(self, event, **fields):
        self.records.append((event, fields))


class TestFormatDuration(unittest.TestCase):

    def test_small_values_stay_in_nanoseconds(self):
        self.assertEqual(format_duration(0), "0ns")
        self.assertEqual(format_duration(5000), "5000ns")

    def test_unit_ladder(self):
        self.assertEqual(format_duration(5001), "5μs")
        self.assertEqual(format_duration(12_000_000), "12ms")
        self.assertEqual(format_duration(4_000_000_000), "4000ms")
        self.assertEqual(format_duration(7_500_000_000), "7s")

    def test_seconds_is_the_last_unit(self):
        self.assertEqual(format_duration(10**13), "10000s")


class TestStepTimer(unittest.TestCase):

    def test_logs_event_with_fields_and_duration(self):
        log = _RecordingLogger()
        timer = StepTimer(log)
        with timer.step("Generating solutions", solutions=10):
            pass
        self.assertEqual(len(log.records), 1)
        event, fields = log.records[0]
        self.assertEqual(event, "Generating solutions")
        self.assertEqual(fields["solutions"], 10)
        self.assertRegex(fields["took"], r"^\d+(ns|μs|ms|s)$")

    def test_fields_added_inside_block(self):
        log = _RecordingLogger()
        with StepTimer(log).step("Finding optimal solutions") as info:
            info["found"] = 3
        self.assertEqual(log.records[0][1]["found"], 3)

    def test_failed_step_is_not_logged(self):
        log = _RecordingLogger()
        with self.assertRaises(RuntimeError):
            with StepTimer(log).step("Boom"):
                raise RuntimeError("boom")
        self.assertEqual(log.records, [])


class TestEventLogger(unittest.TestCase):

    def test_writes_sample_and_selection_events(self):
        sol = Solution(
            pairs=(("a", "b"), ("c", "d")),
            preferred=1,
            accepted=1,
            unpreferred=0,
            tiers=(MatchTier.PREFERRED, MatchTier.ACCEPTED),
        )
        with tempfile.TemporaryDirectory() as tmp:
            run_dir = os.path.join(tmp, "run")
            logger = EventLogger(run_dir)
            logger.log_sample(0, sol)
            logger.log_selection(sol, tied=4, seed=99)
            logger.close()

            with open(os.path.join(run_dir, "events.jsonl")) as f:
                events = [json.loads(line) for line in f if line.strip()]

        self.assertEqual([e["event"] for e in events], ["sample", "selected"])
        self.assertEqual(events[0]["pairs"], [["a", "b"], ["c", "d"]])
        self.assertEqual(events[1]["tied_solutions"], 4)
        self.assertEqual(events[1]["seed"], 99)
        self.assertEqual(events[1]["tiers"], ["preferred", "accepted"])


if __name__ == "__main__":
    unittest.main()
