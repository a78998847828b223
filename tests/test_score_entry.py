import string
import unittest
from datetime import timezone

from score_ranking.entities.score_entry import (
    STATUS_BADGES,
    PerformanceStatus,
    ScoreEntry,
    classify_score,
    generate_id,
)


class TestClassifyScore(unittest.TestCase):
    def test_boundaries(self):
        self.assertEqual(classify_score(90), PerformanceStatus.GOOD)
        self.assertEqual(classify_score(90.01), PerformanceStatus.EXCELLENT)
        self.assertEqual(classify_score(69.99), PerformanceStatus.NEEDS_IMPROVEMENT)
        self.assertEqual(classify_score(70), PerformanceStatus.GOOD)

    def test_out_of_domain_values_still_classify(self):
        self.assertEqual(classify_score(150), PerformanceStatus.EXCELLENT)
        self.assertEqual(classify_score(-20), PerformanceStatus.NEEDS_IMPROVEMENT)

    def test_status_values_match_wire_names(self):
        self.assertEqual(
            sorted(s.value for s in PerformanceStatus),
            ["excellent", "good", "needs-improvement"],
        )


class TestGenerateId(unittest.TestCase):
    def test_ids_are_base36(self):
        allowed = set(string.digits + string.ascii_lowercase)
        entry_id = generate_id()
        self.assertTrue(entry_id)
        self.assertTrue(set(entry_id) <= allowed)

    def test_ids_are_unique(self):
        ids = {generate_id() for _ in range(2000)}
        self.assertEqual(len(ids), 2000)


class TestScoreEntry(unittest.TestCase):
    def test_create_stamps_status_and_timestamp(self):
        entry = ScoreEntry.create(95, 120)
        self.assertEqual(entry.score, 95)
        self.assertEqual(entry.time, 120)
        self.assertEqual(entry.status, PerformanceStatus.EXCELLENT)
        self.assertEqual(entry.timestamp.tzinfo, timezone.utc)
        self.assertTrue(entry.id)

    def test_entries_are_frozen(self):
        entry = ScoreEntry.create(50, 10)
        with self.assertRaises(AttributeError):
            entry.score = 99  # type: ignore[misc]

    def test_every_status_has_a_badge(self):
        self.assertEqual(set(STATUS_BADGES), set(PerformanceStatus))
        entry = ScoreEntry.create(85, 10)
        self.assertEqual(entry.badge, STATUS_BADGES[PerformanceStatus.GOOD])


if __name__ == "__main__":
    unittest.main()
