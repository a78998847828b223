import threading
import unittest

from score_ranking.entities.score_entry import PerformanceStatus, ScoreEntry
from score_ranking.services.ranking import is_rank_ordered
from score_ranking.services.store import RankedScoreStore


class TestInitialState(unittest.TestCase):
    def test_starts_empty(self):
        store = RankedScoreStore()
        self.assertEqual(store.entries, ())
        self.assertFalse(store.loading)
        self.assertIsNone(store.error)
        self.assertEqual(store.revision, 0)


class TestAddScore(unittest.TestCase):
    def setUp(self):
        self.store = RankedScoreStore()

    def test_add_returns_id_of_new_entry(self):
        entry_id = self.store.add_score(95, 120)
        self.assertEqual(len(self.store), 1)
        entry = self.store.entries[0]
        self.assertEqual(entry.id, entry_id)
        self.assertEqual(entry.status, PerformanceStatus.EXCELLENT)

    def test_sorted_by_score_descending(self):
        self.store.add_score(80, 200)
        self.store.add_score(95, 300)
        self.store.add_score(70, 150)
        self.assertEqual([e.score for e in self.store.entries], [95, 80, 70])

    def test_time_ascending_on_equal_score(self):
        self.store.add_score(85, 200)
        self.store.add_score(85, 150)
        self.store.add_score(85, 300)
        self.assertEqual([e.time for e in self.store.entries], [150, 200, 300])

    def test_identical_entries_keep_insertion_order(self):
        first = self.store.add_score(85, 100)
        second = self.store.add_score(85, 100)
        third = self.store.add_score(85, 100)
        self.assertEqual([e.id for e in self.store.entries], [first, second, third])

    def test_sorted_after_every_insert(self):
        for score, time in [(50, 3), (99, 9), (50, 1), (70, 5), (99, 2), (0, 0)]:
            self.store.add_score(score, time)
            self.assertTrue(is_rank_ordered(self.store.entries))

    def test_out_of_domain_values_are_accepted(self):
        self.store.add_score(150, -5)
        self.assertEqual(self.store.entries[0].status, PerformanceStatus.EXCELLENT)


class TestRemoveAndClear(unittest.TestCase):
    def setUp(self):
        self.store = RankedScoreStore()

    def test_remove_by_id(self):
        keep = self.store.add_score(90, 150)
        drop = self.store.add_score(85, 180)
        self.store.remove_score(drop)
        self.assertEqual([e.id for e in self.store.entries], [keep])

    def test_remove_unknown_id_is_noop(self):
        self.store.add_score(90, 150)
        before = self.store.entries
        self.store.remove_score("missing")
        self.assertEqual(self.store.entries, before)

    def test_clear(self):
        self.store.add_score(90, 150)
        self.store.add_score(80, 200)
        self.store.clear_all_scores()
        self.assertEqual(self.store.entries, ())


class TestReplaceAll(unittest.TestCase):
    def test_resorts_and_drops_duplicate_ids(self):
        store = RankedScoreStore()
        a = ScoreEntry(id="a", score=60, time=10, status=PerformanceStatus.NEEDS_IMPROVEMENT)
        b = ScoreEntry(id="b", score=95, time=10, status=PerformanceStatus.EXCELLENT)
        a_dup = ScoreEntry(id="a", score=99, time=1, status=PerformanceStatus.EXCELLENT)

        store.replace_all([a, b, a_dup])

        self.assertEqual([e.id for e in store.entries], ["b", "a"])
        self.assertEqual(store.entries[1].score, 60)

    def test_keeps_persisted_status(self):
        store = RankedScoreStore()
        stale = ScoreEntry(id="x", score=95, time=10, status=PerformanceStatus.GOOD)
        store.replace_all([stale])
        self.assertEqual(store.entries[0].status, PerformanceStatus.GOOD)


class TestNotification(unittest.TestCase):
    def setUp(self):
        self.store = RankedScoreStore()
        self.snapshots = []
        self.unsubscribe = self.store.subscribe(self.snapshots.append)

    def test_each_command_notifies_with_settled_snapshot(self):
        entry_id = self.store.add_score(80, 200)
        self.store.add_score(95, 300)
        self.store.remove_score(entry_id)
        self.store.remove_score("missing")
        self.store.clear_all_scores()

        self.assertEqual(len(self.snapshots), 5)
        self.assertEqual([e.score for e in self.snapshots[1]], [95, 80])
        self.assertEqual([e.score for e in self.snapshots[2]], [95])
        self.assertEqual(self.snapshots[-1], ())

    def test_revision_increments_per_command(self):
        self.store.add_score(80, 200)
        self.store.clear_all_scores()
        self.assertEqual(self.store.revision, 2)

    def test_unsubscribe(self):
        self.unsubscribe()
        self.store.add_score(80, 200)
        self.assertEqual(self.snapshots, [])
        self.unsubscribe()  # second call is harmless

    def test_failing_listener_does_not_break_command(self):
        def boom(entries):
            raise RuntimeError("listener failure")

        self.store.subscribe(boom)
        with self.assertLogs("score_ranking.services.store", level="ERROR"):
            self.store.add_score(80, 200)

        self.assertEqual(len(self.store), 1)
        self.assertEqual(len(self.snapshots), 1)

    def test_listener_sees_store_already_updated(self):
        seen = []
        self.store.subscribe(lambda entries: seen.append(self.store.entries is entries))
        self.store.add_score(80, 200)
        self.assertEqual(seen, [True])

    def test_command_from_listener_reaches_later_listeners_last(self):
        later = []

        def relay(entries):
            if len(entries) == 1:
                self.store.add_score(50, 50)

        self.store.subscribe(relay)
        self.store.subscribe(later.append)
        self.store.add_score(80, 200)

        self.assertEqual([e.score for e in self.store.entries], [80, 50])
        self.assertEqual(later[-1], self.store.entries)
        self.assertEqual(self.snapshots[-1], self.store.entries)

    def test_state_pairs_revision_with_snapshot(self):
        self.store.add_score(80, 200)
        revision, entries = self.store.state
        self.assertEqual(revision, self.store.revision)
        self.assertIs(entries, self.store.entries)


class TestConcurrentWriters(unittest.TestCase):
    def test_parallel_adds_are_serialized(self):
        store = RankedScoreStore()

        def worker(offset):
            for i in range(50):
                store.add_score((offset * 50 + i) % 101, i)

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        self.assertEqual(len(store), 200)
        self.assertEqual(store.revision, 200)
        self.assertTrue(is_rank_ordered(store.entries))


class TestStateFlags(unittest.TestCase):
    def test_loading_and_error(self):
        store = RankedScoreStore()
        store.set_loading(True)
        store.set_error("boom")
        self.assertTrue(store.loading)
        self.assertEqual(store.error, "boom")


if __name__ == "__main__":
    unittest.main()
