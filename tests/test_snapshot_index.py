import unittest

from mesa_LogReader.core.errors import FormatError
from mesa_LogReader.core.snapshot_index import SnapshotIndex
from mesa_LogReader.loaders.index_loader import parse_lines


def _index_lines(rows):
    return [f"{len(rows)} models.    lines hold model number, priority, and profile number."] + [
        f"{seq:>10} {prio:>10} {snap:>10}" for seq, prio, snap in rows
    ]


class SnapshotIndexTests(unittest.TestCase):
    def setUp(self):
        self.index = parse_lines(_index_lines([(3, 1, 30), (1, 2, 10), (2, 1, 20)]),
                                 file_name="profiles.index")

    def test_projections_are_ordered_by_sequence(self):
        self.assertEqual([1, 2, 3], self.index.sequence_ids.tolist())
        self.assertEqual([10, 20, 30], self.index.snapshot_ids.tolist())
        self.assertEqual([1.0, 2.0, 1.0], self.index.priorities.tolist())
        self.assertEqual(3, len(self.index))

    def test_lookups(self):
        self.assertEqual(20, self.index.snapshot_for_sequence(2))
        self.assertEqual(20, self.index.snapshot_for_sequence(2.0))
        self.assertIsNone(self.index.snapshot_for_sequence(4))
        self.assertEqual(3, self.index.sequence_for_snapshot(30))
        self.assertIsNone(self.index.sequence_for_snapshot(99))

    def test_membership(self):
        self.assertTrue(self.index.has_sequence(1))
        self.assertFalse(self.index.has_sequence(1.5))
        self.assertTrue(self.index.has_snapshot(10))
        self.assertFalse(self.index.has_snapshot(1))

    def test_forward_and_inverse_agree(self):
        for q, s in self.index.forward.items():
            self.assertEqual(q, self.index.inverse[s])
        for s, q in self.index.inverse.items():
            self.assertEqual(s, self.index.forward[q])

    def test_snapshot_order_follows_sequence_not_file(self):
        # profile numbers deliberately out of step with model numbers
        idx = SnapshotIndex.from_columns([50, 10, 30], [1, 1, 1], [1, 3, 2])
        self.assertEqual([10, 30, 50], idx.sequence_ids.tolist())
        self.assertEqual([3, 2, 1], idx.snapshot_ids.tolist())

    def test_duplicate_sequence_last_row_wins(self):
        idx = SnapshotIndex.from_columns([1, 2, 2], [1, 1, 1], [10, 20, 21])
        self.assertEqual(21, idx.snapshot_for_sequence(2))
        self.assertFalse(idx.has_snapshot(20))
        self.assertEqual([1, 2, 2], idx.sequence_ids.tolist())
        self.assertEqual(3, idx.snapshot_ids.size)

    def test_empty_index(self):
        idx = parse_lines(["0 models."])
        self.assertEqual(0, len(idx))
        self.assertFalse(idx.has_sequence(1))

    def test_bad_rows(self):
        with self.assertRaises(FormatError):
            parse_lines([])
        with self.assertRaises(FormatError):
            parse_lines(["1 models.", "1 2"])
        with self.assertRaises(FormatError):
            parse_lines(["1 models.", "1 x 3"])
