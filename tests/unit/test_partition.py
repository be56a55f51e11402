"""
Unit test file.
"""

import unittest

from s3_multipart_upload import TOTAL_PARTS, PartRange, partition
from s3_multipart_upload.s3.partition import MIN_PART_SIZE, warn_if_undersized


class PartitionTester(unittest.TestCase):
    """Test splitting a file into part ranges."""

    def _assert_covers(self, parts: list[PartRange], file_size: int) -> None:
        self.assertEqual(len(parts), TOTAL_PARTS)
        self.assertEqual(parts[0].start, 0)
        self.assertEqual(parts[-1].end, file_size)
        for prev, curr in zip(parts, parts[1:]):
            self.assertEqual(prev.end, curr.start)
        self.assertEqual(sum(p.size for p in parts), file_size)
        self.assertEqual([p.part_number for p in parts], list(range(1, 11)))

    def test_even_split(self) -> None:
        parts = partition(100)
        self._assert_covers(parts, 100)
        expected = [(i * 10, (i + 1) * 10) for i in range(10)]
        self.assertEqual([(p.start, p.end) for p in parts], expected)

    def test_remainder_goes_to_last_part(self) -> None:
        parts = partition(105)
        self._assert_covers(parts, 105)
        for p in parts[:-1]:
            self.assertEqual(p.size, 10)
        self.assertEqual((parts[-1].start, parts[-1].end), (90, 105))
        self.assertEqual(parts[-1].size, 15)

    def test_many_sizes(self) -> None:
        for file_size in [0, 1, 9, 10, 11, 99, 1001, 123457, 50 * 1024 * 1024 + 3]:
            self._assert_covers(partition(file_size), file_size)

    def test_small_file_gives_empty_parts(self) -> None:
        parts = partition(7)
        self._assert_covers(parts, 7)
        for p in parts[:-1]:
            self.assertEqual(p.size, 0)
        self.assertEqual((parts[-1].start, parts[-1].end), (0, 7))

    def test_invalid_input(self) -> None:
        with self.assertRaises(ValueError):
            partition(-1)
        with self.assertRaises(ValueError):
            partition(100, num_parts=0)

    def test_part_name(self) -> None:
        parts = partition(105)
        self.assertEqual(parts[-1].name, "part.00010_90-105")

    def test_undersized_warning(self) -> None:
        with self.assertWarns(UserWarning):
            self.assertTrue(warn_if_undersized(partition(1000)))
        self.assertFalse(warn_if_undersized(partition(MIN_PART_SIZE * TOTAL_PARTS)))


if __name__ == "__main__":
    unittest.main()
