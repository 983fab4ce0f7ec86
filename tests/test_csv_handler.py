import os
import tempfile
import unittest

import pandas as pd

from match_scorer.csv_handler import CSVHandler


class TestCSVHandler(unittest.TestCase):
    """Tests for loading point logs from CSV files."""

    def setUp(self):
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.csv_path = os.path.join(self.tmp_dir.name, "points.csv")

    def tearDown(self):
        self.tmp_dir.cleanup()

    def _write(self, rows):
        pd.DataFrame(rows).to_csv(self.csv_path, index=False, sep=";")

    def test_load_points_in_order(self):
        self._write([
            {"point_id": 3, "point_winner": "B"},
            {"point_id": 1, "point_winner": "A"},
            {"point_id": 2, "point_winner": " a "},
        ])
        self.assertEqual(CSVHandler(self.csv_path).load_points(), ["A", "A", "B"])

    def test_load_points_without_ids(self):
        self._write([{"point_winner": "B"}, {"point_winner": "A"}])
        self.assertEqual(CSVHandler(self.csv_path).load_points(), ["B", "A"])

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            CSVHandler(os.path.join(self.tmp_dir.name, "nope.csv")).load_points()

    def test_empty_file(self):
        open(self.csv_path, "w").close()
        self.assertEqual(CSVHandler(self.csv_path).load_points(), [])

    def test_missing_column(self):
        self._write([{"point_id": 1, "server": "A"}])
        with self.assertRaises(ValueError):
            CSVHandler(self.csv_path).load_points()

    def test_unknown_code(self):
        self._write([{"point_id": 1, "point_winner": "C"}])
        with self.assertRaises(ValueError):
            CSVHandler(self.csv_path).load_points()

    def test_code_to_player(self):
        self.assertEqual(CSVHandler.code_to_player("A"), "player one")
        self.assertEqual(CSVHandler.code_to_player("b"), "player two")


if __name__ == "__main__":
    unittest.main()
