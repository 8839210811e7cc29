"""
Tests for history log I/O and summary data models.
"""

import unittest
import tempfile
import shutil
import csv
from pathlib import Path

from bitstring_ga.data_models import GenerationSummary, SearchResult
from bitstring_ga.io_utils import save_history_log, load_history_log, HISTORY_FIELDS


class TestDataModels(unittest.TestCase):
    """Test summary serialization."""

    def test_summary_to_dict(self):
        summary = GenerationSummary(generation=3, best_fitness=5,
                                    best_genes="010011", mean_fitness=3.25)
        data = summary.to_dict()

        self.assertEqual(data['generation'], 3)
        self.assertEqual(data['best_fitness'], 5)
        self.assertEqual(data['best_genes'], "010011")
        self.assertEqual(data['mean_fitness'], "3.2500")

    def test_summary_from_dict(self):
        summary = GenerationSummary.from_dict({
            'generation': '4', 'best_fitness': '6',
            'best_genes': '000111', 'mean_fitness': '4.5000'
        })
        self.assertEqual(summary, GenerationSummary(4, 6, '000111', 4.5))

    def test_search_result_defaults(self):
        result = SearchResult(solved=True, generations=0, best_fitness=1,
                              best_genes="1", target_length=1)
        self.assertEqual(result.history, [])
        self.assertIsNone(result.seed)


class TestHistoryLog(unittest.TestCase):
    """Test history CSV saving and loading."""

    def setUp(self):
        self.temp_dir = Path(tempfile.mkdtemp())
        self.summaries = [
            GenerationSummary(0, 3, "010010", 2.5),
            GenerationSummary(1, 5, "000011", 3.125),
            GenerationSummary(2, 6, "110011", 4.0),
        ]

    def tearDown(self):
        shutil.rmtree(self.temp_dir)

    def test_save_and_load(self):
        path = save_history_log(self.summaries, self.temp_dir / "history.csv")
        loaded = load_history_log(path)

        self.assertEqual(loaded, self.summaries)

    def test_header_and_leading_zeros(self):
        path = save_history_log(self.summaries, self.temp_dir / "history.csv")

        with open(path, newline='') as f:
            reader = csv.DictReader(f)
            self.assertEqual(reader.fieldnames, HISTORY_FIELDS)
            rows = list(reader)

        self.assertEqual(rows[0]['best_genes'], "010010")

    def test_creates_parent_directories(self):
        path = save_history_log(self.summaries, self.temp_dir / "a" / "b" / "history.csv")
        self.assertTrue(path.exists())

    def test_overwrite_protection(self):
        path = self.temp_dir / "history.csv"
        save_history_log(self.summaries, path)

        with self.assertRaises(FileExistsError):
            save_history_log(self.summaries, path)

        save_history_log(self.summaries[:1], path, overwrite=True)
        self.assertEqual(len(load_history_log(path)), 1)

    def test_load_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            load_history_log(self.temp_dir / "missing.csv")

    def test_load_invalid_columns(self):
        path = self.temp_dir / "bad.csv"
        path.write_text("generation,score\n0,1\n")

        with self.assertRaises(ValueError):
            load_history_log(path)


if __name__ == '__main__':
    unittest.main()
