import unittest

import numpy as np
import pandas as pd

from panelarray.utils.validation import (
    _to_numpy_array,
    check_ids,
    check_partition,
    check_rank,
    check_rowidx_args,
    get_index_or_col_from_df,
)


class TestValidation(unittest.TestCase):
    """Test validation module functions."""

    def test_check_partition_accepts_exact_cover(self):
        check_partition([range(0, 3), range(3, 5)], 5)
        check_partition([], 0)

    def test_check_partition_rejects_gap(self):
        with self.assertRaisesRegex(ValueError, "expected 3"):
            check_partition([range(0, 3), range(4, 6)], 6)

    def test_check_partition_rejects_overlap(self):
        with self.assertRaises(ValueError):
            check_partition([range(0, 3), range(2, 5)], 5)

    def test_check_partition_rejects_empty_range(self):
        with self.assertRaisesRegex(ValueError, "empty"):
            check_partition([range(0, 3), range(3, 3), range(3, 5)], 5)

    def test_check_partition_rejects_wrong_length(self):
        with self.assertRaisesRegex(ValueError, "covers 5 rows"):
            check_partition([range(0, 3), range(3, 5)], 6)

    def test_check_partition_rejects_non_ranges(self):
        with self.assertRaises(ValueError):
            check_partition([[0, 1, 2], range(3, 5)], 5)
        with self.assertRaises(ValueError):
            check_partition([range(0, 4, 2)], 2)

    def test_check_rank(self):
        check_rank(np.zeros(3), 1)
        with self.assertRaisesRegex(ValueError, "two-dimensional"):
            check_rank(np.zeros(3), 2)

    def test_check_rowidx_args(self):
        check_rowidx_args([range(0, 1)], None)
        check_rowidx_args(None, [1])
        with self.assertRaises(TypeError):
            check_rowidx_args(None, None)
        with self.assertRaises(TypeError):
            check_rowidx_args([range(0, 1)], [1])

    def test_check_ids_types(self):
        self.assertIsInstance(check_ids(pd.Series([1, 1, 2])), np.ndarray)
        self.assertIsInstance(check_ids(np.array([1, 1, 2])), np.ndarray)
        self.assertIsInstance(check_ids([1, 1, 2]), np.ndarray)
        self.assertIsInstance(check_ids(pd.Index([1, 1, 2])), np.ndarray)

    def test_check_ids_rejects_strings(self):
        with self.assertRaises(ValueError):
            check_ids("abc")

    def test_check_ids_rejects_multiindex(self):
        idx = pd.MultiIndex.from_arrays([[1, 1], [0, 1]], names=["unit", "t"])
        with self.assertRaisesRegex(ValueError, "MultiIndex"):
            check_ids(idx)

    def test_to_numpy_array(self):
        arr = np.array([1, 2])
        self.assertIs(_to_numpy_array(arr), arr)
        np.testing.assert_array_equal(_to_numpy_array(pd.Series([1, 2])), arr)

    def test_get_index_or_col_from_df(self):
        df = pd.DataFrame({"unit": [1, 2], "x": [3, 4]}, index=pd.Index([5, 6], name="t"))
        self.assertEqual(list(get_index_or_col_from_df(df, "unit")), [1, 2])
        self.assertEqual(list(get_index_or_col_from_df(df, "t")), [5, 6])
        with self.assertRaises(KeyError):
            get_index_or_col_from_df(df, "missing")


if __name__ == "__main__":
    unittest.main()
