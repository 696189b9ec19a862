import unittest

import numpy as np
import pytest
from sklearn.exceptions import NotFittedError

from panelarray import PanelMatrix, PanelVector, PanelView
from panelarray.frame import from_frame
from panelarray.transform import (
    PanelDemeaner,
    demean,
    expand,
    group_mean,
    group_reduce,
)
from panel_generation import create_panel_dataset


class TestAggregation(unittest.TestCase):
    def setUp(self):
        self.X = np.array([[3, 5], [4, 7], [5, 9], [8, 2], [3, 2]])
        self.m = PanelMatrix(self.X, tnum=[3, 2])

    def test_group_mean(self):
        np.testing.assert_array_equal(group_mean(self.m), [[4.0, 7.0], [5.5, 2.0]])
        np.testing.assert_array_equal(group_mean(PanelView(self.m)), [[4.0, 7.0], [5.5, 2.0]])

    def test_group_mean_vector(self):
        v = PanelVector(np.array([2, 2, 4, 3, 3]), tnum=[3, 2])
        means = group_mean(v)
        self.assertEqual(means.shape, (2,))
        np.testing.assert_allclose(means, [8 / 3, 3.0])

    def test_group_reduce_custom_function(self):
        np.testing.assert_array_equal(group_reduce(self.m, np.max), [[5, 9], [8, 2]])

    def test_expand_repeats_over_periods(self):
        result = expand(group_mean(self.m), self.m.rowidx)
        self.assertIsInstance(result, PanelMatrix)
        self.assertEqual(result.rowidx, self.m.rowidx)
        np.testing.assert_array_equal(
            result.data,
            [[4.0, 7.0], [4.0, 7.0], [4.0, 7.0], [5.5, 2.0], [5.5, 2.0]],
        )

    def test_expand_vector(self):
        result = expand([1.0, 2.0], [range(0, 1), range(1, 4)])
        self.assertIsInstance(result, PanelVector)
        np.testing.assert_array_equal(result.data, [1.0, 2.0, 2.0, 2.0])

    def test_demean_has_zero_unit_means(self):
        df = create_panel_dataset(n_units=6, max_periods=6)
        X = from_frame(df, "unit", columns=["x0", "x1", "x2"])
        within = demean(X)
        self.assertEqual(within.rowidx, X.rowidx)
        np.testing.assert_allclose(group_mean(within), 0.0, atol=1e-12)

    def test_demean_parallel(self):
        np.testing.assert_allclose(demean(self.m, n_jobs=2).data, demean(self.m).data)


class TestPanelDemeaner(unittest.TestCase):
    def setUp(self):
        self.m = PanelMatrix(
            np.array([[3, 5], [4, 7], [5, 9], [8, 2], [3, 2]]), tnum=[3, 2]
        )

    def test_fit_transform(self):
        result = PanelDemeaner().fit_transform(self.m)
        self.assertIsInstance(result, PanelMatrix)
        np.testing.assert_array_equal(
            result.data,
            [[-1.0, -2.0], [0.0, 0.0], [1.0, 2.0], [2.5, 0.0], [-2.5, 0.0]],
        )

    def test_inverse_transform_round_trip(self):
        demeaner = PanelDemeaner().fit(self.m)
        restored = demeaner.inverse_transform(demeaner.transform(self.m))
        np.testing.assert_allclose(restored.data, self.m.data)
        self.assertEqual(restored.rowidx, self.m.rowidx)

    def test_fitted_attributes(self):
        demeaner = PanelDemeaner().fit(self.m)
        self.assertEqual(demeaner.n_units_, 2)
        np.testing.assert_array_equal(demeaner.means_, [[4.0, 7.0], [5.5, 2.0]])

    def test_unfitted_raises(self):
        with pytest.raises(NotFittedError):
            PanelDemeaner().transform(self.m)

    def test_unit_count_mismatch_raises(self):
        demeaner = PanelDemeaner().fit(self.m)
        other = PanelMatrix(np.zeros((3, 2)), tnum=[1, 1, 1])
        with pytest.raises(ValueError, match="units"):
            demeaner.transform(other)

    def test_get_params(self):
        self.assertEqual(PanelDemeaner(n_jobs=2).get_params(), {"n_jobs": 2})


if __name__ == "__main__":
    unittest.main()
