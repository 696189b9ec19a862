"""
Per-unit aggregation and the within transformation.
"""

from typing import Callable, Optional, Union

import numpy as np
from sklearn.base import BaseEstimator, TransformerMixin
from sklearn.utils.validation import check_is_fitted

from .panel import AbstractPanel, PanelMatrix, PanelVector
from .partition import n_periods
from .utils.typing import Partition
from .views import PanelView, regroup


def _as_view(x: Union[AbstractPanel, PanelView]) -> PanelView:
    return x if isinstance(x, PanelView) else PanelView(x)


def group_reduce(
    x: Union[AbstractPanel, PanelView],
    func: Callable = np.mean,
    n_jobs: Optional[int] = None,
) -> np.ndarray:
    """
    Reduce the rows of each unit with ``func``.

    Parameters
    ----------
    x : PanelVector, PanelMatrix or PanelView
        The panel to aggregate.
    func : callable
        Reduction called as ``func(block, axis=0)``. Default is ``np.mean``.
    n_jobs : int, optional
        The number of jobs to run in parallel. Default is None (sequential).

    Returns
    -------
    np.ndarray
        One entry (vector panels) or one row (matrix panels) per unit.

    Examples
    --------
    >>> import numpy as np
    >>> from panelarray import PanelMatrix
    >>> X = np.array([[3, 5], [4, 7], [5, 9], [8, 2], [3, 2]])
    >>> group_reduce(PanelMatrix(X, tnum=[3, 2]), np.max)
    array([[5, 9],
           [8, 2]])
    """
    return np.stack(_as_view(x).apply(func, n_jobs=n_jobs, axis=0))


def group_mean(x: Union[AbstractPanel, PanelView], n_jobs: Optional[int] = None) -> np.ndarray:
    """Mean of the rows of each unit. See :func:`group_reduce`."""
    return group_reduce(x, np.mean, n_jobs=n_jobs)


def expand(values, rowidx: Partition) -> Union[PanelVector, PanelMatrix]:
    """
    Repeat each unit's value across the unit's periods.

    Row ``i`` of ``values`` is repeated ``len(rowidx[i])`` times and the
    stacked result is paired with ``rowidx``.

    Parameters
    ----------
    values : array-like
        One entry or row per unit.
    rowidx : list of range
        Rows of each unit of the panel to rebuild.

    Returns
    -------
    PanelVector or PanelMatrix
        A panel with the full number of rows.

    Examples
    --------
    >>> import numpy as np
    >>> expand(np.array([[4.0, 7.0], [5.5, 2.0]]), [range(0, 3), range(3, 5)]).data
    array([[4. , 7. ],
           [4. , 7. ],
           [4. , 7. ],
           [5.5, 2. ],
           [5.5, 2. ]])
    """
    values = np.asarray(values)
    return regroup(np.repeat(values, n_periods(rowidx), axis=0), rowidx)


def demean(x: Union[AbstractPanel, PanelView], n_jobs: Optional[int] = None) -> Union[PanelVector, PanelMatrix]:
    """
    Subtract from each observation the mean of its unit.

    Parameters
    ----------
    x : PanelVector, PanelMatrix or PanelView
        The panel to transform.
    n_jobs : int, optional
        The number of jobs to run in parallel. Default is None (sequential).

    Returns
    -------
    PanelVector or PanelMatrix
        A new panel with the partition of ``x``.
    """
    panel = _as_view(x).panel
    return panel - expand(group_mean(panel, n_jobs=n_jobs), panel.rowidx)


class PanelDemeaner(TransformerMixin, BaseEstimator):
    """
    Within transformation of panel data as a scikit-learn transformer.

    ``fit`` stores the mean of each unit; ``transform`` subtracts them and
    ``inverse_transform`` adds them back. The panel passed to ``transform``
    must have the same units, in the same order, as the one passed to
    ``fit``.

    Parameters
    ----------
    n_jobs : int, optional
        The number of jobs to run in parallel. Default is None (sequential).

    Attributes
    ----------
    means_ : np.ndarray
        Mean of each unit seen during ``fit``.
    n_units_ : int
        Number of units seen during ``fit``.

    Examples
    --------
    >>> import numpy as np
    >>> from panelarray import PanelMatrix
    >>> X = PanelMatrix(np.array([[3, 5], [4, 7], [5, 9], [8, 2], [3, 2]]), tnum=[3, 2])
    >>> PanelDemeaner().fit_transform(X).data
    array([[-1. , -2. ],
           [ 0. ,  0. ],
           [ 1. ,  2. ],
           [ 2.5,  0. ],
           [-2.5,  0. ]])
    """

    def __init__(self, n_jobs: Optional[int] = None) -> None:
        self.n_jobs = n_jobs

    def fit(self, X: AbstractPanel, y=None) -> "PanelDemeaner":
        self.means_ = group_mean(X, n_jobs=self.n_jobs)
        self.n_units_ = len(self.means_)
        return self

    def _check_units(self, X: AbstractPanel) -> None:
        check_is_fitted(self)
        if X.n_units != self.n_units_:
            raise ValueError(
                f"X has {X.n_units} units, but PanelDemeaner was fitted on {self.n_units_} units."
            )

    def transform(self, X: AbstractPanel) -> Union[PanelVector, PanelMatrix]:
        self._check_units(X)
        return X - expand(self.means_, X.rowidx)

    def inverse_transform(self, X: AbstractPanel) -> Union[PanelVector, PanelMatrix]:
        self._check_units(X)
        return X + expand(self.means_, X.rowidx)
