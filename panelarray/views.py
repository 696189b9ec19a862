"""
Per-unit views of panels.

:class:`PanelView` exposes the rows of each unit as one element of a
sequence, so that per-unit reductions are ordinary sequence mapping::

    means = [g.mean(axis=0) for g in PanelView(panel)]
"""

from collections.abc import Sequence
from typing import Any, Callable, List, Optional, Union

import numpy as np
from joblib import Parallel, delayed

from .panel import AbstractPanel, PanelMatrix, PanelVector, make_panel
from .partition import n_units
from .utils.typing import Partition
from .utils.utils import _unit_wrapper


class PanelView(Sequence):
    """
    Closure of the observed periods of each unit of a panel.

    The view holds a reference to the panel and never copies its data: each
    element is a numpy view of the unit's rows. The view is read-only and has
    one element per unit.

    Parameters
    ----------
    panel : PanelVector or PanelMatrix
        The panel to view.

    Attributes
    ----------
    panel : PanelVector or PanelMatrix
        The wrapped panel.

    Examples
    --------
    >>> import numpy as np
    >>> from panelarray import PanelMatrix
    >>> X = np.array([[3, 5], [4, 7], [5, 9], [8, 2], [3, 2]])
    >>> groups = PanelView(PanelMatrix(X, tnum=[3, 2]))
    >>> len(groups)
    2
    >>> [g.mean(axis=0) for g in groups]
    [array([4., 7.]), array([5.5, 2. ])]
    """

    def __init__(self, panel: AbstractPanel) -> None:
        if not isinstance(panel, AbstractPanel):
            raise TypeError(
                f"PanelView expects a PanelVector or PanelMatrix. Got {type(panel).__name__} instead."
            )
        self.panel = panel

    @property
    def data(self) -> np.ndarray:
        """The stacked data of the wrapped panel."""
        return self.panel.data

    @property
    def rowidx(self) -> Partition:
        """Rows of each unit of the wrapped panel."""
        return self.panel.rowidx

    def __len__(self) -> int:
        return n_units(self.panel)

    def __getitem__(self, i):
        rowidx = self.panel.rowidx[i]
        if isinstance(i, slice):
            return [self._block(r) for r in rowidx]
        return self._block(rowidx)

    def __iter__(self):
        for r in self.panel.rowidx:
            yield self._block(r)

    def _block(self, r: range) -> np.ndarray:
        n_rows = len(self.panel.data)
        if r.start < 0 or r.stop > n_rows:
            raise IndexError(
                f"Row index {r!r} is out of bounds for data with {n_rows} rows."
            )
        return self.panel.data[r.start : r.stop]

    # blocks are compared as whole arrays, not elementwise
    def __contains__(self, block) -> bool:
        return any(np.array_equal(g, block) for g in self)

    def index(self, block, start: int = 0, stop: Optional[int] = None) -> int:
        """Position of the first unit whose rows equal ``block``."""
        stop = len(self) if stop is None else stop
        for i in range(start, stop):
            if np.array_equal(self[i], block):
                return i
        raise ValueError("block is not the rows of any unit in the view.")

    def count(self, block) -> int:
        return sum(np.array_equal(g, block) for g in self)

    def __repr__(self) -> str:
        return f"PanelView({self.panel!r})"

    def apply(
        self,
        func: Callable,
        n_jobs: Optional[int] = None,
        progress_bar: bool = False,
        **kwargs: Any,
    ) -> List[Any]:
        """
        Apply ``func`` to the rows of each unit.

        Parameters
        ----------
        func : callable
            Called as ``func(block, **kwargs)`` for each unit's rows.
        n_jobs : int, optional
            The number of jobs to run in parallel. Default is None (sequential).
        progress_bar : bool
            Whether to display a progress bar. Default is False.
        **kwargs
            Passed on to ``func``.

        Returns
        -------
        list
            One result per unit, in unit order.

        Examples
        --------
        >>> import numpy as np
        >>> from panelarray import PanelVector
        >>> groups = PanelView(PanelVector(np.array([2, 2, 4, 3, 3]), tnum=[3, 2]))
        >>> groups.apply(lambda g: int(g.sum()))
        [8, 6]
        """
        blocks = _unit_wrapper(self, progress_bar=progress_bar, total=len(self))
        if n_jobs is None or n_jobs == 1:
            return [func(block, **kwargs) for block in blocks]
        return Parallel(n_jobs=n_jobs)(delayed(func)(block, **kwargs) for block in blocks)


def view(panel: AbstractPanel) -> PanelView:
    """Wrap ``panel`` in a :class:`PanelView` without copying its data."""
    return PanelView(panel)


def unwrap(v: PanelView) -> Union[PanelVector, PanelMatrix]:
    """Return the panel wrapped by ``v``."""
    return make_panel(v)


def regroup(
    data, rowidx: Partition, validate: bool = False
) -> Union[PanelVector, PanelMatrix]:
    """
    Pair stacked ``data`` with a partition, typically one taken from another panel.

    Parameters
    ----------
    data : array-like
        One- or two-dimensional stacked data.
    rowidx : list of range
        Rows of each unit.
    validate : bool, optional
        Whether to check ``rowidx`` against ``data``. Default is False.

    Returns
    -------
    PanelVector or PanelMatrix
        A new panel.
    """
    return make_panel(data, rowidx, validate=validate)
