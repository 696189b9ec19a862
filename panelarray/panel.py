"""
Panel containers: stacked numpy data paired with a per-unit row partition.

Arithmetic goes through numpy's ufunc protocol, so ``k * p``, ``p + q``,
``p - q``, ``m @ v`` and ``np.exp(p)`` all return new panels that carry the
partition of the first panel operand. Operands are never modified.
"""

import numbers
from typing import Callable, Optional, Union

import numpy as np
from numpy.lib.mixins import NDArrayOperatorsMixin
from numpy.typing import NDArray

from .partition import make_partition, n_periods, n_units
from .utils.typing import Counts, Partition
from .utils.validation import check_partition, check_rank, check_rowidx_args


class AbstractPanel(NDArrayOperatorsMixin):
    """
    Base class of :class:`PanelVector` and :class:`PanelMatrix`.

    Shape, indexing and iteration are those of the underlying ``data`` array;
    the partition only matters to :class:`~panelarray.views.PanelView`, the
    utility functions and the results of arithmetic.

    Parameters
    ----------
    data : array-like
        The stacked observations, units along the leading dimension.
    rowidx : list of range, optional
        Rows of each unit. Mutually exclusive with ``tnum``.
    tnum : sequence of int, optional
        Number of periods of each unit, expanded with
        :func:`~panelarray.partition.make_partition`. Mutually exclusive with
        ``rowidx``.
    validate : bool, optional
        Whether to check that ``rowidx`` covers the rows of ``data`` exactly
        once. Default is False: an ill-formed partition only surfaces when a
        unit is accessed.

    Attributes
    ----------
    data : np.ndarray
        The stacked observations.
    rowidx : list of range
        Rows of each unit.
    """

    _ndim: int = 0
    _HANDLED_TYPES = (np.ndarray, np.generic, numbers.Number, list, tuple)

    def __init__(
        self,
        data,
        rowidx: Optional[Partition] = None,
        tnum: Optional[Counts] = None,
        validate: bool = False,
    ) -> None:
        check_rowidx_args(rowidx, tnum)
        data = np.asarray(data)
        check_rank(data, self._ndim)
        if rowidx is None:
            rowidx = make_partition(tnum)
        if validate:
            check_partition(rowidx, data.shape[0])
        self.data = data
        self.rowidx = rowidx

    @property
    def shape(self):
        return self.data.shape

    @property
    def ndim(self) -> int:
        return self.data.ndim

    @property
    def dtype(self):
        return self.data.dtype

    @property
    def size(self) -> int:
        return self.data.size

    @property
    def n_units(self) -> int:
        """Number of units."""
        return n_units(self)

    @property
    def n_periods(self) -> NDArray[np.int64]:
        """Number of periods of each unit."""
        return n_periods(self)

    def __len__(self) -> int:
        return len(self.data)

    def __getitem__(self, key):
        return self.data[key]

    def __iter__(self):
        return iter(self.data)

    def __array__(self, dtype=None, copy=None):
        if copy:
            return np.array(self.data, dtype=dtype, copy=True)
        return np.asarray(self.data, dtype=dtype)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.data!r}, rowidx={self.rowidx!r})"

    def __array_ufunc__(self, ufunc, method, *inputs, **kwargs):
        out = kwargs.get("out", ())
        for x in inputs + out:
            if not isinstance(x, self._HANDLED_TYPES + (AbstractPanel,)):
                return NotImplemented

        if method == "at" or any(isinstance(x, AbstractPanel) for x in out):
            raise TypeError(
                f"{type(self).__name__} does not support in-place operations; "
                "assign the result to a new name instead."
            )

        panel = next(x for x in inputs if isinstance(x, AbstractPanel))
        args = tuple(x.data if isinstance(x, AbstractPanel) else x for x in inputs)
        result = getattr(ufunc, method)(*args, **kwargs)

        # reductions, accumulations and explicit outputs drop the grouping
        if method != "__call__" or out:
            return result
        if ufunc.nout > 1:
            return tuple(_wrap(r, panel) for r in result)
        return _wrap(result, panel)

    def _rebind(self, other):
        return NotImplemented

    # augmented assignment falls back to the binary operator and rebinds
    __iadd__ = __isub__ = __imul__ = __imatmul__ = _rebind
    __itruediv__ = __ifloordiv__ = __imod__ = __ipow__ = _rebind
    __ilshift__ = __irshift__ = __iand__ = __ixor__ = __ior__ = _rebind

    def panelize(self):
        """Return a :class:`~panelarray.views.PanelView` over this panel."""
        from .views import PanelView

        return PanelView(self)


class PanelMatrix(AbstractPanel):
    """
    Two-dimensional panel: one row per observation, one column per variable.

    Examples
    --------
    >>> import numpy as np
    >>> X = np.array([[3, 5], [4, 7], [5, 9], [8, 2], [3, 2]])
    >>> data = PanelMatrix(X, tnum=[3, 2])
    >>> data.rowidx
    [range(0, 3), range(3, 5)]
    >>> data.shape
    (5, 2)
    """

    _ndim = 2


class PanelVector(AbstractPanel):
    """One-dimensional panel: one entry per observation."""

    _ndim = 1


_PANEL_TYPES = {1: PanelVector, 2: PanelMatrix}


def _wrap(result, panel: AbstractPanel):
    # only results laid out along the panel's rows keep its partition
    if (
        isinstance(result, np.ndarray)
        and result.ndim in _PANEL_TYPES
        and result.shape[0] == panel.data.shape[0]
    ):
        return _PANEL_TYPES[result.ndim](result, panel.rowidx)
    return result


def make_panel(
    a,
    rowidx: Optional[Partition] = None,
    *,
    tnum: Optional[Counts] = None,
    validate: bool = False,
) -> Union[PanelVector, PanelMatrix]:
    """
    Create a :class:`PanelVector` or :class:`PanelMatrix` for use in panel models.

    There are two accepted forms of the partition:

    1. the per-unit row ranges, ``rowidx``;
    2. the number of periods of each unit, ``tnum``.

    Passing a :class:`~panelarray.views.PanelView` returns the panel it wraps.

    Parameters
    ----------
    a : array-like or PanelView
        One- or two-dimensional stacked data, or a view to unwrap.
    rowidx : list of range, optional
        Rows of each unit.
    tnum : sequence of int, optional
        Number of periods of each unit.
    validate : bool, optional
        Whether to check the partition against the data. Default is False.

    Returns
    -------
    PanelVector or PanelMatrix
        Chosen by the number of dimensions of ``a``.

    Examples
    --------
    >>> import numpy as np
    >>> ivar = np.array([1, 1, 1, 2, 2])
    >>> X = np.array([[3, 5], [4, 7], [5, 9], [8, 2], [3, 2]])
    >>> tnum = [np.sum(ivar == i) for i in np.unique(ivar)]
    >>> data = make_panel(X, tnum=tnum)
    >>> means = [g.mean(axis=0, keepdims=True) for g in data.panelize()]
    >>> means
    [array([[4., 7.]]), array([[5.5, 2. ]])]
    >>> _data = [np.repeat(m, t, axis=0) for m, t in zip(means, data.n_periods)]
    >>> make_panel(np.vstack(_data), data.rowidx).data
    array([[4. , 7. ],
           [4. , 7. ],
           [4. , 7. ],
           [5.5, 2. ],
           [5.5, 2. ]])
    """
    from .views import PanelView

    if isinstance(a, PanelView):
        return a.panel

    a = np.asarray(a)
    if a.ndim not in _PANEL_TYPES:
        raise ValueError(
            f"Panel data must be one- or two-dimensional. Got an array of shape {a.shape} instead"
        )
    return _PANEL_TYPES[a.ndim](a, rowidx, tnum=tnum, validate=validate)


def broadcast(f: Callable, *args):
    """
    Apply ``f`` elementwise to the data of panels and other array-likes.

    Numpy ufuncs are called directly; any other callable is vectorized with
    :func:`numpy.vectorize`. The result carries the partition of the first
    panel among ``args``.

    Parameters
    ----------
    f : callable
        Scalar function (or ufunc) to apply.
    *args
        Panels, arrays or scalars, broadcast against each other by numpy.

    Returns
    -------
    PanelVector or PanelMatrix
        A new panel; the arguments are not modified.

    Examples
    --------
    >>> import numpy as np
    >>> p = PanelVector(np.array([1.0, 2.0, 3.0]), tnum=[2, 1])
    >>> broadcast(lambda x, y: max(x, y), p, 2.0).data
    array([2., 2., 3.])
    """
    panels = [a for a in args if isinstance(a, AbstractPanel)]
    if not panels:
        raise TypeError("broadcast expects at least one panel argument.")
    data = [a.data if isinstance(a, AbstractPanel) else a for a in args]
    if not isinstance(f, np.ufunc):
        # vectorize cannot infer the output type from empty inputs
        if any(np.size(d) == 0 for d in data):
            otypes = [np.result_type(*(np.asarray(d) for d in data))]
            f = np.vectorize(f, otypes=otypes)
        else:
            f = np.vectorize(f)
    result = f(*data)
    return _wrap(np.asarray(result), panels[0])
