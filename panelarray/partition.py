"""
Row partitions of stacked panel data.

A partition is a list of ``range`` objects, one per unit, laid out in unit
order. Unit ``i`` owns rows ``rowidx[i]`` of the stacked data.
"""

import warnings

import numpy as np
from numpy.typing import NDArray

from .utils.typing import ArrayLike, Counts, Partition
from .utils.validation import check_ids


def make_partition(tnum: Counts) -> Partition:
    """
    Build a partition from the number of periods of each unit.

    Range ``i`` holds ``tnum[i]`` consecutive row indices and starts right
    where range ``i - 1`` stops. The counts are not checked: zero or negative
    entries produce empty ranges, which downstream indexing does not expect.

    Parameters
    ----------
    tnum : sequence of int
        Number of periods observed for each unit.

    Returns
    -------
    list of range
        The per-unit row ranges.

    Examples
    --------
    >>> make_partition([3, 2])
    [range(0, 3), range(3, 5)]
    """
    stops = np.cumsum(np.asarray(tnum, dtype=np.int64))
    starts = stops - np.asarray(tnum, dtype=np.int64)
    return [range(int(start), int(stop)) for start, stop in zip(starts, stops)]


def _get_rowidx(x) -> Partition:
    # panels and views expose ``rowidx``; anything else is taken as a partition
    return getattr(x, "rowidx", x)


def n_units(x) -> int:
    """
    Number of units in a panel, a panel view, or a partition.

    Examples
    --------
    >>> import numpy as np
    >>> from panelarray import PanelVector
    >>> n_units(PanelVector(np.arange(5), tnum=[3, 2]))
    2
    """
    return len(_get_rowidx(x))


def n_periods(x) -> NDArray[np.int64]:
    """
    Number of periods of each unit in a panel, a panel view, or a partition.

    This is the inverse of :func:`make_partition`.

    Examples
    --------
    >>> import numpy as np
    >>> from panelarray import PanelVector
    >>> n_periods(PanelVector(np.arange(5), tnum=[3, 2]))
    array([3, 2])
    """
    return np.array([len(r) for r in _get_rowidx(x)], dtype=np.int64)


def tnum_from_ids(ids: ArrayLike) -> NDArray[np.int64]:
    """
    Count the periods of each unit from a unit identifier per observation.

    Units are taken in order of first appearance. Stacked panel data is
    expected to hold each unit's rows contiguously; if a unit's rows are
    interleaved with another unit's, a warning is issued since the counts
    then do not describe contiguous row blocks.

    Parameters
    ----------
    ids : IntoSeries, pd.Index, np.ndarray or list
        Unit identifier of each observation.

    Returns
    -------
    np.ndarray
        Number of periods of each unit.

    Examples
    --------
    >>> tnum_from_ids([1, 1, 1, 2, 2])
    array([3, 2])
    """
    ids = check_ids(ids)
    if len(ids) == 0:
        return np.array([], dtype=np.int64)

    _, first, inverse, counts = np.unique(
        ids, return_index=True, return_inverse=True, return_counts=True
    )
    order = np.argsort(first)

    # each unit contributes exactly one run when rows are contiguous
    inverse = np.ravel(inverse)
    n_runs = 1 + int(np.count_nonzero(inverse[1:] != inverse[:-1]))
    if n_runs != len(counts):
        warnings.warn(
            "Unit identifiers are not contiguous: some unit's rows are interleaved "
            "with another unit's. Sort the data by unit before building a panel.",
            UserWarning,
            stacklevel=2,
        )
    return counts[order].astype(np.int64)
