import warnings

import narwhals as nw
import numpy as np
import pandas as pd
from narwhals.dependencies import (
    is_numpy_array,
    is_pandas_series,
)


__pdoc__ = {
    "get_index_or_col_from_df": False,
    "check_ids": False,
    "check_rank": False,
    "check_rowidx_args": False,
}


def _to_numpy_array(data):
    """Convert any data structure to numpy array using narwhals."""
    if is_numpy_array(data):
        return data

    # Use narwhals to handle conversion
    try:
        return nw.from_native(data, pass_through=True).to_numpy()
    except Exception:
        # Final fallback
        return np.asarray(data)


def get_index_or_col_from_df(df, name):
    """Get column or index from dataframe in a dataframe-agnostic way."""
    df_nw = nw.from_native(df, pass_through=True)

    # Check if it's a column
    col_exists = hasattr(df_nw, "columns") and name in df_nw.columns

    # For index operations, we need pandas-specific logic as narwhals doesn't support index access
    index_exists = False
    is_multi = False
    if isinstance(df, pd.DataFrame):
        is_multi = hasattr(df.index, "names") and len(df.index.names) > 1
        index_names = df.index.names if is_multi else [df.index.name]
        index_exists = name in index_names

    # When the name is found in both the index and the columns, warn and default to the index.
    if col_exists and index_exists:
        msg = (
            f"'{name}' is found in both the DataFrame's "
            f"{'MultiIndex levels' if is_multi else 'index'} and its columns. "
            "Defaulting to the index."
        )
        warnings.warn(msg, UserWarning, stacklevel=3)
        return df.index.get_level_values(name) if is_multi else df.index

    elif index_exists:
        return df.index.get_level_values(name) if is_multi else df.index

    elif col_exists:
        column = df_nw.get_column(name)
        return nw.to_native(column) if hasattr(column, "_compliant_series") else column

    raise KeyError(f"'{name}' was not found in the DataFrame's columns or index names.")


def check_ids(ids, obj_name="ids"):
    """Check and convert unit identifiers to a one-dimensional numpy array."""
    if is_pandas_series(ids) or is_numpy_array(ids):
        ids_array = _to_numpy_array(ids)
    elif hasattr(ids, "names") and len(getattr(ids, "names", [])) > 1:
        raise ValueError(f"{obj_name} must be a level of an index. Got a MultiIndex instead.")
    elif hasattr(ids, "__iter__") and not isinstance(ids, str):
        ids_array = _to_numpy_array(ids)
    else:
        raise ValueError(f"{obj_name} type not supported.")

    if ids_array.ndim != 1:
        raise ValueError(
            f"{obj_name} array must be one-dimensional. Got an array of shape {ids_array.shape} instead"
        )
    return ids_array


def check_rank(data, ndim, obj_name="data"):
    """Check that ``data`` has exactly ``ndim`` dimensions."""
    if data.ndim != ndim:
        kind = "one-dimensional" if ndim == 1 else "two-dimensional"
        raise ValueError(
            f"{obj_name} array must be {kind}. Got an array of shape {data.shape} instead"
        )


def check_rowidx_args(rowidx, tnum):
    """Check that exactly one of ``rowidx`` and ``tnum`` was given."""
    if rowidx is None and tnum is None:
        raise TypeError("Either rowidx or tnum must be given to build a panel.")
    if rowidx is not None and tnum is not None:
        raise TypeError("rowidx and tnum are mutually exclusive; got both.")


def check_partition(rowidx, n_rows):
    """
    Check that a partition covers ``0..n_rows-1`` exactly once, in order.

    Parameters
    ----------
    rowidx : list of range
        The per-unit row ranges.
    n_rows : int
        Length of the leading dimension of the data the partition describes.

    Raises
    ------
    ValueError
        If a range is empty, has a step other than 1, does not start where the
        previous one stopped, or if the ranges do not end at ``n_rows``.
    """
    expected_start = 0
    for i, r in enumerate(rowidx):
        if not isinstance(r, range) or r.step != 1:
            raise ValueError(f"Unit {i}: row index {r!r} is not a contiguous range.")
        if len(r) == 0:
            raise ValueError(f"Unit {i}: row index {r!r} is empty.")
        if r.start != expected_start:
            raise ValueError(
                f"Unit {i}: row index {r!r} starts at {r.start}, expected {expected_start}."
            )
        expected_start = r.stop
    if expected_start != n_rows:
        raise ValueError(
            f"Partition covers {expected_start} rows but the data has {n_rows} rows."
        )
