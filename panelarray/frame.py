"""
Build panels from observation tables and turn them back into tables.
"""

from typing import List, Optional, Sequence, Union

import narwhals as nw
import numpy as np
import pandas as pd
from narwhals.typing import IntoDataFrame

from .panel import AbstractPanel, PanelMatrix, PanelVector, make_panel
from .partition import n_periods, tnum_from_ids
from .utils.validation import _to_numpy_array, get_index_or_col_from_df


def from_frame(
    data: IntoDataFrame,
    unit_col: str,
    columns: Optional[Union[str, List[str]]] = None,
    validate: bool = False,
) -> Union[PanelVector, PanelMatrix]:
    """
    Create a panel from a dataframe holding one row per observation.

    Rows of each unit must be contiguous and in period order; the partition
    is derived from ``unit_col`` with :func:`~panelarray.partition.tnum_from_ids`.

    Parameters
    ----------
    data : IntoDataFrame
        Any dataframe supported by narwhals.
    unit_col : str
        The column (or, for pandas, index level) identifying the unit of each
        row. If both an index and a column are named ``unit_col``, the index
        is used.
    columns : str or list of str, optional
        The variables to put in the panel. A single name gives a
        :class:`PanelVector`, a list gives a :class:`PanelMatrix`. Default is
        every column except ``unit_col``.
    validate : bool, optional
        Whether to check the partition against the data. Default is False.

    Returns
    -------
    PanelVector or PanelMatrix
        The stacked observations.

    Examples
    --------
    >>> import pandas as pd
    >>> df = pd.DataFrame({
    ...     "ivar": [1, 1, 1, 2, 2],
    ...     "x1": [3, 4, 5, 8, 3],
    ...     "x2": [5, 7, 9, 2, 2],
    ... })
    >>> X = from_frame(df, "ivar")
    >>> X.rowidx
    [range(0, 3), range(3, 5)]
    >>> from_frame(df, "ivar", columns="x1").data
    array([3, 4, 5, 8, 3])
    """
    ids = get_index_or_col_from_df(data, unit_col)
    tnum = tnum_from_ids(_to_numpy_array(ids))

    data_nw = nw.from_native(data, eager_only=True)
    if columns is None:
        columns = [c for c in data_nw.columns if c != unit_col]

    if isinstance(columns, str):
        values = data_nw.get_column(columns).to_numpy()
    else:
        values = data_nw.select(columns).to_numpy()

    return make_panel(values, tnum=tnum, validate=validate)


def to_frame(
    panel: AbstractPanel,
    columns: Optional[Sequence[str]] = None,
    unit_ids: Optional[Sequence] = None,
    unit_col: str = "unit",
):
    """
    Convert a panel to a pandas DataFrame with a unit column.

    Parameters
    ----------
    panel : PanelVector or PanelMatrix
        The panel to convert.
    columns : sequence of str, optional
        Names of the variables. Default is ``x0, x1, ...`` (``x`` for vectors).
    unit_ids : sequence, optional
        Identifier of each unit. Default is ``0, 1, ...``.
    unit_col : str
        Name of the unit column. Default is "unit".

    Returns
    -------
    pd.DataFrame
        One row per observation, ``unit_col`` first.
    """
    values = panel.data.reshape(len(panel.data), -1)
    if columns is None:
        columns = ["x"] if panel.ndim == 1 else [f"x{j}" for j in range(values.shape[1])]
    if unit_ids is None:
        unit_ids = np.arange(panel.n_units)

    df = pd.DataFrame(values, columns=list(columns))
    df.insert(0, unit_col, np.repeat(np.asarray(unit_ids), n_periods(panel)))
    return df
