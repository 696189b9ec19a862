import matplotlib.pyplot as plt
from .panel import AbstractPanel
from .views import PanelView
from typing import Tuple, Optional, Union


def plot_units(
    panel: Union[AbstractPanel, PanelView], show: bool = True
) -> Optional[Tuple[plt.Figure, plt.Axes]]:
    """
    Visualize the partition of a panel using a scatter plot.

    Each unit is plotted on a separate horizontal line, with one marker per
    row of the stacked data that belongs to it.

    Parameters
    ----------
    panel : PanelVector, PanelMatrix or PanelView
        The panel whose partition is plotted.
    show : bool, default=True
        If True, the plot is immediately displayed using `plt.show()`.
        If False, the function returns the matplotlib Figure and Axes objects for further customization.

    Returns
    -------
    Optional[Tuple[plt.Figure, plt.Axes]]
        If `show` is False, returns a tuple `(fig, ax)` where `fig` is the matplotlib Figure
        and `ax` is the Axes object. If `show` is True, the plot is displayed and the function returns None.

    Examples
    --------
    >>> import numpy as np
    >>> from panelarray import PanelVector
    >>> p = PanelVector(np.arange(5), tnum=[3, 2])
    >>> fig, ax = plot_units(p, show=False)
    >>> ax.set_title("Rows of each unit")
    >>> plt.show()
    """
    rowidx = panel.rowidx
    units = len(rowidx)
    fig, ax = plt.subplots()

    for i, rows in enumerate(rowidx):
        color = "blue" if i % 2 == 0 else "red"
        ax.scatter(list(rows), [i] * len(rows), color=color, marker=".", s=50)

    ax.set_xlabel("Row")
    ax.set_ylabel("Unit")
    ax.set_title("Panel units")
    ax.set_yticks(range(units))
    ax.set_yticklabels([f"{i}" for i in range(units)])

    if show:
        plt.show()
        return None
    else:
        return fig, ax
