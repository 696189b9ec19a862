"""

# panelarray: grouped arrays for panel data

panelarray is a Python package for working with panel (longitudinal) data stored as stacked numpy arrays: every unit (firm, person, country) owns a contiguous block of rows, one per observed period. A panel pairs the stacked array with the row range of each unit, so that numeric code can work on the whole dataset at once or unit by unit without slicing index ranges by hand.

**Key Features:**
- **Grouped arrays:** `PanelVector` and `PanelMatrix` behave like their numpy data under indexing, arithmetic and ufuncs, and carry their partition through every result.
- **Per-unit views:** `PanelView` turns a panel into a sequence of per-unit blocks, so per-unit reductions are plain list comprehensions.
- **Data compatibility:** Build panels from any dataframe supported by narwhals.
- **Parallel Processing:** Per-unit maps can run in parallel with joblib.

---
## Modules


### `panelarray.partition`
- **Partitions:** Build the row ranges of each unit from period counts or unit identifiers.
- **Queries:** Count units and periods per unit.

### `panelarray.panel`
- **Containers:** `PanelVector`, `PanelMatrix` and the rank-dispatching `make_panel`.
- **Arithmetic:** Scalar multiplication, matrix-vector products, addition, subtraction and `broadcast`.

### `panelarray.views`
- **PanelView class:** Sequence of per-unit blocks, with parallel `apply`.
- **Regrouping:** `unwrap` and `regroup` move between views, panels and raw arrays.

### `panelarray.transform`
- **Aggregation:** Per-unit reductions and their expansion back to full length.
- **Within transformation:** `demean` and the scikit-learn compatible `PanelDemeaner`.

### `panelarray.frame`
- Convert between dataframes and panels.

### `panelarray.plot`
- Visualize the rows of each unit.
"""

from .partition import make_partition, n_units, n_periods, tnum_from_ids
from .panel import AbstractPanel, PanelMatrix, PanelVector, broadcast, make_panel
from .views import PanelView, regroup, unwrap, view

__all__ = [
    "AbstractPanel",
    "PanelMatrix",
    "PanelVector",
    "PanelView",
    "broadcast",
    "make_panel",
    "make_partition",
    "n_periods",
    "n_units",
    "regroup",
    "tnum_from_ids",
    "unwrap",
    "view",
    "frame",
    "partition",
    "plot",
    "transform",
]
