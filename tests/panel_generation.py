import numpy as np
import pandas as pd


def create_panel_dataset(n_units=4, max_periods=5, n_features=3, random_state=42):
    """
    Create a stacked panel DataFrame with an unbalanced number of periods per unit.

    Returns a DataFrame with columns:
      - unit   : unit identifier, rows of each unit are contiguous
      - period : 0..T_i - 1 within each unit
      - x0..x{n_features-1} : numeric features
      - y      : continuous target with a unit-specific intercept

    Parameters
    ----------
    n_units : int
        Number of units.
    max_periods : int
        Largest number of periods of a unit; each unit has between 1 and max_periods.
    n_features : int
        Number of feature columns.
    random_state : int
        Seed for reproducibility.
    """
    rng = np.random.default_rng(random_state)
    tnum = rng.integers(1, max_periods + 1, size=n_units)
    n = int(tnum.sum())

    unit = np.repeat(np.arange(n_units), tnum)
    period = np.concatenate([np.arange(t) for t in tnum])
    X = rng.normal(size=(n, n_features))
    alpha = rng.normal(scale=3.0, size=n_units)
    y = X @ np.arange(1, n_features + 1) + alpha[unit] + rng.normal(scale=0.1, size=n)

    df = pd.DataFrame(X, columns=[f"x{j}" for j in range(n_features)])
    df.insert(0, "period", period)
    df.insert(0, "unit", unit)
    df["y"] = y
    return df


# Example usage:
# df = create_panel_dataset(n_units=10, max_periods=8, random_state=2025)
