"""
Loading and plotting of recorded timing files.

The CSV files written by :mod:`primitive_timing.performance.timing` are read
back as DataFrames; :func:`plot_results` draws the raw samples with array
size on the x-axis.  No smoothing or fitting is applied.
"""

import logging
import os
from typing import Optional

import pandas as pd
import matplotlib

matplotlib.use("Agg")  # Non-interactive backend for saving
import matplotlib.pyplot as plt

logger = logging.getLogger(__name__)


def load_results(path: str) -> pd.DataFrame:
    """Read one timing CSV into a DataFrame, keeping the header labels."""
    if not os.path.exists(path):
        raise FileNotFoundError(f"{path} not found -- run the timing routine first.")
    return pd.read_csv(path)


def plot_results(
    path: str,
    output_path: Optional[str] = None,
    *,
    value_column: Optional[str] = None,
) -> str:
    """
    Scatter a timing column of *path* against array size.

    Parameters
    ----------
    path : str
        A CSV written by one of the timing routines.
    output_path : str, optional
        Where to save the figure.  Defaults to the CSV path with a ``.png``
        suffix.
    value_column : str, optional
        Column to plot.  Defaults to the first column after the size whose
        label mentions "time".

    Returns
    -------
    str
        The path of the saved PNG.
    """
    df = load_results(path)

    if value_column is None:
        timing_cols = [c for c in df.columns[1:] if "time" in c]
        if not timing_cols:
            raise ValueError(f"{path} has no timing column to plot")
        value_column = timing_cols[0]
    elif value_column not in df.columns:
        raise ValueError(f"{path} has no column {value_column!r}")

    if output_path is None:
        output_path = os.path.splitext(path)[0] + ".png"

    size_col = df.columns[0]
    title = os.path.splitext(os.path.basename(path))[0]

    fig, ax = plt.subplots(figsize=(10, 5))
    ax.scatter(df[size_col], df[value_column], s=12, color="steelblue",
               edgecolor="black", linewidth=0.3)
    ax.set_xlabel(size_col)
    ax.set_ylabel(value_column)
    ax.set_title(title)
    ax.grid(True, alpha=0.3)
    plt.tight_layout()
    fig.savefig(output_path, dpi=150)
    plt.close(fig)

    logger.info("Saved plot of %s to %s", path, output_path)
    return output_path
