# supergrid/visualization/charts.py

"""
Plotting primitives for results charts.

Every function draws on a matplotlib Axes (created when ``ax`` is
``None``) and returns the figure and axes, so callers decide whether to
show, save or close them.
"""

from typing import Dict, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from .base import HEADROOM_COLOR, apply_style, strip_spines


def _axes(ax, figsize):
    import matplotlib.pyplot as plt
    if ax is None:
        apply_style()
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure
    return fig, ax


def stacked_bar(
    categories: Sequence[str],
    values: np.ndarray,
    labels: Sequence[str],
    colors: Sequence,
    ylabel: str = "",
    title: str = "",
    legend: bool = True,
    ax=None,
    figsize: Tuple[float, float] = (9, 5.5),
    width: float = 0.8,
):
    """
    Stacked bar chart, one bar per category.

    Parameters
    ----------
    categories : sequence of str
        Bar labels.
    values : ndarray
        Shape ``(len(categories), len(labels))``; column j is stacked in
        position j from the bottom.
    labels : sequence of str
        Legend label of each stacked series.
    colors : sequence
        Colour of each stacked series.

    Returns
    -------
    fig : matplotlib.figure.Figure
    ax : matplotlib.axes.Axes
    """
    fig, ax = _axes(ax, figsize)
    values = np.atleast_2d(np.asarray(values, dtype=float))
    x = np.arange(len(categories))
    bottom = np.zeros(len(categories))
    for j, (label, color) in enumerate(zip(labels, colors)):
        ax.bar(x, values[:, j], width, bottom=bottom, label=label,
               color=color, linewidth=0)
        bottom += values[:, j]
    ax.set_xticks(x)
    ax.set_xticklabels(categories)
    if ylabel:
        ax.set_ylabel(ylabel)
    if title:
        ax.set_title(title)
    strip_spines(ax)
    if legend:
        legend_outside(ax)
    return fig, ax


def demand_markers(
    ax,
    heights: Sequence[float],
    label: str = "demand",
    width: float = 0.8,
):
    """
    Draw a horizontal black line at each bar's demand level.

    Only the first line carries a legend label.
    """
    for i, height in enumerate(heights):
        ax.hlines(height, i - width / 2, i + width / 2, colors="black",
                  linewidth=3, label=label if i == 0 else None)
    return ax


def stacked_area(
    x: Sequence,
    values: np.ndarray,
    labels: Sequence[str],
    colors: Sequence,
    xlabel: str = "hour of year",
    ylabel: str = "GW",
    ax=None,
    figsize: Tuple[float, float] = (9, 5.5),
):
    """
    Stacked area chart of several series over *x*.

    Parameters
    ----------
    values : ndarray
        Shape ``(len(x), len(labels))``.

    Returns
    -------
    fig : matplotlib.figure.Figure
    ax : matplotlib.axes.Axes
    """
    fig, ax = _axes(ax, figsize)
    values = np.asarray(values, dtype=float)
    ax.stackplot(list(x), values.T, labels=labels, colors=colors,
                 edgecolor="black", linewidth=0.03)
    ax.set_xlabel(xlabel)
    ax.set_ylabel(ylabel)
    strip_spines(ax)
    return fig, ax


def class_utilization_grid(
    tables: Dict[str, pd.DataFrame],
    titles: Dict[str, str],
    colors: Dict[str, object],
    ncols: int = 3,
    figsize: Tuple[float, float] = (18.5, 9.5),
):
    """
    Small multiples of class utilization, one panel per technology.

    Each panel stacks the used capacity of every class under its remaining
    headroom up to the class limit.

    Parameters
    ----------
    tables : dict of str to pd.DataFrame
        Technology -> table indexed by class with ``used`` and
        ``headroom`` columns (GW).
    titles : dict of str to str
        Technology -> panel title.
    colors : dict
        Technology -> colour of the used capacity.

    Returns
    -------
    fig : matplotlib.figure.Figure
    axes : ndarray of matplotlib.axes.Axes
    """
    import matplotlib.pyplot as plt

    apply_style()
    nrows = max(1, int(np.ceil(len(tables) / ncols)))
    gridspec_kw = {"width_ratios": [0.4, 0.2, 0.4]} if ncols == 3 else None
    fig, axes = plt.subplots(nrows, ncols, figsize=figsize, squeeze=False,
                             gridspec_kw=gridspec_kw)
    flat = axes.ravel()
    for ax, (tech, table) in zip(flat, tables.items()):
        stacked_bar(
            [str(c) for c in table.index],
            table[["used", "headroom"]].to_numpy(),
            labels=["used", "headroom"],
            colors=[colors[tech], HEADROOM_COLOR],
            ylabel="GW",
            title=titles[tech],
            legend=False,
            ax=ax,
        )
    for ax in flat[len(tables):]:
        ax.set_visible(False)
    fig.tight_layout()
    return fig, axes


def line_overlay(
    ax,
    x: Sequence,
    y: Sequence[float],
    label: Optional[str] = None,
    **style,
):
    """Plot one line on top of an existing chart."""
    ax.plot(list(x), list(y), label=label, **style)
    return ax


def finish(fig, show: bool = True) -> None:
    """Show *fig* when interactive output is wanted."""
    if show:
        import matplotlib.pyplot as plt
        plt.show()


def legend_outside(ax) -> None:
    """Legend right of the axes, top of the stack listed first."""
    handles, labels = ax.get_legend_handles_labels()
    ax.legend(handles[::-1], labels[::-1], loc="upper left",
              bbox_to_anchor=(1.01, 1.0), frameon=False)


def line_chart(
    x: Sequence,
    series: Dict[str, Sequence[float]],
    xlabel: str = "hour of year",
    ylabel: str = "",
    ax=None,
    figsize: Tuple[float, float] = (9, 5.5),
):
    """
    One line per entry of *series*, labelled by its key.

    Returns
    -------
    fig : matplotlib.figure.Figure
    ax : matplotlib.axes.Axes
    """
    fig, ax = _axes(ax, figsize)
    for label, y in series.items():
        line_overlay(ax, x, y, label=label)
    ax.set_xlabel(xlabel)
    if ylabel:
        ax.set_ylabel(ylabel)
    strip_spines(ax)
    ax.legend(frameon=False)
    return fig, ax
