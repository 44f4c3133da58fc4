# supergrid/visualization/__init__.py

"""
Chart configuration and plotting primitives for results charts.

Example
-------
Draw a stacked generation bar chart::

    from supergrid.visualization import ChartTechs, stacked_bar

    charttechs = ChartTechs.default()
    fig, ax = stacked_bar(["NOR", "FRA"], values,
                          labels=charttechs.techlabels(techs),
                          colors=charttechs.colors(techs))
"""

from .base import ChartTechs, RegionGroup, DEFAULT_CHARTTECHS_PATH, apply_style
from .charts import (
    stacked_bar,
    demand_markers,
    stacked_area,
    class_utilization_grid,
    line_overlay,
    line_chart,
    legend_outside,
    finish,
)

__all__ = [
    'ChartTechs',
    'RegionGroup',
    'DEFAULT_CHARTTECHS_PATH',
    'apply_style',
    'stacked_bar',
    'demand_markers',
    'stacked_area',
    'class_utilization_grid',
    'line_overlay',
    'line_chart',
    'legend_outside',
    'finish',
]
