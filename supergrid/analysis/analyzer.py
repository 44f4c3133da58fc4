# supergrid/analysis/analyzer.py

"""
Standard aggregates of a run and the region-parameterized results chart.

:func:`analyze_results` recomputes capacity, annual electricity, storage
level and transmission capacity tables from a :class:`Results` record and
returns them in an :class:`Analysis` together with a ``chart`` closure::

    annualelec, capac, tcapac, chart = analyze_results(results)
    chart("BARS")      # generation mix of every region
    chart("NOR")       # class utilization and hourly dispatch of one region
    chart("total", plotstoragetech="battery", plotbatterylevel=True)
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional

import numpy as np
import pandas as pd

from ..constants import BARS, BATTERY, GWH_PER_TWH, TOTAL
from ..interfaces import Results
from ..visualization import (
    ChartTechs,
    class_utilization_grid,
    demand_markers,
    finish,
    legend_outside,
    line_chart,
    line_overlay,
    stacked_area,
    stacked_bar,
)
from .aggregate import (
    annual_electricity,
    capacity_table,
    charging_matrix,
    class_utilization,
    demand_matrix,
    existing_generation,
    group_columns,
    grouped_demand,
    grouped_system_cost,
    hourly_electricity,
    resolve_regions,
    storage_levels,
    system_cost_per_mwh,
    total_electricity,
    transmission_capacity,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Analysis:
    """
    Aggregates of one run.

    Iterating an Analysis yields ``(annualelec, capac, tcapac, chart)``.

    Attributes
    ----------
    annualelec : pd.DataFrame
        Annual electricity, index TECH, columns ``REGION + ['TOTAL']`` (GWh).
    capac : pd.DataFrame
        Installed capacity, index TECH, columns ``REGION + ['TOTAL']`` (GW).
    tcapac : pd.DataFrame
        Directional transmission capacity, REGION x REGION (GW).
    storagelevel : ndarray
        Storage level, shape ``(HOUR, storagetechs, REGION)`` (TWh).
    hourlyelec : ndarray
        Electricity, shape ``(HOUR, TECH, REGION)`` (GWh per step).
    totalelec : pd.Series
        Per-technology sum over hours and regions; equals the TOTAL column
        of ``annualelec``.
    chart : callable
        ``chart(selector, plotstoragetech=None, plotbatterycharge=False,
        plotbatterylevel=False, show=True, **options)`` draws the charts of
        a region selection and returns the figures.
    """

    results: Results = field(repr=False)
    charttechs: ChartTechs = field(repr=False)
    annualelec: pd.DataFrame
    capac: pd.DataFrame
    tcapac: pd.DataFrame
    storagelevel: np.ndarray
    hourlyelec: np.ndarray
    totalelec: pd.Series
    chart: Callable = field(default=None, repr=False)

    def __iter__(self):
        return iter((self.annualelec, self.capac, self.tcapac, self.chart))

    @property
    def displayorder(self) -> List[int]:
        return self.charttechs.displayorder(self.results.sets.TECH)

    @property
    def techlabels(self) -> List[str]:
        return self.charttechs.techlabels(self.results.sets.TECH)

    def system_cost(self) -> pd.Series:
        """Levelized system cost per region and in total (€/MWh)."""
        existing = existing_generation(self.results, self.charttechs)
        return system_cost_per_mwh(self.results, self.annualelec, existing)

    def selected_annual(self, selector: str) -> pd.Series:
        """Annual electricity per technology summed over a region selection (GWh)."""
        regs = resolve_regions(selector, self.results.sets.REGION, self.charttechs)
        return pd.Series(self.hourlyelec[:, :, regs].sum(axis=(0, 2)),
                         index=self.annualelec.index)

    def dispatch(self, selector: str) -> pd.DataFrame:
        """
        Hourly generation of a region selection in display order (GW).

        Returns
        -------
        pd.DataFrame
            Index HOUR, one column per technology label.
        """
        sets = self.results.sets
        regs = resolve_regions(selector, sets.REGION, self.charttechs)
        regelec = (self.hourlyelec[:, :, regs].sum(axis=2)[:, self.displayorder]
                   / self.results.hoursperperiod)
        return pd.DataFrame(regelec, index=pd.Index(sets.HOUR, name="HOUR"),
                            columns=self.techlabels)


def analyze_results(results: Results, charttechs: Optional[ChartTechs] = None) -> Analysis:
    """
    Compute the standard aggregates of a run.

    Parameters
    ----------
    results : Results
        Run to analyze.
    charttechs : ChartTechs, optional
        Chart palette and region groupings (packaged default if omitted).

    Returns
    -------
    Analysis

    Raises
    ------
    KeyError
        If a technology of the run has no chart palette/label entry.
    """
    charttechs = charttechs or ChartTechs.default()
    sets = results.sets
    charttechs.check(sets.TECH)

    capac = capacity_table(results)
    elec = hourly_electricity(results)
    annualelec = annual_electricity(results, elec)
    totalelec = total_electricity(results, elec)
    storage = storage_levels(results)
    tcapac = transmission_capacity(results)
    charge = charging_matrix(results, BATTERY)
    demand = demand_matrix(results)
    hoursperperiod = results.hoursperperiod

    displayorder = charttechs.displayorder(sets.TECH)
    techs = [sets.TECH[i] for i in displayorder]
    techlabels = charttechs.techlabels(sets.TECH)
    palette = charttechs.colors(sets.TECH)

    analysis = Analysis(
        results=results,
        charttechs=charttechs,
        annualelec=annualelec,
        capac=capac,
        tcapac=tcapac,
        storagelevel=storage,
        hourlyelec=elec,
        totalelec=totalelec,
        chart=None,
    )

    def chart_bars(show, options):
        figsize = options.pop("figsize", None)
        options = {"ylabel": "TWh/year", **options}
        figures = []
        regions = list(sets.REGION)
        lr = len(regions)

        lcoe = analysis.system_cost()
        print("Regional system cost per MWh generated (€/MWh):")
        print(lcoe.round(2).to_frame().T.to_string())

        fig, ax = stacked_bar(
            regions, annualelec.loc[techs, regions].to_numpy().T / GWH_PER_TWH,
            labels=techlabels, colors=palette,
            figsize=figsize or (3.4 + 0.7 * lr, 5.5), **options,
        )
        demand_markers(ax, demand.sum(axis=1) * hoursperperiod / GWH_PER_TWH)
        figures.append(fig)

        if charttechs.regiongroups and lr == charttechs.grouplayout:
            totelec = group_columns(annualelec, charttechs)
            fig, ax = stacked_bar(
                list(totelec.columns), totelec.loc[techs].to_numpy().T / GWH_PER_TWH,
                labels=techlabels, colors=palette, figsize=figsize or (5, 9.5), **options,
            )
            demand_markers(ax, grouped_demand(results, charttechs) / GWH_PER_TWH)
            print("\nSystem cost per MWh demand (€/MWh):  (existing generation not subtracted)")
            print(grouped_system_cost(results, charttechs).round(2).to_frame().T.to_string())
        else:
            fig, ax = stacked_bar(
                [TOTAL], annualelec.loc[techs, [TOTAL]].to_numpy().T / GWH_PER_TWH,
                labels=techlabels, colors=palette, figsize=figsize or (3.5, 6), **options,
            )
            demand_markers(ax, [demand.sum() * hoursperperiod / GWH_PER_TWH])
            ax.set_xlim(-0.7, 0.7)
        figures.append(fig)
        finish(fig, show)
        return figures

    def chart(
        selector: str,
        plotstoragetech: Optional[str] = None,
        plotbatterycharge: bool = False,
        plotbatterylevel: bool = False,
        show: bool = True,
        **options,
    ):
        """
        Draw the results charts of a region selection.

        Parameters
        ----------
        selector : str
            ``'BARS'`` for the generation mix of every region, a total or
            region-group alias, or a region name.
        plotstoragetech : str, optional
            Storage technology whose level is plotted.
        plotbatterycharge, plotbatterylevel : bool, optional
            Overlay battery charging / battery level on the dispatch chart.
        show : bool, optional
            Call ``plt.show()`` after drawing (default ``True``).
        **options
            Chart options. ``figsize`` applies to every figure drawn. With
            ``'BARS'`` the rest go to the bar charts (e.g. ``ylabel``,
            ``title``); otherwise to the dispatch chart (``xlabel``,
            ``ylabel``).

        Returns
        -------
        list of matplotlib.figure.Figure

        Raises
        ------
        ValueError
            If *selector* is not a known alias or region.
        """
        if selector == BARS:
            return chart_bars(show, dict(options))

        regs = resolve_regions(selector, sets.REGION, charttechs)
        sizeoption = {"figsize": options["figsize"]} if "figsize" in options else {}
        logger.debug(f"Charting {selector}: regions {[sets.REGION[i] for i in regs]}")
        figures = []

        regelec = analysis.dispatch(selector).to_numpy()
        regcharge = charge[:, regs].sum(axis=1) / hoursperperiod
        regdemand = demand[regs, :].sum(axis=0)

        classtechs = [k for k in charttechs.classcharts if k in sets.TECH]
        if classtechs:
            tables = {k: class_utilization(results, k, regs, charttechs) for k in classtechs}
            fig, _ = class_utilization_grid(
                tables,
                titles={k: charttechs.label(k) for k in classtechs},
                colors={k: charttechs.color(k) for k in classtechs},
                **sizeoption,
            )
            figures.append(fig)

        if plotstoragetech is not None:
            if plotstoragetech not in sets.storagetechs:
                raise ValueError(
                    f"{plotstoragetech} is not a storage technology "
                    f"({list(sets.storagetechs)})."
                )
            i = sets.storagetechs.index(plotstoragetech)
            regstorage = storage[:, i, regs].sum(axis=1)
            lines = {"storage level (TWh)": regstorage}
            if plotstoragetech == BATTERY:
                k = sets.TECH.index(BATTERY)
                discharge = elec[:, k, regs].sum(axis=1) / hoursperperiod
                lines["charge (TWh/h)"] = regcharge / GWH_PER_TWH
                lines["discharge (TWh/h)"] = discharge / GWH_PER_TWH
            fig, _ = line_chart(sets.HOUR, lines, **sizeoption)
            figures.append(fig)

        fig, ax = stacked_area(sets.HOUR, regelec, techlabels, palette, **options)
        if plotbatterycharge:
            line_overlay(ax, sets.HOUR, -regcharge, color=charttechs.color(BATTERY))
        if plotbatterylevel and BATTERY in sets.storagetechs:
            level = storage[:, sets.storagetechs.index(BATTERY), regs].sum(axis=1)
            line_overlay(ax, sets.HOUR, level * GWH_PER_TWH, color="black", linestyle="--")
        line_overlay(ax, sets.HOUR, regdemand, label="demand", color="black", linewidth=2)
        legend_outside(ax)
        figures.append(fig)

        finish(fig, show)
        return figures

    object.__setattr__(analysis, "chart", chart)
    return analysis
