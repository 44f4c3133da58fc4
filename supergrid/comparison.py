# supergrid/comparison.py

"""
Comparison of generation mixes across stored runs.

Example
-------
>>> from supergrid.comparison import chart_energymix_scenarios
>>> comparison, fig = chart_energymix_scenarios(
...     ["baseline", "high wind"], ["default", "solarwindarea=2"], "results.zip")
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

import pandas as pd

from .analysis import analyze_results
from .constants import BARS, GWH_PER_TWH
from .output import load_results
from .visualization import ChartTechs, demand_markers, finish, stacked_bar

logger = logging.getLogger(__name__)


@dataclass
class ScenarioData:
    """
    Totals of one stored run.

    Attributes
    ----------
    totalelec : pd.Series
        Annual electricity per technology, summed over regions (GWh).
    totaldemand : float
        Annual demand, summed over regions (GWh).
    hoursperperiod : int
        Hours per model time step.
    displayorder : list of int
        Positions of ``totalelec`` in chart display order.
    techlabels : list of str
        Legend labels in display order.
    palette : list
        Colours in display order.
    """
    totalelec: pd.Series
    totaldemand: float
    hoursperperiod: int
    displayorder: List[int] = field(default_factory=list)
    techlabels: List[str] = field(default_factory=list)
    palette: list = field(default_factory=list)


@dataclass
class ScenarioComparison:
    """
    Totals of several runs side by side.

    Attributes
    ----------
    scenarios : list of str
        Scenario labels, in the order given.
    scenelec : pd.DataFrame
        Annual electricity, index technology, one column per scenario (GWh).
    demands : pd.Series
        Annual demand per scenario (GWh).
    hoursperperiod : int
        Hours per time step of the last loaded run.
    charttechs : ChartTechs
        Display configuration.
    """
    scenarios: List[str]
    scenelec: pd.DataFrame
    demands: pd.Series
    hoursperperiod: int
    charttechs: ChartTechs = field(repr=False, default=None)

    @property
    def displayorder(self) -> List[int]:
        return self.charttechs.displayorder(list(self.scenelec.index))

    @property
    def techlabels(self) -> List[str]:
        return self.charttechs.techlabels(list(self.scenelec.index))

    @property
    def palette(self) -> list:
        return self.charttechs.colors(list(self.scenelec.index))

    def ordered(self) -> pd.DataFrame:
        """``scenelec`` rows in display order, labelled by technology label."""
        table = self.scenelec.iloc[self.displayorder]
        table.index = self.techlabels
        return table


def read_scenario_data(
    resultname: str,
    resultsfile: str,
    charttechs: Optional[ChartTechs] = None,
    show: bool = True,
) -> ScenarioData:
    """
    Load one run, draw its generation mix and return its totals.

    Prints the rounded transmission capacity matrix as a side effect.

    Raises
    ------
    KeyError
        If the run is not stored in *resultsfile*.
    """
    print(f"{resultname}: {resultsfile}")
    results = load_results(resultname, resultsfile=resultsfile)
    if results is None:
        raise KeyError(f"Run {resultname} not found in {resultsfile}")
    charttechs = charttechs or ChartTechs.default()

    analysis = analyze_results(results, charttechs)
    figures = analysis.chart(BARS, show=show)
    if not show:
        import matplotlib.pyplot as plt
        for fig in figures:
            plt.close(fig)
    print()
    print(analysis.tcapac.round().astype(int).to_string())

    sets = results.sets
    totalelec = pd.Series(
        [sum(results.Electricity[k, c].sum() for c in sets.classes(k)) for k in sets.TECH],
        index=pd.Index(sets.TECH, name="TECH"), dtype=float,
    )
    # annual energy (GWh): demand is GW per time step, each step lasts hoursperperiod hours
    totaldemand = float(results.params["demand"].sum()) * results.hoursperperiod

    return ScenarioData(
        totalelec=totalelec,
        totaldemand=totaldemand,
        hoursperperiod=results.hoursperperiod,
        displayorder=charttechs.displayorder(sets.TECH),
        techlabels=charttechs.techlabels(sets.TECH),
        palette=charttechs.colors(sets.TECH),
    )


def all_scenario_results(
    scenarios: Sequence[str],
    resultsnames: Sequence[str],
    resultsfile: str,
    charttechs: Optional[ChartTechs] = None,
    show: bool = True,
) -> ScenarioComparison:
    """
    Load and total every scenario.

    Parameters
    ----------
    scenarios : sequence of str
        Scenario labels.
    resultsnames : sequence of str
        Stored run name of each scenario.
    resultsfile : str
        Archive holding all runs.

    Returns
    -------
    ScenarioComparison
        Technologies missing from a run count as zero for that run.

    Raises
    ------
    ValueError
        If *scenarios* and *resultsnames* differ in length, or a scenario
        label is repeated.
    """
    if len(scenarios) != len(resultsnames):
        raise ValueError(
            f"Got {len(scenarios)} scenario labels for {len(resultsnames)} runs"
        )
    repeated = sorted({s for s in scenarios if list(scenarios).count(s) > 1})
    if repeated:
        raise ValueError(f"Scenario labels must be unique, repeated: {repeated}")
    charttechs = charttechs or ChartTechs.default()
    columns, demands = {}, {}
    hoursperperiod = None
    for scenario, resultname in zip(scenarios, resultsnames):
        print(f"\nLoading results: {scenario}...")
        data = read_scenario_data(resultname, resultsfile, charttechs, show=show)
        columns[scenario] = data.totalelec
        demands[scenario] = data.totaldemand
        hoursperperiod = data.hoursperperiod

    techs = []
    for series in columns.values():
        techs.extend(k for k in series.index if k not in techs)
    scenelec = pd.DataFrame(
        {s: series.reindex(techs, fill_value=0.0) for s, series in columns.items()},
        index=pd.Index(techs, name="TECH"),
    )
    return ScenarioComparison(
        scenarios=list(scenarios),
        scenelec=scenelec,
        demands=pd.Series(demands, name="demand"),
        hoursperperiod=hoursperperiod,
        charttechs=charttechs,
    )


def demand_share_table(comparison: ScenarioComparison) -> pd.DataFrame:
    """
    Share of demand (%) met by each technology in each scenario.

    Returns
    -------
    pd.DataFrame
        One row per technology label, top of the stack first; one column per
        scenario (column axis named ``'-'``); cells
        ``round(100 * electricity / demand, 1)``.
    """
    shares = (comparison.ordered() / comparison.demands * 100).round(1)
    shares = shares.iloc[::-1]
    shares.columns = pd.Index(comparison.scenarios, name="-")
    return shares


def chart_energymix_scenarios(
    scenarios: Sequence[str],
    resultsnames: Sequence[str],
    resultsfile: str,
    size: Tuple[float, float] = (9, 5.5),
    charttechs: Optional[ChartTechs] = None,
    show: bool = True,
    **options,
):
    """
    Compare the annual generation mix of several stored runs.

    Prints the demand share table and draws one stacked bar per scenario
    with a demand marker.

    Returns
    -------
    comparison : ScenarioComparison
    fig : matplotlib.figure.Figure
    """
    comparison = all_scenario_results(scenarios, resultsnames, resultsfile,
                                      charttechs, show=show)

    print("\nShare of demand (%):")
    print(demand_share_table(comparison).to_string())

    fig, ax = stacked_bar(
        list(comparison.scenarios),
        comparison.ordered().to_numpy().T / GWH_PER_TWH,
        labels=comparison.techlabels,
        colors=comparison.palette,
        figsize=size,
        **{"ylabel": "TWh/year", **options},
    )
    demand_markers(ax, comparison.demands.to_numpy() / GWH_PER_TWH)
    logger.info(f"Compared {len(comparison.scenarios)} scenarios from {resultsfile}")
    finish(fig, show)
    return comparison, fig
