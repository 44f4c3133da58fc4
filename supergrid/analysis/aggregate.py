# supergrid/analysis/aggregate.py

"""
Aggregate tables recomputed from a Results record.

All functions are pure: they read a :class:`Results` and return new
pandas or numpy objects. Array axes follow the model sets in model order:
``(HOUR, TECH, REGION)`` for hourly electricity, ``(HOUR, storage TECH,
REGION)`` for storage levels.
"""

from typing import List, Sequence

import numpy as np
import pandas as pd

from ..constants import BATTERY, EUR_PER_MWH_PER_MEUR_PER_GWH, HYDRO, TOTAL
from ..interfaces import Results
from ..visualization.base import ChartTechs


def _lookup(series: pd.Series) -> dict:
    """Element lookup table of a parameter or variable Series."""
    return series.to_dict()


def capacity_table(results: Results) -> pd.DataFrame:
    """
    Installed capacity per technology and region, summed over classes.

    Returns
    -------
    pd.DataFrame
        Index TECH, columns ``REGION + ['TOTAL']`` (GW).
    """
    sets = results.sets
    capacity = results.Capacity
    matrix = np.array(
        [[sum(capacity[r, k, c] for c in sets.classes(k)) for r in sets.REGION]
         for k in sets.TECH],
        dtype=float,
    ).reshape(len(sets.TECH), len(sets.REGION))
    table = pd.DataFrame(matrix, index=pd.Index(sets.TECH, name="TECH"),
                         columns=pd.Index(sets.REGION, name="REGION"))
    table[TOTAL] = matrix.sum(axis=1)
    return table


def hourly_electricity(results: Results) -> np.ndarray:
    """
    Electricity per time step, technology and region, summed over classes.

    Returns
    -------
    ndarray
        Shape ``(len(HOUR), len(TECH), len(REGION))`` (GWh per step).
    """
    sets = results.sets
    elec = np.zeros((len(sets.HOUR), len(sets.TECH), len(sets.REGION)))
    for i, k in enumerate(sets.TECH):
        for c in sets.classes(k):
            elec[:, i, :] += results.Electricity[k, c]
    return elec


def annual_electricity(results: Results, hourly: np.ndarray = None) -> pd.DataFrame:
    """
    Annual electricity per technology and region.

    Returns
    -------
    pd.DataFrame
        Index TECH, columns ``REGION + ['TOTAL']`` (GWh/year).
    """
    sets = results.sets
    if hourly is None:
        hourly = hourly_electricity(results)
    annual = hourly.sum(axis=0)
    table = pd.DataFrame(annual, index=pd.Index(sets.TECH, name="TECH"),
                         columns=pd.Index(sets.REGION, name="REGION"))
    table[TOTAL] = annual.sum(axis=1)
    return table


def total_electricity(results: Results, hourly: np.ndarray = None) -> pd.Series:
    """Per-technology sum over all time steps and regions (cross-check of TOTAL)."""
    if hourly is None:
        hourly = hourly_electricity(results)
    return pd.Series(hourly.sum(axis=(0, 2)),
                     index=pd.Index(results.sets.TECH, name="TECH"))


def storage_levels(results: Results) -> np.ndarray:
    """
    Storage level per time step, storage technology and region.

    Returns
    -------
    ndarray
        Shape ``(len(HOUR), len(storagetechs), len(REGION))`` (TWh).
    """
    sets = results.sets
    storagetechs = sets.storagetechs
    level = np.zeros((len(sets.HOUR), len(storagetechs), len(sets.REGION)))
    for i, k in enumerate(storagetechs):
        for c in sets.storageclasses(k):
            level[:, i, :] += results.StorageLevel[k, c]
    return level


def transmission_capacity(results: Results) -> pd.DataFrame:
    """
    Transmission capacity from each region (rows) to each region (columns).

    Directions are kept separate; pairs without a link are zero.
    """
    regions = results.sets.REGION
    tcap = _lookup(results.params["transmissioncapacity"])
    matrix = [[tcap.get((r1, r2), 0.0) for r2 in regions] for r1 in regions]
    return pd.DataFrame(matrix, index=pd.Index(regions, name="REGION"),
                        columns=pd.Index(regions, name="REGION_TO"), dtype=float)


def charging_matrix(results: Results, tech: str = BATTERY) -> np.ndarray:
    """
    Charging of *tech* per time step and region, shape ``(len(HOUR), len(REGION))``.

    Zeros when *tech* is not a storage technology of the model.
    """
    sets = results.sets
    if tech not in sets.storagetechs:
        return np.zeros((len(sets.HOUR), len(sets.REGION)))
    charging = _lookup(results.Charging)
    return np.array(
        [[charging[r, tech, h] for r in sets.REGION] for h in sets.HOUR], dtype=float
    ).reshape(len(sets.HOUR), len(sets.REGION))


def demand_matrix(results: Results) -> np.ndarray:
    """Demand per region and time step, shape ``(len(REGION), len(HOUR))`` (GW)."""
    sets = results.sets
    demand = _lookup(results.params["demand"])
    return np.array(
        [[demand[r, h] for h in sets.HOUR] for r in sets.REGION], dtype=float
    ).reshape(len(sets.REGION), len(sets.HOUR))


def existing_generation(results: Results, charttechs: ChartTechs) -> np.ndarray:
    """
    Annual output per region of the pre-existing class of one technology.

    The (technology, class) pair comes from the chart configuration
    (``hydro``/``x0`` by default). Zeros if the model has no such block.
    """
    key = (charttechs.existingtech, charttechs.existingclass)
    if key not in results.Electricity:
        return np.zeros(len(results.sets.REGION))
    return results.Electricity[key].sum(axis=0)


def system_cost_per_mwh(
    results: Results,
    annualelec: pd.DataFrame,
    existing: np.ndarray,
) -> pd.Series:
    """
    Levelized system cost per region and in total (€/MWh).

    Cost is divided by generation net of the pre-existing generation:
    ``cost / (total generation - existing generation) * 1000``.

    Returns
    -------
    pd.Series
        Index ``REGION + ['TOTAL']``.
    """
    regions = list(results.sets.REGION)
    cost = results.Systemcost.reindex(regions).to_numpy(dtype=float)
    generation = annualelec[regions].sum(axis=0).to_numpy()
    regcost = cost / (generation - existing) * EUR_PER_MWH_PER_MEUR_PER_GWH
    totcost = (cost.sum() / (annualelec[TOTAL].sum() - existing.sum())
               * EUR_PER_MWH_PER_MEUR_PER_GWH)
    return pd.Series(np.append(regcost, totcost), index=regions + [TOTAL],
                     name="system cost (€/MWh)")


def group_columns(table: pd.DataFrame, charttechs: ChartTechs) -> pd.DataFrame:
    """
    Sum a per-region table over the configured region blocks.

    Returns
    -------
    pd.DataFrame
        Same index, columns ``[group names..., 'TOTAL']``.
    """
    regions = [c for c in table.columns if c != TOTAL]
    grouped = {
        g.name: table[[regions[i] for i in g.indexes]].sum(axis=1)
        for g in charttechs.regiongroups
    }
    grouped[TOTAL] = table[regions].sum(axis=1)
    return pd.DataFrame(grouped, index=table.index)


def grouped_demand(results: Results, charttechs: ChartTechs) -> pd.Series:
    """Annual demand (GWh) of every region block and in total."""
    demand = demand_matrix(results) * results.hoursperperiod
    values = {g.name: demand[list(g.indexes), :].sum() for g in charttechs.regiongroups}
    values[TOTAL] = demand.sum()
    return pd.Series(values, name="demand")


def grouped_system_cost(results: Results, charttechs: ChartTechs) -> pd.Series:
    """
    System cost per MWh of demand for every region block and in total (€/MWh).
    """
    cost = results.Systemcost.reindex(list(results.sets.REGION)).to_numpy(dtype=float)
    costs = {g.name: cost[list(g.indexes)].sum() for g in charttechs.regiongroups}
    costs[TOTAL] = cost.sum()
    # per MWh of demand energy (GWh), not of demand summed over time steps
    demand = grouped_demand(results, charttechs)
    return (pd.Series(costs) / demand * EUR_PER_MWH_PER_MEUR_PER_GWH).rename(
        "system cost (€/MWh)"
    )


def resolve_regions(selector: str, regions: Sequence[str], charttechs: ChartTechs) -> List[int]:
    """
    Positions in *regions* selected by a region selector.

    Total aliases select every region, group aliases select their fixed
    block, anything else must name a region exactly.

    Raises
    ------
    ValueError
        If *selector* is neither an alias nor a region.
    """
    regions = list(regions)
    if selector in charttechs.totalaliases:
        return list(range(len(regions)))
    group = charttechs.group_for(selector)
    if group is not None:
        if group.stop > len(regions):
            raise ValueError(
                f"Region group {group.name} needs {group.stop} regions, "
                f"model has {len(regions)}."
            )
        return list(group.indexes)
    if selector not in regions:
        raise ValueError(f"Region {selector} not in {regions}.")
    return [regions.index(selector)]


def charted_classes(results: Results, tech: str, charttechs: ChartTechs) -> tuple:
    """Classes of *tech* shown in utilization charts."""
    classes = results.sets.classes(tech)
    if tech in charttechs.halfclasstechs:
        classes = classes[:len(classes) // 2]
    return classes


def class_utilization(
    results: Results,
    tech: str,
    regs: Sequence[int],
    charttechs: ChartTechs,
) -> pd.DataFrame:
    """
    Used capacity and remaining headroom of each resource class of *tech*.

    Hydro limits come from ``hydrocapacity[region, class]``, all others
    from ``classlimits[region, tech, class]``; both summed over the selected
    regions.

    Returns
    -------
    pd.DataFrame
        Index CLASS, columns ``used``, ``limit``, ``headroom`` (GW).
    """
    regions = [results.sets.REGION[i] for i in regs]
    hydro = tech == HYDRO
    limits = _lookup(results.params["hydrocapacity" if hydro else "classlimits"])

    classes = charted_classes(results, tech, charttechs)
    used = [sum(results.Capacity[r, tech, c] for r in regions) for c in classes]
    lims = [sum(limits[(r, c) if hydro else (r, tech, c)] for r in regions)
            for c in classes]
    table = pd.DataFrame({"used": used, "limit": lims},
                         index=pd.Index(classes, name="CLASS"), dtype=float)
    table["headroom"] = table["limit"] - table["used"]
    return table
