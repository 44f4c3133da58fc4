"""
tests/test_comparison.py

Tests for the generation mix comparison across stored runs.
"""
import numpy as np
import pandas as pd
import pytest
from matplotlib.figure import Figure

from supergrid.comparison import (
    all_scenario_results,
    chart_energymix_scenarios,
    demand_share_table,
    read_scenario_data,
)
from supergrid.interfaces import ModelSets
from supergrid.output import save_results


@pytest.fixture
def mix_sets():
    return ModelSets(
        REGION=["NOR", "FRA"],
        TECH=["wind", "gasGT"],
        HOUR=[1, 2],
        CLASS={"wind": ["a1"], "gasGT": ["_"]},
        techtype={"wind": "renewable", "gasGT": "fossil"},
    )


def _electricity(sets, wind, gas):
    return {
        (r, k, c, h): wind if k == "wind" else gas
        for r in sets.REGION for k in sets.TECH for c in sets.CLASS[k] for h in sets.HOUR
    }


@pytest.fixture
def scenario_file(make_results, mix_sets, results_file):
    """Archive with a 100 TWh baseline run and a 120 TWh high wind run."""
    baseline = make_results(mix_sets, overrides={"Electricity": _electricity(mix_sets, 10000.0, 15000.0)})
    highwind = make_results(mix_sets, hoursperperiod=2,
                            overrides={"Electricity": _electricity(mix_sets, 22500.0, 7500.0)})
    save_results(baseline, "default", results_file)
    save_results(highwind, "solarwindarea=2", results_file)
    return results_file


# Synthetic demand: NOR 11 + 12, FRA 12 + 13 per time step
DEMAND = 48.0


def test_read_scenario_data(scenario_file, capsys):
    data = read_scenario_data("default", scenario_file, show=False)
    assert data.totalelec["wind"] == 40000.0
    assert data.totalelec["gasGT"] == 60000.0
    assert data.totaldemand == DEMAND
    assert data.hoursperperiod == 1
    assert data.techlabels == ["onshore wind", "gas GT"]
    out = capsys.readouterr().out
    assert f"default: {scenario_file}" in out


def test_read_missing_run(scenario_file):
    with pytest.raises(KeyError, match="nosuchrun"):
        read_scenario_data("nosuchrun", scenario_file, show=False)


def test_all_scenario_results(scenario_file):
    comparison = all_scenario_results(
        ["baseline", "highwind"], ["default", "solarwindarea=2"], scenario_file, show=False
    )
    assert comparison.scenarios == ["baseline", "highwind"]
    assert list(comparison.scenelec.columns) == ["baseline", "highwind"]
    assert comparison.scenelec.shape == (2, 2)
    assert comparison.scenelec.loc["wind", "highwind"] == 90000.0
    assert comparison.demands["highwind"] == 2 * DEMAND
    assert comparison.hoursperperiod == 2


def test_length_mismatch(scenario_file):
    with pytest.raises(ValueError, match="2 scenario labels for 1 runs"):
        all_scenario_results(["a", "b"], ["default"], scenario_file, show=False)


def test_repeated_labels(scenario_file):
    with pytest.raises(ValueError, match=r"repeated: \['a'\]"):
        all_scenario_results(["a", "a"], ["default", "solarwindarea=2"], scenario_file,
                             show=False)


def test_demand_share_table(scenario_file):
    comparison = all_scenario_results(
        ["baseline", "highwind"], ["default", "solarwindarea=2"], scenario_file, show=False
    )
    shares = demand_share_table(comparison)
    # top of the stack first
    assert list(shares.index) == ["gas GT", "onshore wind"]
    assert shares.columns.name == "-"
    assert list(shares.columns) == ["baseline", "highwind"]
    assert shares.loc["onshore wind", "baseline"] == np.round(100 * 40000.0 / DEMAND, 1)
    assert shares.loc["gas GT", "highwind"] == np.round(100 * 30000.0 / (2 * DEMAND), 1)


def test_chart_energymix_scenarios(scenario_file, capsys):
    comparison, fig = chart_energymix_scenarios(
        ["baseline", "highwind"], ["default", "solarwindarea=2"], scenario_file, show=False
    )
    assert isinstance(fig, Figure)
    assert "Share of demand (%)" in capsys.readouterr().out
    totals = comparison.scenelec.sum(axis=0)
    pd.testing.assert_series_equal(
        totals, pd.Series({"baseline": 100000.0, "highwind": 120000.0}), check_names=False
    )


def test_read_scenario_data_closes_figures(scenario_file):
    import matplotlib.pyplot as plt
    plt.close("all")
    read_scenario_data("default", scenario_file, show=False)
    read_scenario_data("solarwindarea=2", scenario_file, show=False)
    assert plt.get_fignums() == []


def test_chart_energymix_ylabel_override(scenario_file):
    _, fig = chart_energymix_scenarios(
        ["baseline", "highwind"], ["default", "solarwindarea=2"], scenario_file,
        show=False, ylabel="TWh",
    )
    assert fig.axes[0].get_ylabel() == "TWh"
