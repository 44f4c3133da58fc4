# tests/conftest.py

"""
Shared fixtures for results post-processing tests.

Provides:
- Small two-region model sets with wind, hydro, gas and battery
- Deterministic solved values for any set of model sets
- The same values as a pyomo ConcreteModel (initialized, never solved)
- Factories for ModelInfo and Results records
"""

import matplotlib
matplotlib.use("Agg")

import pytest
import pyomo.environ as pyo

from supergrid.interfaces import HourInfo, ModelInfo, ModelSets
from supergrid.translation import read_results


# =============================================================================
# Value generation
# =============================================================================

def synthetic_values(sets: ModelSets):
    """
    Deterministic parameter and variable values indexed over *sets*.

    Electricity[r, k, c, h] = 1 + tech index + class index
                              + 0.5 * region index + 0.1 * h
    """
    params = {
        "demand": {
            (r, h): 10.0 + i + h for i, r in enumerate(sets.REGION) for h in sets.HOUR
        },
        "classlimits": {
            (r, k, c): 50.0
            for r in sets.REGION for k in sets.TECH if k != "hydro"
            for c in sets.CLASS[k]
        },
        "hydrocapacity": {
            (r, c): 20.0 for r in sets.REGION for c in sets.CLASS.get("hydro", ())
        },
        "transmissioncapacity": {
            (r1, r2): 0.0 if r1 == r2 else 5.0 + i - j
            for i, r1 in enumerate(sets.REGION) for j, r2 in enumerate(sets.REGION)
        },
    }
    variables = {
        "Systemcost": {r: 100.0 * (i + 1) for i, r in enumerate(sets.REGION)},
        "CO2emissions": {r: 1.0 + i for i, r in enumerate(sets.REGION)},
        "FuelUse": {(r, f): 2.0 for r in sets.REGION for f in sets.FUEL},
        "Electricity": {
            (r, k, c, h): 1.0 + t + ci + 0.5 * i + 0.1 * h
            for i, r in enumerate(sets.REGION)
            for t, k in enumerate(sets.TECH)
            for ci, c in enumerate(sets.CLASS[k])
            for h in sets.HOUR
        },
        "Charging": {
            (r, k, h): 0.5 * h
            for r in sets.REGION for k in sets.storagetechs for h in sets.HOUR
        },
        "StorageLevel": {
            (r, k, c, h): 0.01 * h
            for r in sets.REGION for k in sets.storagetechs
            for c in sets.STORAGECLASS[k] for h in sets.HOUR
        },
        "Transmission": {
            (r1, r2, h): 0.0 if r1 == r2 else 1.0
            for r1 in sets.REGION for r2 in sets.REGION for h in sets.HOUR
        },
        "Capacity": {
            (r, k, c): 10.0 + t + ci
            for r in sets.REGION
            for t, k in enumerate(sets.TECH)
            for ci, c in enumerate(sets.CLASS[k])
        },
    }
    return params, variables


def build_pyomo_model(sets: ModelSets):
    """ConcreteModel whose variables carry the synthetic solved values."""
    params, variables = synthetic_values(sets)
    m = pyo.ConcreteModel()
    for name, values in params.items():
        setattr(m, name, pyo.Param(list(values), initialize=values))
    for name, values in variables.items():
        setattr(m, name, pyo.Var(list(values), initialize=values))
    return m


# =============================================================================
# Set fixtures
# =============================================================================

@pytest.fixture
def small_sets():
    """
    Two regions, three time steps.

    TECH: wind (2 classes), hydro (x0 existing, x1), gasGT, battery (storage)
    """
    return ModelSets(
        REGION=["NOR", "FRA"],
        TECH=["wind", "hydro", "gasGT", "battery"],
        HOUR=[1, 2, 3],
        CLASS={"wind": ["a1", "a2"], "hydro": ["x0", "x1"],
               "gasGT": ["_"], "battery": ["_"]},
        techtype={"wind": "renewable", "hydro": "renewable",
                  "gasGT": "fossil", "battery": "storage"},
        STORAGECLASS={"battery": ["_"]},
        FUEL=["gas"],
    )


@pytest.fixture
def eurasia_sets():
    """Twenty-one regions (the layout of the fixed region groups)."""
    return ModelSets(
        REGION=[f"R{i:02d}" for i in range(1, 22)],
        TECH=["wind", "hydro", "battery"],
        HOUR=[1, 2],
        CLASS={"wind": ["a1"], "hydro": ["x0"], "battery": ["_"]},
        techtype={"wind": "renewable", "hydro": "renewable", "battery": "storage"},
        STORAGECLASS={"battery": ["_"]},
        FUEL=["gas"],
    )


# =============================================================================
# Model and results fixtures
# =============================================================================

@pytest.fixture
def make_model():
    """Factory: ModelInfo with mapping-backed variables for given sets."""
    def _make(sets, hoursperperiod=1, options=None, overrides=None):
        params, variables = synthetic_values(sets)
        variables.update(overrides or {})
        return ModelInfo(
            sets=sets,
            params=params,
            vars=variables,
            options=dict(options or {}),
            hourinfo=HourInfo(hoursperperiod=hoursperperiod),
        )
    return _make


@pytest.fixture
def pyomo_model(small_sets):
    """Initialized pyomo model over the small sets."""
    return build_pyomo_model(small_sets)


@pytest.fixture
def make_results(make_model):
    """Factory: Results read from a synthetic model."""
    def _make(sets, hoursperperiod=1, options=None, overrides=None, status="optimal"):
        return read_results(make_model(sets, hoursperperiod, options, overrides), status)
    return _make


@pytest.fixture
def small_results(make_results, small_sets):
    """Results of the small model, 2 hours per time step."""
    return make_results(small_sets, hoursperperiod=2, options={"carbontax": 50.0})


@pytest.fixture
def results_file(tmp_path):
    """Path of a (not yet created) results archive."""
    return str(tmp_path / "results.zip")


@pytest.fixture(autouse=True)
def close_figures():
    """Close every matplotlib figure a test leaves open."""
    yield
    import matplotlib.pyplot as plt
    plt.close("all")
