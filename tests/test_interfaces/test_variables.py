# tests/test_interfaces/test_variables.py

"""
Tests for the variable containers.
"""

import numpy as np
import pandas as pd
import pytest
import pyomo.environ as pyo

from supergrid.interfaces import (
    MappingContainer,
    PyomoContainer,
    SeriesContainer,
    as_container,
    solved_value,
)


@pytest.fixture
def charging_values():
    return {
        ("NOR", "battery", 1): 0.5,
        ("NOR", "battery", 2): 0.0,
        ("FRA", "battery", 1): 1.5,
    }


class TestAsContainer:

    def test_pyomo_component(self, pyomo_model):
        assert isinstance(as_container(pyomo_model.Electricity), PyomoContainer)

    def test_mapping(self, charging_values):
        assert isinstance(as_container(charging_values), MappingContainer)

    def test_series_and_dataframe(self):
        assert isinstance(as_container(pd.Series([1.0], index=["a"])), SeriesContainer)
        df = pd.DataFrame([[1.0, 2.0]], index=["NOR"], columns=[1, 2])
        container = as_container(df)
        assert container["NOR", 2] == 2.0

    def test_container_passthrough(self, charging_values):
        container = MappingContainer(charging_values)
        assert as_container(container) is container

    def test_unsupported(self):
        with pytest.raises(TypeError, match="numpy"):
            as_container(np.zeros(3))
        with pytest.raises(TypeError, match="Unsupported"):
            as_container(3.0)


class TestPyomoContainer:

    def test_getitem_returns_float(self, pyomo_model):
        container = PyomoContainer(pyomo_model.Electricity)
        value = container["NOR", "wind", "a1", 1]
        assert isinstance(value, float)
        assert value == pytest.approx(1.1)

    def test_unknown_key_raises_keyerror(self, pyomo_model):
        container = PyomoContainer(pyomo_model.Electricity)
        with pytest.raises(KeyError):
            container["NOR", "wind", "x0", 1]

    def test_one_dimensional(self, pyomo_model):
        series = PyomoContainer(pyomo_model.Systemcost).to_series(["REGION"])
        assert series.index.name == "REGION"
        assert series.to_dict() == {"NOR": 100.0, "FRA": 200.0}

    def test_scalar_component(self):
        m = pyo.ConcreteModel()
        m.x = pyo.Var(initialize=4.0)
        container = PyomoContainer(m.x)
        assert container[None] == 4.0
        assert list(container.items()) == [(None, 4.0)]

    def test_uninitialized_value_raises(self):
        m = pyo.ConcreteModel()
        m.x = pyo.Var(["a"])
        with pytest.raises(ValueError):
            PyomoContainer(m.x)["a"]

    def test_params(self, pyomo_model):
        container = as_container(pyomo_model.demand)
        assert container["FRA", 3] == 14.0


class TestSelect:

    def test_partial_key(self, charging_values):
        container = MappingContainer(charging_values)
        assert container.select("NOR", "battery", None) == [
            (("NOR", "battery", 1), 0.5),
            (("NOR", "battery", 2), 0.0),
        ]

    def test_wildcards_everywhere(self, charging_values):
        assert len(MappingContainer(charging_values).select(None, None, None)) == 3

    def test_wrong_arity_matches_nothing(self, charging_values):
        assert MappingContainer(charging_values).select("NOR", None) == []

    def test_pyomo_select(self, pyomo_model):
        matches = PyomoContainer(pyomo_model.Capacity).select("FRA", "wind", None)
        assert [key for key, _ in matches] == [("FRA", "wind", "a1"), ("FRA", "wind", "a2")]


class TestToSeries:

    def test_multiindex_names(self, charging_values):
        series = MappingContainer(charging_values).to_series(["REGION", "TECH", "HOUR"])
        assert list(series.index.names) == ["REGION", "TECH", "HOUR"]
        assert series.loc[("FRA", "battery", 1)] == 1.5

    def test_series_container_renames(self):
        series = pd.Series(
            [1.0, 2.0], index=pd.MultiIndex.from_tuples([("a", 1), ("b", 2)])
        )
        renamed = SeriesContainer(series).to_series(["REGION", "HOUR"])
        assert list(renamed.index.names) == ["REGION", "HOUR"]

    def test_len_and_iter(self, charging_values):
        container = MappingContainer(charging_values)
        assert len(container) == 3
        assert list(container) == list(charging_values)


def test_solved_value_of_number_and_var(pyomo_model):
    assert solved_value(2) == 2.0
    assert solved_value(pyomo_model.Systemcost["FRA"]) == 200.0
