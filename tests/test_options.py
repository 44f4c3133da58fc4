"""
tests/test_options.py

Tests for option defaults and canonical run names.
"""
import pytest

from supergrid.options import auto_runname, default_options, merge_options


def test_defaults_are_fresh_copies():
    options = default_options()
    options["disabletechs"].append("wind")
    assert default_options()["disabletechs"] == []


def test_default_values():
    options = default_options()
    assert options["regionset"] == "Eurasia21"
    assert options["carbontax"] == 0.0
    assert options["hours"] == 1
    assert options["globalnuclearlimit"] == float("inf")


def test_merge_overrides():
    options = merge_options({"carbontax": 20.0}, hours=3)
    assert options["carbontax"] == 20.0
    assert options["hours"] == 3
    assert options["regionset"] == "Eurasia21"


def test_keyword_overrides_win():
    assert merge_options({"hours": 2}, hours=5)["hours"] == 5


def test_merge_unknown_option():
    with pytest.raises(KeyError, match="Unknown option 'carbonprice'"):
        merge_options(carbonprice=10)


def test_runname_of_defaults():
    assert auto_runname(merge_options()) == "default"


def test_runname_in_defaults_order():
    options = merge_options(hours=3, carbontax=50.0)
    assert auto_runname(options) == "carbontax=50.0, hours=3"


def test_runname_ignores_bookkeeping():
    options = merge_options(solver="gurobi", threads=8, resultsfile="other.zip")
    assert auto_runname(options) == "default"


def test_runname_is_deterministic():
    a = merge_options(solarwindarea=2, nuclearallowed=False)
    b = merge_options(nuclearallowed=False, solarwindarea=2)
    assert auto_runname(a) == auto_runname(b) == "nuclearallowed=False, solarwindarea=2"
