"""
tests/test_cli.py

Tests for the command line entry point.
"""
import pytest

from supergrid.__main__ import build_parser, main
from supergrid.output import save_results


@pytest.fixture
def stored(small_results, results_file):
    save_results(small_results, "default", results_file)
    save_results(small_results, "ctax=50", results_file, group="carbontax")
    return results_file


def test_list(stored, capsys):
    assert main(["list", stored]) == 0
    assert capsys.readouterr().out.split() == ["default", "carbontax/ctax=50"]


def test_list_group(stored, capsys):
    assert main(["list", stored, "--group", "carbontax"]) == 0
    assert capsys.readouterr().out.split() == ["carbontax/ctax=50"]


def test_chart_missing_run(stored):
    assert main(["chart", stored, "nosuchrun"]) == 1


def test_chart_exports_tables(stored, tmp_path, monkeypatch):
    import matplotlib.pyplot as plt
    monkeypatch.setattr(plt, "show", lambda *args, **kwargs: None)
    export = tmp_path / "tables"
    assert main(["chart", stored, "default", "--region", "NOR", "--export", str(export)]) == 0
    assert (export / "annual_electricity.csv").exists()


def test_scenario_pairs():
    args = build_parser().parse_args(["compare", "results.zip", "base=default", "wind=solarwindarea=2"])
    assert args.scenarios == [("base", "default"), ("wind", "solarwindarea=2")]


def test_bad_scenario_pair():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["compare", "results.zip", "default"])
