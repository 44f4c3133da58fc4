# supergrid/__init__.py

"""
Supergrid results post-processing.

Reads the solved values of a capacity-expansion model of an
interconnected multi-region power system, stores them by run name, and
charts regional generation mixes, resource-class utilization, hourly
dispatch and cross-scenario comparisons.

Main Components
---------------
read_results : function
    Solved model -> immutable ``Results`` record.
save_results, load_results, list_results : functions
    Keyed results archive (``<group>/<runname>``).
analyze_results : function
    Aggregate tables plus a region-parameterized ``chart`` closure.
chart_energymix_scenarios : function
    Side-by-side generation mix of several stored runs.

Subpackages
-----------
interfaces : Sets, model interface, variable containers and the Results record
translation : Solved model -> Results
output : Results archive and CSV export
analysis : Aggregates and results charts
visualization : Chart configuration and plotting primitives

Example
-------
>>> from supergrid import read_results, save_results, load_results, analyze_results
>>> results = read_results(model, "optimal")
>>> save_results(results, "default", resultsfile="results.zip")
>>> annualelec, capac, tcapac, chart = analyze_results(load_results("default"))
>>> chart("BARS")
"""

from .interfaces import HourInfo, ModelInfo, ModelSets, Results
from .translation import read_results
from .output import ResultsArchive, list_results, load_results, save_results
from .analysis import Analysis, analyze_results
from .comparison import (
    all_scenario_results,
    chart_energymix_scenarios,
    demand_share_table,
    read_scenario_data,
)
from .options import auto_runname, default_options, merge_options
from .visualization import ChartTechs

__all__ = [
    # Interfaces
    'HourInfo',
    'ModelInfo',
    'ModelSets',
    'Results',
    # Extraction
    'read_results',
    # Storage
    'ResultsArchive',
    'list_results',
    'load_results',
    'save_results',
    # Analysis
    'Analysis',
    'analyze_results',
    # Scenario comparison
    'all_scenario_results',
    'chart_energymix_scenarios',
    'demand_share_table',
    'read_scenario_data',
    # Options and configuration
    'auto_runname',
    'default_options',
    'merge_options',
    'ChartTechs',
]

__version__ = '0.1.0'
