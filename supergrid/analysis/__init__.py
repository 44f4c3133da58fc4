# supergrid/analysis/__init__.py

"""
Aggregates and charts of stored runs.
"""

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
from .analyzer import Analysis, analyze_results

__all__ = [
    'Analysis',
    'analyze_results',
    'annual_electricity',
    'capacity_table',
    'charging_matrix',
    'class_utilization',
    'demand_matrix',
    'existing_generation',
    'group_columns',
    'grouped_demand',
    'grouped_system_cost',
    'hourly_electricity',
    'resolve_regions',
    'storage_levels',
    'system_cost_per_mwh',
    'total_electricity',
    'transmission_capacity',
]
