"""
Persistence of results records and export of analysis tables.
"""
from .store import (
    ResultsArchive,
    list_results,
    load_results,
    results_key,
    save_results,
)
from .writer import OutputWriter

__all__ = [
    'ResultsArchive',
    'list_results',
    'load_results',
    'results_key',
    'save_results',
    'OutputWriter',
]
