# supergrid/interfaces/__init__.py

"""
Typed interfaces between a solved model and the post-processing code.

The solved model is read through :class:`ModelInfo` and its variable
containers; results travel as the immutable :class:`Results` record.
"""

from .sets import HourInfo, ModelSets
from .variables import (
    VariableContainer,
    PyomoContainer,
    MappingContainer,
    SeriesContainer,
    as_container,
    solved_value,
)
from .model import ModelInfo, VARIABLE_NAMES, PARAMETER_NAMES
from .results import Results, INDEX_NAMES

__all__ = [
    # Sets
    'HourInfo',
    'ModelSets',
    # Variable access
    'VariableContainer',
    'PyomoContainer',
    'MappingContainer',
    'SeriesContainer',
    'as_container',
    'solved_value',
    # Model interface
    'ModelInfo',
    'VARIABLE_NAMES',
    'PARAMETER_NAMES',
    # Results record
    'Results',
    'INDEX_NAMES',
]
