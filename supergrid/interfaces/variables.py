# supergrid/interfaces/variables.py

"""
Read-only access to solved decision variables and parameters.

A model exposes its variables as containers indexed by subsets of
(region, technology, class, hour). This module wraps the supported
backings behind one small interface:

* ``container[key]`` returns the solved value of one element as ``float``
  and raises ``KeyError`` for keys outside the container's index set.
* ``container.items()`` iterates over ``(key, value)`` pairs.
* ``container.select(*partial)`` returns the elements matching a partial
  key, where ``None`` matches anything.

Backends: pyomo components (:class:`PyomoContainer`), mappings of numbers
or pyomo-valued objects (:class:`MappingContainer`) and pandas Series
(:class:`SeriesContainer`). :func:`as_container` picks one.
"""

from abc import ABC, abstractmethod
from typing import Any, Hashable, Iterator, List, Mapping, Optional, Sequence, Tuple

import numpy as np
import pandas as pd
import pyomo.environ as pyo


def solved_value(obj: Any) -> float:
    """Numeric value of a number or of a solved pyomo expression."""
    return float(pyo.value(obj))


def _as_tuple(key: Hashable) -> Tuple:
    return key if isinstance(key, tuple) else (key,)


class VariableContainer(ABC):
    """
    Abstract read-only container of solved values.
    """

    @abstractmethod
    def __getitem__(self, key: Hashable) -> float:
        ...

    @abstractmethod
    def keys(self) -> Iterator[Hashable]:
        ...

    def items(self) -> Iterator[Tuple[Hashable, float]]:
        for key in self.keys():
            yield key, self[key]

    def __iter__(self):
        return self.keys()

    def __len__(self) -> int:
        return sum(1 for _ in self.keys())

    def select(self, *partial: Optional[Hashable]) -> List[Tuple[Hashable, float]]:
        """
        Return the elements matching a partial key.

        Parameters
        ----------
        *partial
            One entry per index dimension; ``None`` is a wildcard.

        Returns
        -------
        list of (key, float)
            Matching elements in container order.

        Examples
        --------
        >>> charging.select('NOR', 'battery', None)
        [(('NOR', 'battery', 1), 0.5), (('NOR', 'battery', 2), 0.0)]
        """
        matches = []
        for key in self.keys():
            parts = _as_tuple(key)
            if len(parts) != len(partial):
                continue
            if all(p is None or p == k for p, k in zip(partial, parts)):
                matches.append((key, self[key]))
        return matches

    def to_series(self, names: Optional[Sequence[str]] = None) -> pd.Series:
        """
        Materialize every element into a Series.

        Multi-dimensional keys become a MultiIndex, named by *names* when
        given.
        """
        keys, values = [], []
        for key, value in self.items():
            keys.append(key)
            values.append(value)
        if keys and isinstance(keys[0], tuple):
            index = pd.MultiIndex.from_tuples(keys, names=names)
        else:
            index = pd.Index(keys, name=names[0] if names else None)
        return pd.Series(values, index=index, dtype=float)


class PyomoContainer(VariableContainer):
    """
    Container backed by a scalar or indexed pyomo component.
    """

    def __init__(self, component):
        self.component = component

    def __getitem__(self, key):
        if not self.component.is_indexed():
            if key is not None:
                raise KeyError(f"{self.component.name} is not indexed")
            return solved_value(self.component)
        # indexing a pyomo component with an unknown key raises KeyError
        return solved_value(self.component[key])

    def keys(self):
        if not self.component.is_indexed():
            return iter([None])
        return iter(self.component.keys())

    def items(self):
        if not self.component.is_indexed():
            yield None, solved_value(self.component)
            return
        for key, data in self.component.items():
            yield key, solved_value(data)


class MappingContainer(VariableContainer):
    """
    Container backed by a mapping of keys to numbers or pyomo objects.
    """

    def __init__(self, data: Mapping):
        self.data = data

    def __getitem__(self, key):
        return solved_value(self.data[key])

    def keys(self):
        return iter(self.data.keys())


class SeriesContainer(VariableContainer):
    """
    Container backed by a pandas Series (MultiIndex for several dimensions).
    """

    def __init__(self, series: pd.Series):
        self.series = series

    def __getitem__(self, key):
        if key not in self.series.index:
            raise KeyError(key)
        return float(self.series.loc[key])

    def keys(self):
        return iter(self.series.index)

    def items(self):
        return ((k, float(v)) for k, v in self.series.items())

    def to_series(self, names=None):
        series = self.series.astype(float)
        if names is not None:
            series = series.rename_axis(list(names) if series.index.nlevels > 1 else names[0])
        return series


def _dataframe_to_series(df: pd.DataFrame) -> pd.Series:
    # a 2-D table keeps its (row, column) lookup order
    return df.stack()


def as_container(obj: Any) -> VariableContainer:
    """
    Wrap a model variable or parameter in the matching container.

    Parameters
    ----------
    obj : pyomo component, mapping, pandas Series/DataFrame or container
        Solved variable or parameter values.

    Returns
    -------
    VariableContainer

    Raises
    ------
    TypeError
        If *obj* is none of the supported backings.
    """
    if isinstance(obj, VariableContainer):
        return obj
    if isinstance(obj, pd.DataFrame):
        return SeriesContainer(_dataframe_to_series(obj))
    if isinstance(obj, pd.Series):
        return SeriesContainer(obj)
    if isinstance(obj, Mapping):
        return MappingContainer(obj)
    if hasattr(obj, "is_indexed"):
        return PyomoContainer(obj)
    if isinstance(obj, np.ndarray):
        raise TypeError(
            "Unlabelled numpy arrays are not supported; wrap them in a "
            "pandas Series or DataFrame indexed by set members"
        )
    raise TypeError(f"Unsupported variable container: {type(obj).__name__}")
