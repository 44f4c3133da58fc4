# supergrid/interfaces/sets.py

"""
Index sets and time metadata of a solved model.

Sets are data, not types: the order of ``REGION`` and ``HOUR`` is used as
is when charting, the order of ``TECH`` drives aggregation tables and is
re-sorted by the chart display order at plot time. Class sets belong to a
technology, so every class lookup goes through the owning technology.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Tuple

from ..constants import STORAGE


def _freeze_classes(classes: Mapping[str, Iterable[str]]) -> Mapping[str, Tuple[str, ...]]:
    return MappingProxyType({k: tuple(v) for k, v in dict(classes).items()})


@dataclass(frozen=True)
class HourInfo:
    """
    Time-discretization metadata.

    Attributes
    ----------
    hoursperperiod : int
        Number of real hours represented by one model time step.
    hourindexes : tuple of int
        Hours of the year selected as time steps (empty if not recorded).
    """

    hoursperperiod: int = 1
    hourindexes: Tuple[int, ...] = ()

    def __post_init__(self):
        if self.hoursperperiod <= 0:
            raise ValueError(
                f"hoursperperiod must be positive, got {self.hoursperperiod}"
            )
        object.__setattr__(self, "hourindexes", tuple(self.hourindexes))


@dataclass(frozen=True)
class ModelSets:
    """
    Named index sets of the capacity-expansion model.

    Attributes
    ----------
    REGION : tuple of str
        Regions in model order.
    TECH : tuple of str
        Generation and storage technologies.
    HOUR : tuple of int
        Time steps of the dispatch horizon.
    CLASS : mapping of str to tuple of str
        Resource classes of each technology.
    techtype : mapping of str to str
        Technology type, ``'storage'`` for storage technologies.
    STORAGECLASS : mapping of str to tuple of str
        Storage classes of each storage technology.
    FUEL : tuple of str
        Fuels tracked by the ``FuelUse`` variable.

    Examples
    --------
    >>> sets = ModelSets(
    ...     REGION=['NOR', 'FRA'], TECH=['wind', 'battery'], HOUR=[1, 2],
    ...     CLASS={'wind': ['a1', 'a2'], 'battery': ['_']},
    ...     techtype={'wind': 'renewable', 'battery': 'storage'},
    ...     STORAGECLASS={'battery': ['_']},
    ... )
    >>> sets.storagetechs
    ('battery',)
    """

    REGION: Tuple[str, ...]
    TECH: Tuple[str, ...]
    HOUR: Tuple[Any, ...]
    CLASS: Mapping[str, Tuple[str, ...]]
    techtype: Mapping[str, str] = field(default_factory=dict)
    STORAGECLASS: Mapping[str, Tuple[str, ...]] = field(default_factory=dict)
    FUEL: Tuple[str, ...] = ()

    def __post_init__(self):
        for name in ("REGION", "TECH", "HOUR", "FUEL"):
            object.__setattr__(self, name, tuple(getattr(self, name)))
        object.__setattr__(self, "CLASS", _freeze_classes(self.CLASS))
        object.__setattr__(self, "STORAGECLASS", _freeze_classes(self.STORAGECLASS))
        object.__setattr__(self, "techtype", MappingProxyType(dict(self.techtype)))

    def __getstate__(self):
        # mappingproxy cannot be pickled
        state = dict(self.__dict__)
        for name in ("CLASS", "STORAGECLASS", "techtype"):
            state[name] = dict(state[name])
        return state

    def __setstate__(self, state):
        for key, value in state.items():
            object.__setattr__(self, key, value)
        self.__post_init__()

    @property
    def storagetechs(self) -> Tuple[str, ...]:
        """Technologies of type ``'storage'``, in TECH order."""
        return tuple(k for k in self.TECH if self.techtype.get(k) == STORAGE)

    def classes(self, tech: str) -> Tuple[str, ...]:
        """Resource classes of *tech*."""
        try:
            return self.CLASS[tech]
        except KeyError:
            raise KeyError(f"Technology '{tech}' has no CLASS set") from None

    def storageclasses(self, tech: str) -> Tuple[str, ...]:
        """Storage classes of storage technology *tech*."""
        try:
            return self.STORAGECLASS[tech]
        except KeyError:
            raise KeyError(f"Technology '{tech}' has no STORAGECLASS set") from None

    def region_index(self, region: str) -> int:
        """Position of *region* in ``REGION``."""
        try:
            return self.REGION.index(region)
        except ValueError:
            raise ValueError(f"Region {region} not in {list(self.REGION)}.") from None

    def to_dict(self) -> dict:
        """Plain-container copy of the sets."""
        return {
            "REGION": list(self.REGION),
            "TECH": list(self.TECH),
            "HOUR": list(self.HOUR),
            "CLASS": {k: list(v) for k, v in self.CLASS.items()},
            "techtype": dict(self.techtype),
            "STORAGECLASS": {k: list(v) for k, v in self.STORAGECLASS.items()},
            "FUEL": list(self.FUEL),
        }
