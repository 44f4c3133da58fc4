# supergrid/interfaces/results.py

"""
Immutable record of one solved model run.

``Results`` is produced once by the results translator and never mutated
afterwards; every derived table is a new object. Electricity and storage
levels are kept as a sparse map of dense blocks:

    (technology, class) -> ndarray of shape (len(HOUR), len(REGION))

because the populated technology/class combinations are irregular while
hour x region is always dense.
"""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Mapping, Tuple

import numpy as np
import pandas as pd

from .sets import HourInfo, ModelSets

Block = Tuple[str, str]

# Index level names of the Series-valued fields
INDEX_NAMES: Dict[str, Tuple[str, ...]] = {
    "Systemcost": ("REGION",),
    "CO2emissions": ("REGION",),
    "FuelUse": ("REGION", "FUEL"),
    "Charging": ("REGION", "TECH", "HOUR"),
    "Transmission": ("REGION", "REGION_TO", "HOUR"),
    "demand": ("REGION", "HOUR"),
    "classlimits": ("REGION", "TECH", "CLASS"),
    "hydrocapacity": ("REGION", "CLASS"),
    "transmissioncapacity": ("REGION", "REGION_TO"),
}


def _equal_values(a: Any, b: Any) -> bool:
    """Deep equality over pandas, numpy and plain containers."""
    if isinstance(a, (pd.Series, pd.DataFrame)):
        return type(a) is type(b) and a.equals(b)
    if isinstance(a, np.ndarray):
        return isinstance(b, np.ndarray) and np.array_equal(a, b)
    if isinstance(a, Mapping):
        if not isinstance(b, Mapping) or set(a) != set(b):
            return False
        return all(_equal_values(a[k], b[k]) for k in a)
    if isinstance(a, (list, tuple)):
        return (
            isinstance(b, (list, tuple))
            and len(a) == len(b)
            and all(_equal_values(x, y) for x, y in zip(a, b))
        )
    return a == b


@dataclass(frozen=True, eq=False)
class Results:
    """
    Solved values and metadata of one model run.

    Attributes
    ----------
    status : str
        Solver termination status (e.g. ``'optimal'``).
    options : dict
        Model options of the run.
    hourinfo : HourInfo
        Time-discretization metadata.
    sets : ModelSets
        Index sets.
    params : dict of str to pd.Series
        ``demand`` (REGION, HOUR), ``classlimits`` (REGION, TECH, CLASS),
        ``hydrocapacity`` (REGION, CLASS), ``transmissioncapacity``
        (REGION, REGION_TO).
    Systemcost, CO2emissions : pd.Series
        Indexed by REGION. M€ and Mton CO2.
    FuelUse : pd.Series
        Indexed by (REGION, FUEL).
    Electricity : dict
        (TECH, CLASS) -> GWh per time step, shape (len(HOUR), len(REGION)).
    Charging : pd.Series
        Indexed by (REGION, TECH, HOUR), storage technologies only.
    StorageLevel : dict
        (storage TECH, STORAGECLASS) -> TWh, shape (len(HOUR), len(REGION)).
    Transmission : pd.Series
        Indexed by (REGION, REGION_TO, HOUR).
    Capacity : dict
        (REGION, TECH, CLASS) -> installed GW.
    """

    status: str
    options: Dict[str, Any]
    hourinfo: HourInfo
    sets: ModelSets
    params: Dict[str, pd.Series]
    Systemcost: pd.Series
    CO2emissions: pd.Series
    FuelUse: pd.Series
    Electricity: Dict[Block, np.ndarray]
    Charging: pd.Series
    StorageLevel: Dict[Block, np.ndarray]
    Transmission: pd.Series
    Capacity: Dict[Tuple[str, str, str], float] = field(default_factory=dict)

    def equals(self, other: "Results") -> bool:
        """True if every field of *other* holds identical values."""
        if not isinstance(other, Results):
            return False
        return all(
            _equal_values(getattr(self, f.name), getattr(other, f.name))
            for f in fields(self)
        )

    def validate(self) -> None:
        """
        Check the sparse block layout against the index sets.

        Raises
        ------
        ValueError
            If a block is missing, unexpected, or has the wrong shape.
        """
        sets = self.sets
        shape = (len(sets.HOUR), len(sets.REGION))
        expected = {
            "Electricity": {(k, c) for k in sets.TECH for c in sets.classes(k)},
            "StorageLevel": {
                (k, c) for k in sets.storagetechs for c in sets.storageclasses(k)
            },
        }
        for name, keys in expected.items():
            blocks = getattr(self, name)
            missing = keys - set(blocks)
            if missing:
                raise ValueError(f"Results.{name} is missing blocks: {sorted(missing)}")
            extra = set(blocks) - keys
            if extra:
                raise ValueError(f"Results.{name} has unexpected blocks: {sorted(extra)}")
            for key, block in blocks.items():
                if np.shape(block) != shape:
                    raise ValueError(
                        f"Results.{name}[{key}] has shape {np.shape(block)}, "
                        f"expected {shape}"
                    )

    @property
    def hoursperperiod(self) -> int:
        return self.hourinfo.hoursperperiod

    def summary(self) -> str:
        """
        Return a human-readable summary of the run.

        Returns
        -------
        str
            Multi-line summary string.
        """
        sets = self.sets
        lines = [
            f"Results ({self.status})",
            "=" * 40,
            f"Regions: {list(sets.REGION)}",
            f"Technologies: {list(sets.TECH)}",
            f"Time steps: {len(sets.HOUR)} x {self.hoursperperiod} h",
            f"System cost: {self.Systemcost.sum():.4f}",
            f"CO2 emissions: {self.CO2emissions.sum():.4f}",
        ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        return self.summary()
