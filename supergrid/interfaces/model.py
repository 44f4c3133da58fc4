# supergrid/interfaces/model.py

"""
The solved-model interface consumed by the results translator.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping

from .sets import HourInfo, ModelSets
from .variables import VariableContainer, as_container

# Variables and parameters read from every solved model
VARIABLE_NAMES = (
    "Systemcost", "CO2emissions", "FuelUse", "Electricity",
    "Charging", "StorageLevel", "Transmission", "Capacity",
)
PARAMETER_NAMES = ("demand", "classlimits", "hydrocapacity", "transmissioncapacity")


@dataclass
class ModelInfo:
    """
    A solved capacity-expansion model.

    Attributes
    ----------
    sets : ModelSets
        Index sets of the model.
    params : dict
        Parameter name -> parameter container (pyomo Param, mapping,
        pandas Series or DataFrame).
    vars : dict
        Variable name -> variable container (pyomo Var, mapping or Series).
    options : dict
        Model options the run was built with.
    hourinfo : HourInfo
        Time-discretization metadata.

    Examples
    --------
    >>> model = ModelInfo(sets, params={'demand': m.demand, ...},
    ...                   vars={'Electricity': m.Electricity, ...})
    >>> model.var('Electricity')['NOR', 'wind', 'a1', 1]
    12.5
    """

    sets: ModelSets
    params: Dict[str, Any]
    vars: Dict[str, Any]
    options: Dict[str, Any] = field(default_factory=dict)
    hourinfo: HourInfo = field(default_factory=HourInfo)

    def var(self, name: str) -> VariableContainer:
        """Container of the solved variable *name*."""
        try:
            return as_container(self.vars[name])
        except KeyError:
            raise KeyError(
                f"Model has no variable '{name}' (available: {sorted(self.vars)})"
            ) from None

    def param(self, name: str) -> VariableContainer:
        """Container of the parameter *name*."""
        try:
            return as_container(self.params[name])
        except KeyError:
            raise KeyError(
                f"Model has no parameter '{name}' (available: {sorted(self.params)})"
            ) from None

    @classmethod
    def from_pyomo(
        cls,
        instance,
        sets: ModelSets,
        options: Mapping[str, Any] = None,
        hourinfo: HourInfo = None,
    ) -> "ModelInfo":
        """
        Collect the standard variables and parameters from a pyomo model.

        Components are looked up by name on *instance*; missing ones raise
        ``AttributeError``.
        """
        return cls(
            sets=sets,
            params={name: getattr(instance, name) for name in PARAMETER_NAMES},
            vars={name: getattr(instance, name) for name in VARIABLE_NAMES},
            options=dict(options or {}),
            hourinfo=hourinfo or HourInfo(),
        )
