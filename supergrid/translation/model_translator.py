"""
supergrid/translation/model_translator.py

Reads solved values out of a model into a Results record.
"""
import logging
import time
from typing import Dict

import numpy as np
import pandas as pd

from .base import OutputTranslator
from ..interfaces import (
    INDEX_NAMES,
    PARAMETER_NAMES,
    ModelInfo,
    Results,
    VariableContainer,
    as_container,
)

logger = logging.getLogger(__name__)


def _series(container: VariableContainer, name: str) -> pd.Series:
    return container.to_series(INDEX_NAMES.get(name))


def _blocks(var: VariableContainer, techs, classes, sets) -> Dict:
    """
    Materialize a (region, tech, class, hour) variable as dense blocks.

    One (HOUR x REGION) array per populated (tech, class) pair; building
    the full 4-D cross product first is far slower on real models.
    """
    blocks = {}
    for k in techs:
        for c in classes(k):
            blocks[(k, c)] = np.array(
                [[var[r, k, c, h] for r in sets.REGION] for h in sets.HOUR],
                dtype=float,
            ).reshape(len(sets.HOUR), len(sets.REGION))
    return blocks


class ModelOutputTranslator(OutputTranslator):
    """
    Translate a solved :class:`ModelInfo` into a :class:`Results` record.

    Parameters
    ----------
    model_output : ModelInfo
        The solved model.
    status : str
        Solver termination status recorded with the results.

    Examples
    --------
    >>> results = ModelOutputTranslator(model, "optimal").translate()
    >>> results.Electricity["wind", "a1"].shape
    (8760, 21)
    """
    def __init__(self, model_output: ModelInfo, status: str = "optimal"):
        super().__init__(model_output)
        self.status = str(status)

    def translate(self) -> Results:
        model = self.model_output
        sets = model.sets
        start = time.perf_counter()

        params = {}
        for name in PARAMETER_NAMES:
            params[name] = _series(model.param(name), name)

        series = {}
        for name in ("Systemcost", "CO2emissions", "FuelUse", "Charging", "Transmission"):
            series[name] = _series(model.var(name), name)
            logger.debug(f"Read {name}: {len(series[name])} values")

        electricity = _blocks(model.var("Electricity"), sets.TECH, sets.classes, sets)
        logger.debug(f"Read Electricity: {len(electricity)} (tech, class) blocks")
        storagelevel = _blocks(
            model.var("StorageLevel"), sets.storagetechs, sets.storageclasses, sets
        )
        logger.debug(f"Read StorageLevel: {len(storagelevel)} (tech, class) blocks")

        capacity = {
            key: value for key, value in model.var("Capacity").items()
        }

        results = Results(
            status=self.status,
            options=dict(model.options),
            hourinfo=model.hourinfo,
            sets=sets,
            params=params,
            Systemcost=series["Systemcost"],
            CO2emissions=series["CO2emissions"],
            FuelUse=series["FuelUse"],
            Electricity=electricity,
            Charging=series["Charging"],
            StorageLevel=storagelevel,
            Transmission=series["Transmission"],
            Capacity=capacity,
        )
        logger.info(
            f"Read results ({self.status}) in {time.perf_counter() - start:.2f} s"
        )
        return results


def read_results(model: ModelInfo, status: str = "optimal") -> Results:
    """
    Read solved variable values from *model* into a Results record.

    Parameters
    ----------
    model : ModelInfo
        Solved model exposing sets, parameters and variables.
    status : str, optional
        Solver termination status.

    Returns
    -------
    Results

    Raises
    ------
    KeyError
        If a (region, technology, class, hour) combination implied by the
        index sets is absent from a variable.
    """
    return ModelOutputTranslator(model, status).translate()
