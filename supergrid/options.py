# supergrid/options.py

"""
Model options and canonical run names.

The defaults live in ``defaults.yaml`` next to this module. A run stored
without an explicit name is keyed by :func:`auto_runname`, so the same
options always map back to the same archive entry.
"""

import copy
import os
from functools import lru_cache
from typing import Any, Dict, Mapping

import yaml

DEFAULT_OPTIONS_PATH = os.path.join(os.path.dirname(__file__), "defaults.yaml")

# Options that describe how a run was executed, not what was modelled
BOOKKEEPING_OPTIONS = frozenset(
    {"resultsfile", "solver", "threads", "showsolverlog", "rescaleconstraints"}
)


@lru_cache(maxsize=None)
def _load_defaults(path: str) -> Dict[str, Any]:
    with open(path, "r") as f:
        defaults = yaml.safe_load(f)
    if not isinstance(defaults, dict):
        raise ValueError(f"Options file {path} must contain a mapping")
    return defaults


def default_options(path: str = DEFAULT_OPTIONS_PATH) -> Dict[str, Any]:
    """Return a fresh copy of the default model options."""
    return copy.deepcopy(_load_defaults(path))


def merge_options(options: Mapping[str, Any] = None, **overrides) -> Dict[str, Any]:
    """
    Merge option overrides into the defaults.

    Parameters
    ----------
    options : mapping, optional
        Base overrides, applied before keyword overrides.
    **overrides
        Individual option values.

    Returns
    -------
    dict
        Complete options mapping.

    Raises
    ------
    KeyError
        If an override names an option that has no default.
    """
    merged = default_options()
    for key, value in {**dict(options or {}), **overrides}.items():
        if key not in merged:
            raise KeyError(
                f"Unknown option '{key}'. Valid options: {sorted(merged)}"
            )
        merged[key] = value
    return merged


def auto_runname(options: Mapping[str, Any]) -> str:
    """
    Build the canonical run name for a set of model options.

    Options equal to their default, and bookkeeping options, are left out.
    The remaining ones are written as ``key=value`` in defaults order.

    Examples
    --------
    >>> auto_runname(merge_options())
    'default'
    >>> auto_runname(merge_options(carbontax=50.0, hours=3))
    'carbontax=50.0, hours=3'
    """
    defaults = default_options()
    parts = []
    for key in defaults:
        if key in BOOKKEEPING_OPTIONS or key not in options:
            continue
        value = options[key]
        if value != defaults[key]:
            parts.append(f"{key}={value}")
    # options without a default still name the run
    for key, value in options.items():
        if key not in defaults and key not in BOOKKEEPING_OPTIONS:
            parts.append(f"{key}={value}")
    return ", ".join(parts) if parts else "default"
