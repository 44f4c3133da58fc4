"""
supergrid/output/store.py

Keyed archive of Results records.

The archive is a zip file with one pickled Results record per member. A
member name is ``<group>/<runname>``, or just ``<runname>`` without group.
Entries are write-once: saving under an existing key keeps the stored run.
"""
import logging
import os
import pickle
import zipfile
from typing import List, Optional

from ..constants import DEFAULT_RESULTSFILE
from ..interfaces import Results
from ..options import auto_runname, merge_options

logger = logging.getLogger(__name__)


def _normalize_group(group: str) -> str:
    if group and not group.endswith("/"):
        group += "/"
    return group


def results_key(runname: str, group: str = "") -> str:
    """Archive key of *runname* under *group*."""
    return f"{_normalize_group(group)}{runname}"


def save_results(
    results: Results,
    runname: str,
    resultsfile: str = "",
    group: str = "",
    compress: bool = True,
) -> None:
    """
    Store *results* under ``<group>/<runname>`` in *resultsfile*.

    Does nothing when *resultsfile* is empty. An existing entry with the
    same key is never overwritten: a warning is logged and the new run is
    not written.

    Parameters
    ----------
    results : Results
        Record to store.
    runname : str
        Name of the run.
    resultsfile : str, optional
        Archive path. Created if missing.
    group : str, optional
        Group prefix, e.g. ``'carbontax'``.
    compress : bool, optional
        Deflate the stored record (default ``True``).
    """
    if not resultsfile:
        return None
    key = results_key(runname, group)
    compression = zipfile.ZIP_DEFLATED if compress else zipfile.ZIP_STORED
    with zipfile.ZipFile(resultsfile, "a", compression=compression) as archive:
        if key in archive.namelist():
            logger.warning(
                f"The run {key} already exists in {resultsfile} "
                f"(new run not saved to disk)."
            )
        else:
            archive.writestr(key, pickle.dumps(results, protocol=pickle.HIGHEST_PROTOCOL))
            logger.info(f"Saved run {key} to {resultsfile}")
    return None


def list_results(resultsfile: str = DEFAULT_RESULTSFILE, group: str = "") -> List[str]:
    """
    List the run keys stored in *resultsfile*.

    Parameters
    ----------
    resultsfile : str, optional
        Archive path.
    group : str, optional
        Only return keys stored under this group.

    Returns
    -------
    list of str
        Stored keys, in archive order.

    Raises
    ------
    FileNotFoundError
        If the archive does not exist.
    """
    group = _normalize_group(group)
    with zipfile.ZipFile(resultsfile, "r") as archive:
        keys = archive.namelist()
    return [key for key in keys if key.startswith(group)]


def load_results(
    runname: Optional[str] = None,
    resultsfile: str = DEFAULT_RESULTSFILE,
    group: str = "",
    **loadoptions,
) -> Optional[Results]:
    """
    Load a stored run.

    The run is given either by name, or (``runname=None``) by the model
    options it was run with; those are merged into the defaults and turned
    into the canonical run name.

    Parameters
    ----------
    runname : str, optional
        Name of the run.
    resultsfile : str, optional
        Archive path.
    group : str, optional
        Group prefix the run was saved under.
    **loadoptions
        Model options identifying the run when *runname* is ``None``.

    Returns
    -------
    Results or None
        ``None`` (with a printed notice) if the run is not in the archive.

    Examples
    --------
    >>> load_results("default", resultsfile="results.zip")
    >>> load_results(resultsfile="results.zip", carbontax=50.0)
    """
    if runname is None:
        runname = auto_runname(merge_options(**loadoptions))
    elif loadoptions:
        raise TypeError("Pass either a run name or model options, not both")
    key = results_key(runname, group)
    with zipfile.ZipFile(resultsfile, "r") as archive:
        if key not in archive.namelist():
            print(f"\nThe run {key} does not exist in {resultsfile}.")
            return None
        results = pickle.loads(archive.read(key))
    logger.debug(f"Loaded run {key} from {resultsfile}")
    return results


class ResultsArchive:
    """
    A results file bound to one group.

    Examples
    --------
    >>> archive = ResultsArchive("results.zip", group="carbontax")
    >>> archive.save(results, "ctax=50")
    >>> "ctax=50" in archive
    True
    >>> archive.load("ctax=50").status
    'optimal'
    """
    def __init__(self, path: str = DEFAULT_RESULTSFILE, group: str = "", compress: bool = True):
        self.path = path
        self.group = group
        self.compress = compress

    def save(self, results: Results, runname: str) -> None:
        save_results(results, runname, self.path, self.group, self.compress)

    def load(self, runname: Optional[str] = None, **loadoptions) -> Optional[Results]:
        return load_results(runname, self.path, self.group, **loadoptions)

    def keys(self) -> List[str]:
        if not os.path.exists(self.path):
            return []
        return list_results(self.path, self.group)

    def __contains__(self, runname: str) -> bool:
        return results_key(runname, self.group) in self.keys()
