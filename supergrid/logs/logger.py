# supergrid/logs/logger.py

"""
Per-run logger configuration.

Library modules only create module loggers with ``logging.getLogger``;
this helper is for scripts and the CLI that want a console plus a log
file for one analysis session.
"""

import logging
import os
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(
    run_name: str,
    scenario: str = "default",
    log_dir: Optional[str] = None,
    level: Union[int, str] = logging.INFO,
) -> logging.Logger:
    """
    Return a logger writing to the console and to ``<scenario>_<run_name>.log``.

    Parameters
    ----------
    run_name : str
        Name of the run being analysed.
    scenario : str, optional
        Scenario label, part of the logger and file name.
    log_dir : str, optional
        Directory for the log file. No file handler is attached when
        ``None``.
    level : int or str, optional
        Logging level (default ``INFO``).

    Returns
    -------
    logging.Logger
        The configured logger. Repeated calls for the same run reuse the
        existing handlers.
    """
    logger = logging.getLogger(f"supergrid.{scenario}.{run_name}")
    logger.setLevel(level.upper() if isinstance(level, str) else level)

    if logger.handlers:
        return logger

    formatter = logging.Formatter(LOG_FORMAT)
    stream = logging.StreamHandler()
    stream.setFormatter(formatter)
    logger.addHandler(stream)

    if log_dir is not None:
        os.makedirs(log_dir, exist_ok=True)
        path = os.path.join(log_dir, f"{scenario}_{run_name}.log")
        file_handler = logging.FileHandler(path)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
