# supergrid/logs/__init__.py

"""Logging setup for analysis sessions."""

from .logger import get_logger

__all__ = ['get_logger']
