"""
Line-oriented grammar checking filter
"""

from .config import RunConfig, Verbosity
from .runner import run

__all__ = ["RunConfig", "Verbosity", "run"]
