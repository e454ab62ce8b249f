"""
Utility modules for the job ranker application.
"""

from .config import Config

__all__ = [
    "Config",
]
