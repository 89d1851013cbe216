"""
Utility modules for toyfront.

This package contains configuration helpers used throughout the front end.
"""

from .settings import Settings, DEFAULT_SETTINGS

__all__ = [
    "Settings",
    "DEFAULT_SETTINGS",
]
