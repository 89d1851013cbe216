"""
Core checker module for toyfront.

This module contains the Checker facade that runs the whole front end and
returns a CheckResult.
"""

from .checker import Checker, CheckResult

__all__ = [
    "Checker",
    "CheckResult",
]
