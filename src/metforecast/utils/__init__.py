"""Common utility functions and helpers for the metforecast package."""

from metforecast.utils.time import TimeUtils

__all__ = [
    "TimeUtils",
]
