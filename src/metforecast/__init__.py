"""Afternoon weather forecast gateway and viewer."""

__version__ = "0.1.0"
