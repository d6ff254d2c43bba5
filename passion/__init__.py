"""Passion interview trait analysis."""

__version__ = "0.1.0"
