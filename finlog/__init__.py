"""Synthetic financial-application event log generator."""

__version__ = "1.0.0"
