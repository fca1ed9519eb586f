"""Clinic record manager driven by short textual commands."""

__version__ = "0.1.0"
