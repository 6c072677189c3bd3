"""Pinpoint - feedback form with screenshot and log attachment for PyQt6 apps."""

__version__ = "0.1.0"
