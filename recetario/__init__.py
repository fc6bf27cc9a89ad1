"""Quantity and unit engine for the recetario meal planner."""

__version__ = "0.1.0"
