"""Timing and geometry planner for airborne SAR configurations, with plots."""

__version__ = "0.1.0"
__all__ = ["__version__"]