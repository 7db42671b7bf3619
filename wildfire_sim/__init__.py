"""Wildfire spread simulation on a forest grid with an escaping animal."""

__version__ = "0.1.0"