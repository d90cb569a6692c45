"""Arrival generation."""

from collapsesimulator.load.arrival import ArrivalProcess

__all__ = ["ArrivalProcess"]
