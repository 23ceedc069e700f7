"""Fission reactor simulation in simulated time: feeder, activator, atoms and optional inhibitor."""

__version__ = "0.1.0"