"""Discrete-event simulation of package routing through a warehouse network."""

__version__ = "0.1.0"
__all__ = ["__version__"]