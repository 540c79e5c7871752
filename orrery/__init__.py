"""An interactive two-dimensional N-body simulation of the solar system."""

__version__ = "0.1.0"