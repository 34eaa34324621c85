"""Domain models package.

This package contains the full-fidelity records held by the configuration
store.
"""

from .application import Application, Environment, Workload

__all__ = ["Application", "Environment", "Workload"]
