# growth_models/econ/__init__.py
"""
Core economic logic module.

This package provides the production technology and steady-state
formulas used by the VFI solver.
"""

from growth_models.econ.production import ProductionFunctions
from growth_models.econ.steady_state import SteadyState, SteadyStateCalculator


__all__ = [
    'ProductionFunctions',
    'SteadyState',
    'SteadyStateCalculator',
]
