# growth_models/vfi/grids/__init__.py
"""
Grid management for the VFI solver.

This package provides utilities for constructing the discretized
capital grid and productivity chain.
"""

from growth_models.vfi.grids.grid_builder import GridBuilder

__all__ = [
    'GridBuilder',
]
