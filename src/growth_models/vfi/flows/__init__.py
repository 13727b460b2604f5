"""Flow construction for the VFI solver.

Modules
-------
output_flow
    Production output for every (productivity, capital) pair.
"""

from growth_models.vfi.flows.output_flow import build_output_table

__all__ = [
    "build_output_table",
]
