"""Calibration and solver configuration for the growth model."""

from growth_models.config.economic_params import EconomicParams
from growth_models.config.vfi_config import GridConfig

__all__ = [
    'EconomicParams',
    'GridConfig',
]
