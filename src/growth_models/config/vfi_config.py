# growth_models/config/vfi_config.py
"""
Configuration for the Value Function Iteration (VFI) solver.

This module provides the configuration class for the discrete capital
grid, the numerical tolerances of the fixed-point iteration and the size
of the worker pool.

Example:
    >>> import dataclasses
    >>> from growth_models.config.vfi_config import GridConfig
    >>> config = dataclasses.replace(GridConfig(), n_capital=2000)
    >>> print(f"Capital grid points: {config.n_capital}")
"""

from dataclasses import dataclass
from typing import Optional
import logging

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GridConfig:
    """
    Configuration for the VFI capital grid and numerical tolerances.

    The capital grid is ``k_i = grid_offset_share * k_ss + grid_step * i``
    for ``i`` in ``[0, n_capital)``.

    Attributes:
        n_capital: Number of points in the capital grid.
        grid_offset_share: Lowest grid point as a share of steady-state
            capital.
        grid_step: Distance between consecutive capital grid points.
        tol_vfi: Sup-norm convergence tolerance.
        max_iter_vfi: Iteration budget before the solve is aborted.
        log_every: Progress line cadence, in iterations.
        n_workers: Worker-pool size; ``None`` uses ``os.cpu_count()``.
        check_capital_index: Capital index of the regression check cell.
        check_productivity_index: Productivity index of the check cell.

    Raises:
        ValueError: If any field is out of range.
    """

    n_capital: int = 17820
    grid_offset_share: float = 0.5
    grid_step: float = 1e-5

    tol_vfi: float = 1e-7
    max_iter_vfi: int = 2000
    log_every: int = 10

    n_workers: Optional[int] = None

    check_capital_index: int = 999
    check_productivity_index: int = 2

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.n_capital < 2:
            raise ValueError(
                f"n_capital must be >= 2, got {self.n_capital}."
            )
        if self.grid_offset_share <= 0.0:
            raise ValueError(
                f"grid_offset_share must be positive, got {self.grid_offset_share}."
            )
        if self.grid_step <= 0.0:
            raise ValueError(
                f"grid_step must be positive, got {self.grid_step}."
            )
        if self.tol_vfi <= 0.0:
            raise ValueError(f"tol_vfi must be positive, got {self.tol_vfi}.")
        if self.max_iter_vfi <= 0:
            raise ValueError(
                f"max_iter_vfi must be positive, got {self.max_iter_vfi}."
            )
        if self.log_every <= 0:
            raise ValueError(
                f"log_every must be positive, got {self.log_every}."
            )
        if self.n_workers is not None and self.n_workers < 1:
            raise ValueError(
                f"n_workers must be >= 1, got {self.n_workers}."
            )
        if not 0 <= self.check_capital_index < self.n_capital:
            raise ValueError(
                f"check_capital_index {self.check_capital_index} outside "
                f"[0, {self.n_capital})."
            )
        if self.check_productivity_index < 0:
            raise ValueError(
                f"check_productivity_index must be non-negative, "
                f"got {self.check_productivity_index}."
            )
