# growth_models/econ/steady_state.py
"""
Steady state calculations for the deterministic growth model.

This module computes the analytical steady state used to anchor the
capital grid and reported as a diagnostic before the solve starts.
"""

from typing import NamedTuple

from growth_models.config.economic_params import EconomicParams


class SteadyState(NamedTuple):
    """Deterministic steady-state allocation."""

    capital: float
    output: float
    consumption: float


class SteadyStateCalculator:
    """Static methods for steady state calculations."""

    @staticmethod
    def calculate_capital(params: EconomicParams) -> float:
        """
        Calculate steady-state capital stock for the deterministic model.

        With log utility and full depreciation the Euler equation gives:
            k_ss = (alpha * beta)^(1 / (1 - alpha))

        Args:
            params: Economic parameters containing discount factor and
                    capital share.

        Returns:
            The steady-state capital stock.
        """
        alpha = params.capital_share
        return (alpha * params.discount_factor) ** (1.0 / (1.0 - alpha))

    @staticmethod
    def calculate(params: EconomicParams) -> SteadyState:
        """Return steady-state capital, output (k^alpha) and consumption."""
        capital = SteadyStateCalculator.calculate_capital(params)
        output = capital ** params.capital_share
        return SteadyState(
            capital=capital,
            output=output,
            consumption=output - capital,
        )
