# growth_models/econ/production.py
"""
Production and utility functions.

This module implements the production technology and period utility of
the stochastic growth model.
"""

import tensorflow as tf

from growth_models.config.economic_params import EconomicParams
from growth_models.core.types import Numeric, Tensor


class ProductionFunctions:
    """Static methods for production-related calculations."""

    @staticmethod
    def cobb_douglas(
        capital: Tensor,
        productivity: Tensor,
        params: EconomicParams
    ) -> Tensor:
        """
        Compute output using Cobb-Douglas production technology.

        Formula: Y = Z * K^alpha

        Args:
            capital: Capital stock tensor (K).
            productivity: Productivity shock tensor (Z).
            params: Economic parameters containing capital share.

        Returns:
            Gross production output tensor.
        """
        return productivity * tf.pow(capital, params.capital_share)

    @staticmethod
    def consumption(output: Numeric, capital_next: Numeric) -> Numeric:
        """
        Consumption implied by the resource constraint.

        Formula: C = Y - K' (full depreciation)
        """
        return output - capital_next
