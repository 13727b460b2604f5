"""Unit tests for economic_params: EconomicParams validation."""

from __future__ import annotations

import dataclasses

import numpy as np
import pytest

from growth_models.config.economic_params import (
    DEFAULT_PRODUCTIVITY_LEVELS,
    DEFAULT_TRANSITION_MATRIX,
    ROW_SUM_TOL,
    EconomicParams,
)


class TestDefaults:
    """The default instance is the benchmark calibration."""

    def test_calibration(self):
        params = EconomicParams()
        assert params.capital_share == pytest.approx(0.33333333333)
        assert params.discount_factor == pytest.approx(0.95)
        assert params.n_productivity == 5

    def test_arrays(self):
        params = EconomicParams()
        z = params.productivity_array()
        P = params.transition_array()
        assert z.dtype == np.float64
        assert P.shape == (5, 5)
        np.testing.assert_allclose(P.sum(axis=1), 1.0, rtol=0, atol=ROW_SUM_TOL)
        np.testing.assert_array_equal(z, np.array(DEFAULT_PRODUCTIVITY_LEVELS))

    def test_frozen(self):
        params = EconomicParams()
        with pytest.raises(dataclasses.FrozenInstanceError):
            params.discount_factor = 0.9


class TestValidation:
    """Invalid calibrations are rejected on construction."""

    @pytest.mark.parametrize("alpha", [0.0, 1.0, -0.3, 1.5])
    def test_capital_share_out_of_range(self, alpha):
        with pytest.raises(ValueError, match="Capital share"):
            EconomicParams(capital_share=alpha)

    @pytest.mark.parametrize("beta", [0.0, 1.0, 1.2])
    def test_discount_factor_out_of_range(self, beta):
        with pytest.raises(ValueError, match="Discount factor"):
            EconomicParams(discount_factor=beta)

    def test_empty_productivity(self):
        with pytest.raises(ValueError, match="productivity"):
            EconomicParams(productivity_levels=(), transition_matrix=())

    def test_non_positive_productivity(self):
        with pytest.raises(ValueError, match="positive"):
            EconomicParams(
                productivity_levels=(1.0, 0.0),
                transition_matrix=((0.5, 0.5), (0.5, 0.5)),
            )

    def test_shape_mismatch(self):
        with pytest.raises(ValueError, match="must be 2x2"):
            EconomicParams(
                productivity_levels=(0.9, 1.1),
                transition_matrix=DEFAULT_TRANSITION_MATRIX,
            )

    def test_ragged_matrix(self):
        with pytest.raises(ValueError, match="must be 2x2"):
            EconomicParams(
                productivity_levels=(0.9, 1.1),
                transition_matrix=((1.0, 0.0), (1.0,)),
            )

    def test_row_not_summing_to_one(self):
        with pytest.raises(ValueError, match=r"rows \[1\] do not sum to 1"):
            EconomicParams(
                productivity_levels=(0.9, 1.1),
                transition_matrix=((0.5, 0.5), (0.3, 0.6)),
            )

    def test_benchmark_chain_accepted_as_published(self):
        params = EconomicParams(transition_matrix=DEFAULT_TRANSITION_MATRIX)
        row_sums = params.transition_array().sum(axis=1)
        # Four-decimal rounding leaves the middle row at 1.0001.
        assert row_sums[2] == pytest.approx(1.0001, abs=1e-12)
        np.testing.assert_array_equal(
            params.transition_array(), np.array(DEFAULT_TRANSITION_MATRIX)
        )

    def test_row_off_by_more_than_tolerance(self):
        with pytest.raises(ValueError, match=r"rows \[0\] do not sum to 1"):
            EconomicParams(
                productivity_levels=(0.9, 1.1),
                transition_matrix=((0.5, 0.51), (0.5, 0.5)),
            )

    def test_probability_out_of_range(self):
        with pytest.raises(ValueError, match=r"\[0, 1\]"):
            EconomicParams(
                productivity_levels=(0.9, 1.1),
                transition_matrix=((1.2, -0.2), (0.5, 0.5)),
            )

    def test_valid_custom_chain(self):
        params = EconomicParams(
            productivity_levels=(0.95, 1.05),
            transition_matrix=((0.9, 0.1), (0.1, 0.9)),
        )
        assert params.n_productivity == 2
