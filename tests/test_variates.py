"""
Derived Variate Tests
"""

import math
import statistics
from collections import Counter

import pytest

from extrng import (
    NormalMethod,
    RNGAlgorithm,
    create_engine,
    draw_bernoulli,
    draw_exponential,
    draw_index,
    draw_normal_with,
    draw_uniform_in_range,
)


# =============================================================================
# Exponential Tests
# =============================================================================


class TestExponential:
    """Tests for algorithm SA."""

    def test_short_path(self, scripted_engine):
        """Test a fraction below log(2) is returned directly."""
        engine, source = scripted_engine([0.75])
        assert draw_exponential(engine) == pytest.approx(0.5)
        assert source.calls == 1

    def test_integer_part(self, scripted_engine):
        """Test leading zero bits add log(2) each."""
        engine, _ = scripted_engine([0.3])
        assert draw_exponential(engine) == pytest.approx(math.log(2) + 0.2)

    def test_minimum_path(self, scripted_engine):
        """Test the fraction comes from the minimum of further uniforms."""
        engine, source = scripted_engine([0.9, 0.4, 0.2])
        assert draw_exponential(engine) == pytest.approx(0.2 * math.log(2))
        assert source.calls == 3

    def test_mean(self, mt_engine):
        """Test the sample mean is close to one."""
        draws = [draw_exponential(mt_engine) for _ in range(20_000)]
        assert min(draws) > 0.0
        assert statistics.fmean(draws) == pytest.approx(1.0, abs=0.05)


# =============================================================================
# Index Tests
# =============================================================================


class TestIndex:
    """Tests for uniform integer draws."""

    def test_single_outcome(self, scripted_engine):
        """Test n=1 always yields 0 and consumes one uniform."""
        engine, source = scripted_engine([0.7])
        assert draw_index(engine, 1) == 0
        assert source.calls == 1

    def test_rejection(self, scripted_engine):
        """Test values at or above n are redrawn."""
        engine, source = scripted_engine([7.5 / 65536, 3.5 / 65536])
        assert draw_index(engine, 6) == 3
        assert source.calls == 2

    def test_rounding_rule(self, scripted_engine):
        """Test the historical floor(n * u) rule."""
        engine, source = scripted_engine([0.55])
        assert draw_index(engine, 10, rounding=True) == 5
        assert source.calls == 1

    def test_non_positive_n(self, mt_engine):
        """Test n must be positive."""
        with pytest.raises(AssertionError):
            draw_index(mt_engine, 0)

    def test_roughly_uniform(self, mt_engine):
        """Test every outcome appears at a plausible rate."""
        counts = Counter(draw_index(mt_engine, 10) for _ in range(5_000))
        assert set(counts) == set(range(10))
        assert all(350 < count < 650 for count in counts.values())

    def test_large_n_spans_chunks(self):
        """Test n above 2^16 combines several 16-bit chunks."""
        engine = create_engine(RNGAlgorithm.MERSENNE_TWISTER, NormalMethod.INVERSION, seed=5)
        values = [draw_index(engine, 10**9) for _ in range(200)]
        assert all(0 <= v < 10**9 for v in values)
        assert max(values) > 2**16


# =============================================================================
# Range, Bernoulli and Scaled Normal Tests
# =============================================================================


class TestUniformInRange:
    """Tests for uniform draws on (low, high)."""

    def test_scaled(self, scripted_engine):
        """Test the draw is scaled into the range."""
        engine, _ = scripted_engine([0.25])
        assert draw_uniform_in_range(engine, 2.0, 6.0) == 3.0

    def test_degenerate_range(self, scripted_engine):
        """Test equal bounds return low without drawing."""
        engine, source = scripted_engine([0.25])
        assert draw_uniform_in_range(engine, 4.0, 4.0) == 4.0
        assert source.calls == 0

    def test_endpoint_redrawn(self, scripted_engine):
        """Test an external 0 is redrawn so the result stays open."""
        engine, source = scripted_engine([0.0, 0.5])
        assert draw_uniform_in_range(engine, 0.0, 2.0) == 1.0
        assert source.calls == 2

    def test_reversed_bounds(self, mt_engine):
        """Test low above high is refused."""
        with pytest.raises(AssertionError):
            draw_uniform_in_range(mt_engine, 1.0, 0.0)


class TestBernoulli:
    """Tests for Bernoulli draws."""

    def test_threshold(self, scripted_engine):
        """Test the draw is compared strictly below p."""
        engine, _ = scripted_engine([0.3])
        assert draw_bernoulli(engine, 0.5) is True
        assert draw_bernoulli(engine, 0.3) is False

    def test_extremes(self, mt_engine):
        """Test p=0 never and p=1 always succeeds."""
        assert not any(draw_bernoulli(mt_engine, 0.0) for _ in range(100))
        assert all(draw_bernoulli(mt_engine, 1.0) for _ in range(100))

    def test_probability_out_of_range(self, mt_engine):
        """Test p outside [0, 1] is refused."""
        with pytest.raises(AssertionError):
            draw_bernoulli(mt_engine, 1.5)


class TestNormalWith:
    """Tests for scaled normal draws."""

    def test_reference_scaling(self, mt_engine):
        """Test mean + sd * z on the reference stream."""
        assert draw_normal_with(mt_engine, 10.0, 2.0) == pytest.approx(
            10.0 + 2.0 * -0.6264538, abs=1e-6
        )

    def test_zero_sd(self, scripted_engine):
        """Test sd=0 returns the mean without drawing."""
        engine, source = scripted_engine([0.5])
        assert draw_normal_with(engine, 3.0, 0.0) == 3.0
        assert source.calls == 0

    def test_negative_sd(self, mt_engine):
        """Test negative sd is refused."""
        with pytest.raises(AssertionError):
            draw_normal_with(mt_engine, 0.0, -1.0)

    @pytest.mark.parametrize(
        "mean,sd",
        [(0.0, math.inf), (0.0, -math.inf), (0.0, math.nan), (math.nan, 1.0)],
    )
    def test_non_finite_gives_nan(self, scripted_engine, mean, sd):
        """Test a NaN mean or non-finite sd gives NaN without drawing."""
        engine, source = scripted_engine([0.5])
        assert math.isnan(draw_normal_with(engine, mean, sd))
        assert source.calls == 0

    def test_infinite_mean(self, scripted_engine):
        """Test an infinite mean is returned as is."""
        engine, source = scripted_engine([0.5])
        assert draw_normal_with(engine, math.inf, 1.0) == math.inf
        assert source.calls == 0
