"""
Normal Method Tests

Reference values for inversion come from ``set.seed(s); rnorm(n)`` in the
reference environment. The rejection samplers are checked on scripted
uniform streams, where each branch can be followed by hand.
"""

import math
import statistics

import pytest

from extrng import (
    NormalMethod,
    NotReadyError,
    RNGAlgorithm,
    create_engine,
)
from extrng.normal import builtin_normal, qnorm
from extrng.normal.kinderman_ramage import A
from extrng.errors import ConfigurationError


# =============================================================================
# Quantile Function Tests
# =============================================================================


class TestQnorm:
    """Tests for the AS 241 quantile function."""

    @pytest.mark.parametrize(
        "p,expected",
        [
            (0.5, 0.0),
            (0.975, 1.959963984540054),
            (0.025, -1.959963984540054),
            (0.8413447460685429, 1.0),
            (0.999, 3.090232306167813),
        ],
    )
    def test_known_quantiles(self, p, expected):
        """Test central and near-tail quantiles."""
        assert qnorm(p) == pytest.approx(expected, abs=1e-9)

    def test_far_tail(self):
        """Test the far-tail branch."""
        assert qnorm(1e-10) == pytest.approx(-6.361340902404056, abs=1e-6)

    def test_symmetry(self):
        """Test qnorm(1 - p) == -qnorm(p)."""
        for p in (0.001, 0.1, 0.3, 0.45):
            assert qnorm(1 - p) == pytest.approx(-qnorm(p), abs=1e-12)

    def test_endpoints(self):
        """Test infinities at 0 and 1, nan outside."""
        assert qnorm(0.0) == -math.inf
        assert qnorm(1.0) == math.inf
        assert math.isnan(qnorm(-0.1))
        assert math.isnan(qnorm(1.1))


# =============================================================================
# Inversion Tests
# =============================================================================


class TestInversion:
    """Tests for the default normal method."""

    @pytest.mark.parametrize(
        "seed,expected",
        [
            (1, [-0.6264538, 0.1836433, -0.8356286, 1.5952808, 0.3295078]),
            (42, [1.3709584, -0.5646982, 0.3631284]),
            (123, [-0.56047565, -0.23017749, 1.55870831]),
        ],
    )
    def test_reference_sequences(self, seed, expected):
        """Test set.seed(seed); rnorm(n) is reproduced."""
        engine = create_engine(RNGAlgorithm.MERSENNE_TWISTER, NormalMethod.INVERSION, seed=seed)
        draws = [engine.draw_normal() for _ in range(len(expected))]
        assert draws == pytest.approx(expected, abs=1e-7)

    def test_consumes_two_uniforms(self, scripted_engine):
        """Test the two-draw combination on a 2^27 grid."""
        engine, source = scripted_engine([0.5, 0.0])
        assert engine.draw_normal() == 0.0
        assert source.calls == 2


# =============================================================================
# Box-Muller Tests
# =============================================================================


class TestBoxMuller:
    """Tests for the paired transform and its cache."""

    def test_pair_and_cache(self, scripted_engine):
        """Test one pair of uniforms yields cos then sin without new draws."""
        engine, source = scripted_engine([0.25, math.exp(-0.5)], NormalMethod.BOX_MULLER)

        first = engine.draw_normal()
        assert first == pytest.approx(0.0, abs=1e-15)
        assert engine.state.cached_normal == pytest.approx(1.0)
        assert source.calls == 2

        second = engine.draw_normal()
        assert second == pytest.approx(1.0)
        assert engine.state.cached_normal is None
        assert source.calls == 2

    def test_third_draw_consumes_new_pair(self, scripted_engine):
        """Test the cache is used once."""
        engine, source = scripted_engine([0.25, 0.5], NormalMethod.BOX_MULLER)
        for _ in range(3):
            engine.draw_normal()
        assert source.calls == 4

    def test_zero_cache_treated_as_empty(self, scripted_engine):
        """Test a pending exact zero is skipped and a fresh pair is drawn."""
        engine, source = scripted_engine([0.0, math.exp(-0.5)], NormalMethod.BOX_MULLER)

        assert engine.draw_normal() == pytest.approx(1.0)
        assert engine.state.cached_normal == 0.0

        assert engine.draw_normal() == pytest.approx(1.0)
        assert source.calls == 4


# =============================================================================
# Kinderman-Ramage Tests
# =============================================================================


class TestKindermanRamage:
    """Tests for the corrected and historical variants."""

    def test_central_region_slope_differs(self, scripted_engine):
        """Test the variants disagree in the central region by the slope constant."""
        corrected, _ = scripted_engine([0.5, 0.5], NormalMethod.KINDERMAN_RAMAGE)
        buggy, _ = scripted_engine([0.5, 0.5], NormalMethod.BUGGY_KINDERMAN_RAMAGE)

        a = corrected.draw_normal()
        b = buggy.draw_normal()

        assert a == A * (1.131131635444180 * 0.5 + 0.5 - 1)
        assert b == A * (1.13113163544180 * 0.5 + 0.5 - 1)
        assert a != b

    def test_region1_acceptance_test_differs(self, scripted_engine):
        """Test the corrected variant accepts via g(t) where the old code rejects."""
        stream = [0.9, 0.5, 0.9, 0.1, 0.2]
        corrected, corrected_source = scripted_engine(stream, NormalMethod.KINDERMAN_RAMAGE)
        buggy, buggy_source = scripted_engine(stream, NormalMethod.BUGGY_KINDERMAN_RAMAGE)

        a = corrected.draw_normal()
        b = buggy.draw_normal()

        assert a == pytest.approx(0.479727404222441 - 0.595507138015940 * 0.5)
        assert corrected_source.calls == 3
        assert b == pytest.approx(0.479727404222441 - 0.595507138015940 * 0.1)
        assert buggy_source.calls == 5

    def test_tail(self, scripted_engine):
        """Test the tail branch for a positive deviate."""
        engine, source = scripted_engine([0.98, 0.1, 0.5], NormalMethod.KINDERMAN_RAMAGE)
        assert engine.draw_normal() == pytest.approx(math.sqrt(A * A - 2 * math.log(0.5)))
        assert source.calls == 3

    @pytest.mark.parametrize(
        "method", [NormalMethod.KINDERMAN_RAMAGE, NormalMethod.BUGGY_KINDERMAN_RAMAGE]
    )
    def test_rejection_cap(self, scripted_engine, monkeypatch, method):
        """Test a source that always rejects trips the iteration cap."""
        monkeypatch.setattr("extrng.normal.base.NORMAL_REJECTION_ITERATIONS_MAX", 50)
        engine, _ = scripted_engine([0.9], method)
        with pytest.raises(AssertionError):
            engine.draw_normal()


# =============================================================================
# Ahrens-Dieter Tests
# =============================================================================


class TestAhrensDieter:
    """Tests for the FL sampler."""

    def test_tail_guard(self, scripted_engine):
        """Test a vanishing uniform trips the tail guard instead of indexing past the table."""
        engine, _ = scripted_engine([1e-300], NormalMethod.AHRENS_DIETER)
        with pytest.raises(AssertionError, match="tail halving"):
            engine.draw_normal()


# =============================================================================
# User Normal Tests
# =============================================================================


class TestUserNorm:
    """Tests for the callback-backed normal method."""

    def test_callback_value_passed_through(self):
        """Test the callback's value is returned unchanged."""
        engine = create_engine(RNGAlgorithm.MERSENNE_TWISTER, NormalMethod.USER_NORM, seed=1)
        engine.bind_external_normal(lambda: 7.5)
        assert engine.draw_normal() == 7.5

    def test_unbound_callback(self):
        """Test drawing before binding fails."""
        engine = create_engine(RNGAlgorithm.MERSENNE_TWISTER, NormalMethod.USER_NORM, seed=1)
        with pytest.raises(NotReadyError):
            engine.draw_normal()

    def test_non_callable_rejected(self):
        """Test binding a non-callable fails."""
        engine = create_engine(RNGAlgorithm.MERSENNE_TWISTER, NormalMethod.USER_NORM, seed=1)
        with pytest.raises(ConfigurationError):
            engine.bind_external_normal(3.0)

    def test_no_builtin_for_user_norm(self):
        """Test USER_NORM is not a shared built-in."""
        with pytest.raises(ConfigurationError):
            builtin_normal(NormalMethod.USER_NORM)


# =============================================================================
# Distribution Tests
# =============================================================================


class TestMoments:
    """Every built-in method produces roughly standard-normal output."""

    def test_mean_and_variance(self, builtin_normal_method):
        """Test sample mean and variance over 20000 draws."""
        engine = create_engine(RNGAlgorithm.MERSENNE_TWISTER, builtin_normal_method, seed=7)
        draws = [engine.draw_normal() for _ in range(20_000)]
        assert all(math.isfinite(z) for z in draws)
        assert statistics.fmean(draws) == pytest.approx(0.0, abs=0.05)
        assert statistics.pvariance(draws) == pytest.approx(1.0, abs=0.05)

    @pytest.mark.slow
    def test_every_pairing(self, builtin_algorithm, builtin_normal_method):
        """Test every algorithm and method pairing yields finite draws."""
        engine = create_engine(builtin_algorithm, builtin_normal_method, seed=11)
        draws = [engine.draw_normal() for _ in range(5_000)]
        assert all(math.isfinite(z) for z in draws)
        assert statistics.fmean(draws) == pytest.approx(0.0, abs=0.1)
