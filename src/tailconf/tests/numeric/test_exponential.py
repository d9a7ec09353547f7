import math

import pytest

from tailconf.numeric.exponential import E, EXP_ACCURACY, exp_approx, int_pow


class TestIntPow:
    """Test integer powers by repeated squaring."""

    def test_small_powers(self):
        assert int_pow(2.0, 0) == 1.0
        assert int_pow(2.0, 1) == 2.0
        assert int_pow(2.0, 10) == 1024.0
        assert int_pow(3.0, 5) == 243.0

    def test_non_positive_exponent_returns_one(self):
        assert int_pow(1.5, 0) == 1.0
        assert int_pow(1.5, -3) == 1.0

    def test_powers_of_e_match_math_exp(self):
        for n in (1, 2, 7, 20, 50):
            assert int_pow(E, n) == pytest.approx(math.exp(n), rel=1e-12)

    def test_overflow_gives_infinity(self):
        assert int_pow(E, 1000) == math.inf


class TestExpApprox:
    """Test the series-based exponential."""

    def test_default_accuracy(self):
        assert EXP_ACCURACY == 1e-6

    def test_exact_at_integers(self):
        assert exp_approx(0.0) == 1.0
        assert exp_approx(1.0) == E
        assert exp_approx(-1.0) == pytest.approx(1.0 / E)

    @pytest.mark.parametrize("x", [-20.0, -7.3, -2.5, -0.999, -0.1, 0.05, 0.5, 0.999, 3.25, 12.7, 20.0])
    def test_matches_math_exp(self, x):
        assert exp_approx(x) == pytest.approx(math.exp(x), rel=1e-6)

    @pytest.mark.parametrize("x", [0.0, 0.3, 1.7, 4.5, 9.99, 15.0])
    def test_reciprocal_round_trip(self, x):
        assert exp_approx(x) * exp_approx(-x) == pytest.approx(1.0, abs=1e-9)

    def test_negative_zero(self):
        assert exp_approx(-0.0) == 1.0

    def test_large_arguments_overflow_without_raising(self):
        assert exp_approx(1000.0) == math.inf
        assert exp_approx(-1000.0) == 0.0

    def test_infinite_arguments(self):
        assert exp_approx(math.inf) == math.inf
        assert exp_approx(-math.inf) == 0.0

    def test_looser_accuracy_uses_fewer_terms(self):
        coarse = exp_approx(0.9, accuracy=0.1)
        fine = exp_approx(0.9, accuracy=1e-12)
        assert abs(coarse - math.exp(0.9)) > abs(fine - math.exp(0.9))
        assert fine == pytest.approx(math.exp(0.9), rel=1e-11)

    def test_truncation_underestimates_fractional_part(self):
        # all series terms are positive, so dropping the tail can only lose mass
        assert exp_approx(0.75) <= math.exp(0.75)
        assert exp_approx(-0.75) >= math.exp(-0.75)
