import numpy as np
import pytest

from convolution_fx.convolution import convolve_linear, output_length


@pytest.mark.parametrize("n1", [0, 1, 2, 5])
@pytest.mark.parametrize("n2", [0, 1, 3])
def test_output_length(n1, n2):
    y = convolve_linear(np.ones(n1), np.ones(n2))
    assert y.size == max(0, n1 + n2 - 1)
    assert y.size == output_length(n1, n2)


def test_both_empty_is_empty():
    assert convolve_linear([], []).size == 0


def test_one_empty_operand_gives_silence():
    y = convolve_linear([1.0, 2.0, 3.0], [])
    np.testing.assert_array_equal(y, np.zeros(2))


def test_unit_impulse_is_identity():
    rng = np.random.default_rng(3)
    x = rng.standard_normal(257)
    np.testing.assert_allclose(convolve_linear(x, [1.0]), x, atol=1e-12)


def test_two_tap_average():
    y = convolve_linear([1.0, 0.0, 0.0], [0.5, 0.5])
    np.testing.assert_allclose(y, [0.5, 0.5, 0.0, 0.0], atol=1e-12)


def test_matches_time_domain_convolution():
    rng = np.random.default_rng(11)
    x = rng.standard_normal(300)
    h = rng.standard_normal(45)
    np.testing.assert_allclose(convolve_linear(x, h), np.convolve(x, h), atol=1e-10)


def test_linearity():
    rng = np.random.default_rng(21)
    x1 = rng.standard_normal(120)
    x2 = rng.standard_normal(120)
    h = rng.standard_normal(31)
    a, b = 0.7, -2.5
    lhs = convolve_linear(a * x1 + b * x2, h)
    rhs = a * convolve_linear(x1, h) + b * convolve_linear(x2, h)
    np.testing.assert_allclose(lhs, rhs, rtol=1e-9, atol=1e-12)


def test_returns_real_float64_without_aliasing_inputs():
    x = np.array([1.0, 2.0])
    h = np.array([1.0])
    y = convolve_linear(x, h)
    assert y.dtype == np.float64
    y[0] = 99.0
    assert x[0] == 1.0


def test_rejects_multichannel_input():
    with pytest.raises(ValueError):
        convolve_linear(np.ones((4, 2)), [1.0])
