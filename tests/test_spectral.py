import numpy as np
import pytest

from convolution_fx.spectral import bin_frequencies, forward, inverse


def direct_dft(x: np.ndarray) -> np.ndarray:
    n = x.size
    k = np.arange(n)
    twiddle = np.exp(-2j * np.pi * np.outer(k, k) / n)
    return twiddle @ x


@pytest.mark.parametrize("n", [1, 2, 7, 12, 97, 128])
def test_forward_matches_direct_dft(n):
    rng = np.random.default_rng(n)
    x = rng.standard_normal(n) + 1j * rng.standard_normal(n)
    np.testing.assert_allclose(forward(x), direct_dft(x), rtol=1e-9, atol=1e-9)


@pytest.mark.parametrize("n", [1, 5, 64, 1000])
def test_round_trip(n):
    rng = np.random.default_rng(100 + n)
    x = rng.standard_normal(n) + 1j * rng.standard_normal(n)
    np.testing.assert_allclose(inverse(forward(x)), x, atol=1e-12)


def test_forward_is_unnormalized():
    spectrum = forward(np.ones(8))
    assert spectrum[0] == pytest.approx(8.0)
    np.testing.assert_allclose(spectrum[1:], 0.0, atol=1e-12)


def test_inverse_scales_by_one_over_n():
    out = inverse(np.full(4, 4.0 + 0j))
    np.testing.assert_allclose(out, [4.0, 0.0, 0.0, 0.0], atol=1e-12)


def test_calls_do_not_touch_input():
    x = np.array([1.0, 2.0, 3.0], dtype=np.complex128)
    snapshot = x.copy()
    y = forward(x)
    y[:] = 0
    np.testing.assert_array_equal(x, snapshot)


def test_empty_buffers():
    assert forward([]).size == 0
    assert inverse([]).size == 0
    assert bin_frequencies(0, 48000).size == 0


def test_bin_frequencies_are_not_mirrored():
    freqs = bin_frequencies(8, 800)
    np.testing.assert_allclose(freqs, [0, 100, 200, 300, 400, 500, 600, 700])
