import numpy as np
import pytest

from convolution_fx.mix import apply_gain, mix_dry_wet, normalize_peak


def test_gain_round_trip():
    rng = np.random.default_rng(9)
    x = rng.standard_normal(100)
    np.testing.assert_allclose(apply_gain(apply_gain(x, 6.0), -6.0), x, rtol=1e-12)


def test_gain_factor():
    np.testing.assert_allclose(apply_gain([1.0, -2.0], 20.0), [10.0, -20.0])
    np.testing.assert_allclose(apply_gain([1.0], 0.0), [1.0])


def test_gain_returns_new_buffer():
    x = np.array([1.0, 2.0])
    apply_gain(x, 6.0)
    np.testing.assert_array_equal(x, [1.0, 2.0])


def test_fully_dry_pads_with_zeros():
    out = mix_dry_wet([1.0, 2.0], [5.0, 5.0, 5.0, 5.0], 0.0)
    np.testing.assert_allclose(out, [1.0, 2.0, 0.0, 0.0])


def test_fully_wet_ignores_dry():
    out = mix_dry_wet([1.0, 2.0], [5.0, 6.0, 7.0], 100.0)
    np.testing.assert_allclose(out, [5.0, 6.0, 7.0])


def test_half_mix():
    out = mix_dry_wet([1.0, 0.0, 0.0], [0.5, 0.5, 0.0, 0.0], 50.0)
    np.testing.assert_allclose(out, [0.75, 0.25, 0.0, 0.0])


def test_mix_keeps_wet_length_when_dry_is_longer():
    out = mix_dry_wet([1.0, 1.0, 1.0], [0.0], 0.0)
    np.testing.assert_allclose(out, [1.0])


def test_normalize_hot_signal_to_unit_peak():
    out, divisor = normalize_peak([0.5, 2.0, -1.0])
    assert divisor == pytest.approx(2.0)
    assert np.max(np.abs(out)) == pytest.approx(1.0)


def test_normalize_divides_by_signed_peak():
    out, divisor = normalize_peak([0.5, -4.0, 1.0])
    assert divisor == pytest.approx(-4.0)
    np.testing.assert_allclose(out, [-0.125, 1.0, -0.25])


def test_normalize_leaves_quiet_signal():
    x = [0.2, -1.0, 0.9]
    out, divisor = normalize_peak(x)
    assert divisor is None
    np.testing.assert_array_equal(out, x)


def test_normalize_silence_is_skipped():
    out, divisor = normalize_peak(np.zeros(8))
    assert divisor is None
    np.testing.assert_array_equal(out, np.zeros(8))
    assert np.isfinite(out).all()


def test_normalize_empty():
    out, divisor = normalize_peak([])
    assert out.size == 0
    assert divisor is None
