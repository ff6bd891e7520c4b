import numpy as np

from convolution_fx.stereo import apply_width, width_active


def test_width_100_is_identity():
    rng = np.random.default_rng(5)
    left = rng.standard_normal(50)
    right = rng.standard_normal(50)
    l0, r0 = left.copy(), right.copy()
    apply_width(left, right, 100.0)
    np.testing.assert_allclose(left, l0, atol=1e-12)
    np.testing.assert_allclose(right, r0, atol=1e-12)


def test_width_0_collapses_to_mid():
    rng = np.random.default_rng(6)
    left = rng.standard_normal(40)
    right = rng.standard_normal(40)
    mid = (left + right) / 2.0
    apply_width(left, right, 0.0)
    np.testing.assert_array_equal(left, right)
    np.testing.assert_allclose(left, mid, atol=1e-15)


def test_concrete_mono_collapse():
    left = np.array([1.0, 1.0])
    right = np.array([0.0, 0.0])
    assert apply_width(left, right, 0.0) == 2
    np.testing.assert_allclose(left, [0.5, 0.5])
    np.testing.assert_allclose(right, [0.5, 0.5])


def test_width_200_doubles_side():
    left = np.array([1.0])
    right = np.array([0.0])
    apply_width(left, right, 200.0)
    np.testing.assert_allclose(left, [1.5])
    np.testing.assert_allclose(right, [-0.5])


def test_negative_width_extrapolates():
    left = np.array([1.0])
    right = np.array([0.0])
    apply_width(left, right, -100.0)
    np.testing.assert_allclose(left, [0.0])
    np.testing.assert_allclose(right, [1.0])


def test_length_mismatch_truncates_and_leaves_tail():
    left = np.array([1.0, 1.0, 1.0, 7.0])
    right = np.array([0.0, 0.0])
    processed = apply_width(left, right, 0.0)
    assert processed == 2
    np.testing.assert_allclose(left, [0.5, 0.5, 1.0, 7.0])
    np.testing.assert_allclose(right, [0.5, 0.5])


def test_empty_channels():
    assert apply_width(np.zeros(0), np.zeros(3), 50.0) == 0


def test_width_active():
    assert not width_active(100.0)
    assert width_active(99.0)
    assert width_active(0.0)
