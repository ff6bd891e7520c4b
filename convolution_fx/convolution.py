from __future__ import annotations

import numpy as np

from .dsp_utils import as_channel
from .spectral import forward, inverse


def output_length(n_signal: int, n_impulse: int) -> int:
    return max(0, n_signal + n_impulse - 1)


def convolve_linear(x, h) -> np.ndarray:
    """Linear convolution of two real sequences through the frequency domain.

    Both inputs are zero-padded to ``len(x) + len(h) - 1`` so the circular
    product of their spectra carries no wraparound.
    """
    x = as_channel(x, "signal")
    h = as_channel(h, "impulse")
    length = output_length(x.size, h.size)
    if x.size == 0 or h.size == 0:
        # An empty operand has an all-zero spectrum.
        return np.zeros(length, dtype=np.float64)

    x_padded = np.zeros(length, dtype=np.complex128)
    h_padded = np.zeros(length, dtype=np.complex128)
    x_padded[: x.size] = x
    h_padded[: h.size] = h

    product = forward(x_padded) * forward(h_padded)
    return inverse(product).real.copy()
