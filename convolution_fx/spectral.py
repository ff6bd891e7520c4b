from __future__ import annotations

import numpy as np
from scipy import fft as sp_fft


def forward(x) -> np.ndarray:
    """Unnormalized DFT of a complex buffer of any length."""
    buf = np.asarray(x, dtype=np.complex128)
    if buf.size == 0:
        return np.zeros(0, dtype=np.complex128)
    return sp_fft.fft(buf, norm="backward")


def inverse(spectrum) -> np.ndarray:
    """Inverse DFT scaled by 1/N, so inverse(forward(x)) == x."""
    buf = np.asarray(spectrum, dtype=np.complex128)
    if buf.size == 0:
        return np.zeros(0, dtype=np.complex128)
    return sp_fft.ifft(buf, norm="backward")


def bin_frequencies(n: int, sample_rate: float) -> np.ndarray:
    """Nominal frequency of every bin, i * sr / n for i in [0, n).

    Bins past n/2 are not mirrored, so they report frequencies above
    Nyquist. The filters mask against these values as-is.
    """
    if n <= 0:
        return np.zeros(0, dtype=np.float64)
    return np.arange(n, dtype=np.float64) * float(sample_rate) / n
