from __future__ import annotations

import numpy as np

from .config import HIGH_PASS_BYPASS_HZ, LOW_PASS_BYPASS_HZ
from .dsp_utils import as_channel
from .spectral import bin_frequencies, forward, inverse


def low_pass_active(cutoff_hz: float) -> bool:
    return cutoff_hz < LOW_PASS_BYPASS_HZ


def high_pass_active(cutoff_hz: float) -> bool:
    return cutoff_hz > HIGH_PASS_BYPASS_HZ


def _brick_wall(signal, sample_rate: float, reject) -> np.ndarray:
    signal = as_channel(signal)
    if signal.size == 0:
        return signal
    spectrum = forward(signal)
    freqs = bin_frequencies(signal.size, sample_rate)
    spectrum[reject(freqs)] = 0.0
    return inverse(spectrum).real.copy()


def low_pass(signal, cutoff_hz: float, sample_rate: float) -> np.ndarray:
    """Zero every bin whose nominal frequency is above ``cutoff_hz``.

    The whole buffer is transformed at once with no window or transition
    band, so the output rings around sharp edges.
    """
    return _brick_wall(signal, sample_rate, lambda freqs: freqs > cutoff_hz)


def high_pass(signal, cutoff_hz: float, sample_rate: float) -> np.ndarray:
    """Zero every bin whose nominal frequency is below ``cutoff_hz``."""
    return _brick_wall(signal, sample_rate, lambda freqs: freqs < cutoff_hz)
