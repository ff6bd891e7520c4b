from __future__ import annotations

import numpy as np

from .config import NORMALIZE_THRESHOLD
from .dsp_utils import as_channel, db_to_lin


def apply_gain(signal, gain_db: float) -> np.ndarray:
    return as_channel(signal) * db_to_lin(gain_db)


def mix_dry_wet(dry, wet, dry_wet_percent: float) -> np.ndarray:
    """Blend dry and wet; the output always has the wet signal's length.

    Dry samples past the end of the dry buffer count as silence.
    """
    dry = as_channel(dry, "dry")
    wet = as_channel(wet, "wet")
    wet_ratio = dry_wet_percent / 100.0
    dry_ratio = 1.0 - wet_ratio

    dry_aligned = np.zeros_like(wet)
    n = min(dry.size, wet.size)
    dry_aligned[:n] = dry[:n]
    return dry_aligned * dry_ratio + wet * wet_ratio


def normalize_peak(signal) -> tuple[np.ndarray, float | None]:
    """Divide by the signed extremal sample when its magnitude exceeds 1.0.

    Dividing by a negative peak flips the channel's polarity. Returns the
    (possibly unchanged) signal and the divisor used, or None when skipped.
    """
    signal = as_channel(signal)
    if signal.size == 0:
        return signal, None
    peak_index = int(np.argmax(np.abs(signal)))
    peak = float(signal[peak_index])
    magnitude = abs(peak)
    if magnitude == 0.0 or magnitude <= NORMALIZE_THRESHOLD:
        return signal, None
    return signal / peak, peak
