from __future__ import annotations

import numpy as np

from .config import NEUTRAL_WIDTH_PERCENT
from .dsp_utils import mid_side_merge, mid_side_split


def width_active(width_percent: float) -> bool:
    return width_percent != NEUTRAL_WIDTH_PERCENT


def apply_width(left: np.ndarray, right: np.ndarray, width_percent: float) -> int:
    """Scale the side signal by ``width_percent / 100``, in place.

    0 collapses to mono, 100 is identity, 200 doubles the side. Only the
    first ``min(len(left), len(right))`` samples are touched; returns that
    count.
    """
    n = min(len(left), len(right))
    if n == 0:
        return 0
    mid, side = mid_side_split(left[:n], right[:n])
    side = side * (width_percent / 100.0)
    new_left, new_right = mid_side_merge(mid, side)
    left[:n] = new_left
    right[:n] = new_right
    return n
