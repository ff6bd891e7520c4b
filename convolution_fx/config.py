from __future__ import annotations

from typing import Final

# Low-pass runs only below this cutoff; at 20 kHz the stage is skipped.
LOW_PASS_BYPASS_HZ: Final[float] = 20000.0

# High-pass runs only above this cutoff; at 20 Hz the stage is skipped.
HIGH_PASS_BYPASS_HZ: Final[float] = 20.0

# Width of 100% leaves the stereo image untouched.
NEUTRAL_WIDTH_PERCENT: Final[float] = 100.0

# Peaks above full scale trigger normalization.
NORMALIZE_THRESHOLD: Final[float] = 1.0

DEFAULT_SUBTYPE: Final[str] = "PCM_24"
SUPPORTED_EXTENSIONS: Final[tuple[str, ...]] = (".wav", ".flac", ".aiff", ".aif")

LOG_FORMAT: Final[str] = "%(asctime)s | %(levelname)-7s | %(message)s"
