from __future__ import annotations

import json
import logging
import time
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

import numpy as np
import pyloudnorm as pyln

from .dsp_utils import lin_to_db, peak_dbfs, rms

LOG = logging.getLogger(__name__)

# pyloudnorm gates in 400 ms blocks; shorter buffers cannot be measured.
_MIN_LOUDNESS_SECONDS = 0.4
SILENCE_FLOOR_DB = float(lin_to_db(0.0))


@dataclass
class RenderReport:
    peak_dbfs: float
    rms_db: float
    lufs: float
    correlation: float
    duration_s: float
    clipped_samples: int


def stereo_correlation(stereo: np.ndarray) -> float:
    left = stereo[:, 0]
    right = stereo[:, 1]
    denom = (np.linalg.norm(left) * np.linalg.norm(right)) + 1e-9
    return float(np.sum(left * right) / denom)


def integrated_loudness(stereo: np.ndarray, sr: int) -> float:
    if stereo.shape[0] < int(_MIN_LOUDNESS_SECONDS * sr):
        return float(lin_to_db(rms(stereo)))
    meter = pyln.Meter(sr)
    loudness = float(meter.integrated_loudness(stereo))
    # Fully gated (silent) input measures -inf, which JSON cannot hold.
    return loudness if np.isfinite(loudness) else SILENCE_FLOOR_DB


def analyze_render(stereo: np.ndarray, sr: int) -> RenderReport:
    stereo = np.asarray(stereo, dtype=np.float64)
    return RenderReport(
        peak_dbfs=peak_dbfs(stereo),
        rms_db=float(lin_to_db(rms(stereo))),
        lufs=integrated_loudness(stereo, sr),
        correlation=stereo_correlation(stereo),
        duration_s=float(stereo.shape[0] / sr) if sr else 0.0,
        clipped_samples=int(np.count_nonzero(np.abs(stereo) > 1.0)),
    )


class RenderLog:
    """Append-only JSON log of render reports."""

    def __init__(self, log_path: str | Path = "render_log.json"):
        self.log_path = Path(log_path)
        self.logs = self._load()

    def _load(self) -> list[dict]:
        if not self.log_path.exists():
            return []
        try:
            data = json.loads(self.log_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError:
            LOG.warning("Render log %s is not valid JSON; starting a new one", self.log_path)
            return []
        return data if isinstance(data, list) else []

    def _write(self) -> None:
        self.log_path.parent.mkdir(parents=True, exist_ok=True)
        self.log_path.write_text(json.dumps(self.logs, indent=2), encoding="utf-8")

    def append(self, name: str, report: RenderReport, settings: dict[str, Any] | None = None) -> dict:
        entry = {
            "timestamp": time.strftime("%Y-%m-%d %H:%M:%S"),
            "render_name": name,
            "settings": settings or {},
            "metrics": asdict(report),
        }
        self.logs.append(entry)
        self._write()
        return entry
