from __future__ import annotations

import numpy as np


def as_channel(signal, name: str = "signal") -> np.ndarray:
    """Return an owned float64 copy of a single channel."""
    arr = np.array(signal, dtype=np.float64, copy=True)
    if arr.ndim != 1:
        raise ValueError(f"{name} must be one-dimensional, got shape {arr.shape}")
    return arr


def ensure_stereo(audio: np.ndarray) -> np.ndarray:
    """Return audio as shape (n_samples, 2)."""
    audio = np.asarray(audio, dtype=np.float64)
    if audio.ndim == 1:
        return np.stack([audio, audio], axis=-1)
    if audio.ndim != 2:
        raise ValueError(f"Unexpected audio shape: {audio.shape}")
    if audio.shape[1] == 1:
        return np.repeat(audio, 2, axis=1)
    if audio.shape[1] == 2:
        return audio
    if audio.shape[0] == 2 and audio.shape[1] > 2:
        return audio.T
    raise ValueError(f"Unexpected audio shape: {audio.shape}")


def split_channels(stereo: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    stereo = np.asarray(stereo, dtype=np.float64)
    if stereo.ndim != 2 or stereo.shape[1] != 2:
        raise ValueError(f"Expected (n_samples, 2) audio, got shape {stereo.shape}")
    return stereo[:, 0].copy(), stereo[:, 1].copy()


def interleave(left: np.ndarray, right: np.ndarray) -> np.ndarray:
    """Stack two channels into (n_samples, 2); a shorter channel is zero-padded."""
    n = max(len(left), len(right))
    out = np.zeros((n, 2), dtype=np.float64)
    out[: len(left), 0] = left
    out[: len(right), 1] = right
    return out


def db_to_lin(db: float | np.ndarray) -> float | np.ndarray:
    if np.ndim(db) == 0:
        return float(10.0 ** (float(db) / 20.0))
    return np.asarray(10.0 ** (np.asarray(db) / 20.0))


def lin_to_db(x: float | np.ndarray, eps: float = 1e-12) -> float | np.ndarray:
    if np.ndim(x) == 0:
        return float(20.0 * np.log10(max(float(x), eps)))
    return 20.0 * np.log10(np.maximum(x, eps))


def mid_side_split(left: np.ndarray, right: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    mid = (left + right) / 2.0
    side = (left - right) / 2.0
    return mid, side


def mid_side_merge(mid: np.ndarray, side: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    return mid + side, mid - side


def rms(x: np.ndarray, eps: float = 1e-12) -> float:
    if x.size == 0:
        return 0.0
    return float(np.sqrt(np.mean(x * x) + eps))


def peak_dbfs(x: np.ndarray, eps: float = 1e-12) -> float:
    peak = float(np.max(np.abs(x))) if x.size else 0.0
    return float(20.0 * np.log10(peak + eps))
