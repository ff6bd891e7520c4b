from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import numpy as np
import librosa
import soundfile as sf

from .config import DEFAULT_SUBTYPE, SUPPORTED_EXTENSIONS
from .dsp_utils import ensure_stereo
from .engine import ConvolutionProcessor, ProcessResult
from .errors import AudioFileError
from .settings import EffectSettings

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImpulseResponse:
    name: str
    path: Path
    category: str


def list_impulse_responses(root: str | Path) -> list[ImpulseResponse]:
    """Catalogue an IR library laid out as one subfolder per category.

    Only ``.wav`` files inside category folders are listed; files at the
    top level are ignored. A missing root gives an empty list.
    """
    root = Path(root)
    if not root.is_dir():
        LOG.warning("Impulse response library not found: %s", root)
        return []

    categories = sorted(p for p in root.iterdir() if p.is_dir())
    found: list[ImpulseResponse] = []
    for category in categories:
        wavs = sorted(p for p in category.iterdir() if p.is_file() and p.suffix.lower() == ".wav")
        found.extend(ImpulseResponse(name=p.stem, path=p, category=category.name) for p in wavs)
    LOG.info("Found %d impulse responses in %d categories", len(found), len(categories))
    return found


def resample_stereo(stereo: np.ndarray, orig_sr: int, target_sr: int) -> np.ndarray:
    if orig_sr == target_sr or stereo.shape[0] == 0:
        return stereo
    left = librosa.resample(stereo[:, 0], orig_sr=orig_sr, target_sr=target_sr)
    right = librosa.resample(stereo[:, 1], orig_sr=orig_sr, target_sr=target_sr)
    return np.stack([left, right], axis=-1).astype(np.float64)


def load_stereo(path: str | Path, target_sr: int | None = None) -> tuple[np.ndarray, int]:
    """Read an audio file as float64 (n_samples, 2), optionally resampled."""
    path = Path(path)
    if not path.is_file():
        raise AudioFileError(f"Audio file not found: {path}")
    try:
        audio, sr = sf.read(str(path), dtype="float64", always_2d=True)
    except (RuntimeError, OSError) as exc:
        raise AudioFileError(f"Error opening {path}: {exc}") from exc
    if audio.shape[1] > 2:
        raise AudioFileError(f"{path} has {audio.shape[1]} channels; only mono or stereo is supported")

    stereo = ensure_stereo(audio)
    if target_sr is not None and target_sr != sr:
        LOG.info("Resampling %s from %d Hz to %d Hz", path.name, sr, target_sr)
        stereo = resample_stereo(stereo, sr, target_sr)
        sr = target_sr
    LOG.debug("Loaded %s: %d frames @ %d Hz", path, stereo.shape[0], sr)
    return stereo, int(sr)


def write_stereo(path: str | Path, stereo: np.ndarray, sr: int, subtype: str = DEFAULT_SUBTYPE) -> Path:
    path = Path(path)
    if path.suffix.lower() not in SUPPORTED_EXTENSIONS:
        raise AudioFileError(
            f"Unsupported output format {path.suffix!r}; use one of {', '.join(SUPPORTED_EXTENSIONS)}"
        )
    path.parent.mkdir(parents=True, exist_ok=True)
    try:
        sf.write(str(path), np.asarray(stereo, dtype=np.float64), int(sr), subtype=subtype)
    except (RuntimeError, OSError, ValueError, TypeError) as exc:
        raise AudioFileError(f"Error creating output file {path}: {exc}") from exc
    LOG.debug("Wrote %d frames to %s (%s)", len(stereo), path, subtype)
    return path


def render_file(
    input_path: str | Path,
    impulse_path: str | Path,
    output_path: str | Path,
    settings: EffectSettings | None = None,
    subtype: str = DEFAULT_SUBTYPE,
    parallel_channels: bool = False,
) -> ProcessResult:
    """Convolve ``input_path`` with ``impulse_path`` and write ``output_path``.

    The impulse response is resampled to the input's sample rate when
    the two differ. Both files are read before any processing starts.
    """
    dry, sr = load_stereo(input_path)
    impulse, _ = load_stereo(impulse_path, target_sr=sr)
    LOG.info("Input signal size: %d", dry.shape[0])
    LOG.info("Impulse response size: %d", impulse.shape[0])

    processor = ConvolutionProcessor(settings, parallel_channels=parallel_channels)
    result = processor.process_stereo(dry, impulse, sr)
    write_stereo(output_path, result.output, sr, subtype=subtype)
    LOG.info("Writing to file: %s (%d frames)", output_path, result.n_frames)
    return result
