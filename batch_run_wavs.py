"""python batch_run_wavs.py
  --folder "C:/Users/goku/Downloads/"
  --ir "C:/Users/goku/IRs/plate.wav"
  --recursive
  --out_dir "C:/Users/iProg/Desktop/"
  --preset "Room"
  --limit 3
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path

from convolution_fx.audio_io import render_file
from convolution_fx.config import DEFAULT_SUBTYPE, LOG_FORMAT
from convolution_fx.errors import ConvolutionFxError
from convolution_fx.settings import EffectSettings, PresetManager


def find_wavs(folder: Path, recursive: bool) -> list[Path]:
    """
    Returns a sorted list of .wav files inside folder.

    If recursive=True, searches subfolders too.
    """
    if recursive:
        wavs = folder.rglob("*.wav")
    else:
        wavs = folder.glob("*.wav")

    return sorted(p for p in wavs if p.is_file())


def output_path_for(wav_path: Path, out_dir: Path | None, suffix: str) -> Path:
    target_dir = out_dir or wav_path.parent
    if suffix.lower().endswith(".wav"):
        out_name = f"{wav_path.stem}{suffix}"
    else:
        out_name = f"{wav_path.stem}{suffix}.wav"
    return target_dir / out_name


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Convolve every .wav file in a folder with one impulse response.")
    parser.add_argument("--folder", required=True, help="Folder containing .wav files.")
    parser.add_argument("--ir", required=True, help="Impulse response applied to each file.")
    parser.add_argument("--recursive", action="store_true", help="Search subfolders too.")
    parser.add_argument("--out_dir", help="Output folder for processed files.")
    parser.add_argument("--preset", help="Preset name.")
    parser.add_argument("--settings", help="Settings JSON applied over the preset.")
    parser.add_argument("--suffix", default="_conv", help="Suffix appended to output file names.")
    parser.add_argument("--subtype", default=DEFAULT_SUBTYPE, help="soundfile subtype for the outputs.")
    parser.add_argument("--limit", type=int, default=0, help="Optional max files to process (0 = no limit).")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)

    folder = Path(args.folder).expanduser().resolve()
    ir_path = Path(args.ir).expanduser().resolve()
    out_dir = Path(args.out_dir).expanduser().resolve() if args.out_dir else None

    if not folder.exists() or not folder.is_dir():
        print(f"ERROR: Folder not found: {folder}")
        return 2

    if not ir_path.exists() or not ir_path.is_file():
        print(f"ERROR: Impulse response not found: {ir_path}")
        return 2

    try:
        settings = PresetManager().get_preset(args.preset) if args.preset else EffectSettings()
        if args.settings:
            settings = EffectSettings.from_json(args.settings, base=settings)
    except ConvolutionFxError as exc:
        print(f"ERROR: {exc}")
        return 2

    wav_files = find_wavs(folder, recursive=args.recursive)
    if out_dir is not None:
        wav_files = [p for p in wav_files if out_dir not in p.parents]

    if not wav_files:
        print(f"No .wav files found in: {folder}")
        return 0
    if args.limit and args.limit > 0:
        wav_files = wav_files[: args.limit]

    print(f"Found {len(wav_files)} WAV files.")
    failures: list[Path] = []

    for wav_path in wav_files:
        out_path = output_path_for(wav_path, out_dir, args.suffix or "")
        print(f"\n> {wav_path.name} -> {out_path}")
        try:
            result = render_file(wav_path, ir_path, out_path, settings=settings, subtype=args.subtype)
        except ConvolutionFxError as exc:
            print(f"FAILED: {exc}")
            failures.append(wav_path)
            continue
        if not result.ok:
            print(f"WARNING: {result.status.value}")

    print("\n=== Batch Summary ===")
    print(f"Total: {len(wav_files)}")
    print(f"Failed: {len(failures)}")

    if failures:
        print("\nFailed files:")
        for f in failures:
            print(f"- {f}")

        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
