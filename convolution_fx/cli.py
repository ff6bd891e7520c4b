from __future__ import annotations

import argparse
import logging
from pathlib import Path

from .analyzer import RenderLog, analyze_render
from .audio_io import list_impulse_responses, render_file
from .config import DEFAULT_SUBTYPE, LOG_FORMAT
from .errors import ConvolutionFxError
from .settings import EffectSettings, PresetManager

LOG = logging.getLogger("convolution_fx")

# argparse dest -> EffectSettings attribute
FLAG_FIELDS: dict[str, str] = {
    "dry_wet": "dry_wet",
    "input_gain": "input_gain",
    "output_gain": "output_gain",
    "impulse_gain": "impulse_gain",
    "low_pass": "low_pass_freq",
    "high_pass": "high_pass_freq",
    "width": "stereo_width",
}


def build_cli() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="convolution-fx",
        description="Convolve a stereo signal with an impulse response and apply the post chain.",
    )
    parser.add_argument("input", nargs="?", help="Dry input audio (wav/flac/aiff).")
    parser.add_argument("impulse", nargs="?", help="Impulse response audio.")
    parser.add_argument("output", nargs="?", help="Output path (.wav/.flac/.aiff).")
    parser.add_argument(
        "settings_json",
        nargs="?",
        help='Settings JSON, e.g. \'{"dryWet":50,"stereoWidth":120,"normalize":true}\'.',
    )
    parser.add_argument(
        "--list-irs",
        metavar="DIR",
        help="List the impulse responses in a category-per-folder library and exit.",
    )
    parser.add_argument("--preset", help="Named preset applied before JSON and flags.")
    parser.add_argument("--presets-file", help="Extra presets JSON merged over the built-ins.")
    parser.add_argument("--dry-wet", type=float, help="Wet percentage (0-100).")
    parser.add_argument("--input-gain", type=float, help="Input gain in dB.")
    parser.add_argument("--output-gain", type=float, help="Output gain in dB.")
    parser.add_argument("--impulse-gain", type=float, help="Impulse response gain in dB.")
    parser.add_argument("--low-pass", type=float, help="Low-pass cutoff in Hz (20000 = off).")
    parser.add_argument("--high-pass", type=float, help="High-pass cutoff in Hz (20 = off).")
    parser.add_argument("--width", type=float, help="Stereo width percentage (100 = unchanged).")
    parser.add_argument(
        "--no-normalize",
        dest="normalize",
        action="store_false",
        default=None,
        help="Skip per-channel peak normalization.",
    )
    parser.add_argument("--subtype", default=DEFAULT_SUBTYPE, help="soundfile subtype, e.g. PCM_16, PCM_24, FLOAT.")
    parser.add_argument("--threads", action="store_true", help="Process left/right channels on separate threads.")
    parser.add_argument("--log-json", help="Append a render report to this JSON log.")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def resolve_settings(args: argparse.Namespace) -> EffectSettings:
    settings = EffectSettings()
    if args.preset:
        settings = PresetManager(args.presets_file).get_preset(args.preset)
    if args.settings_json:
        settings = EffectSettings.from_json(args.settings_json, base=settings)
    overrides = {attr: getattr(args, dest) for dest, attr in FLAG_FIELDS.items() if getattr(args, dest) is not None}
    if args.normalize is not None:
        overrides["normalize"] = args.normalize
    return settings.replace(**overrides) if overrides else settings


def print_catalogue(root: str) -> None:
    irs = list_impulse_responses(root)
    if not irs:
        print(f"No impulse responses found in: {root}")
        return
    current = None
    for ir in irs:
        if ir.category != current:
            current = ir.category
            print(f"\n[{current}]")
        print(f"  {ir.name}  ({ir.path})")


def main(argv: list[str] | None = None) -> int:
    parser = build_cli()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)

    if args.list_irs:
        print_catalogue(args.list_irs)
        return 0
    if not (args.input and args.impulse and args.output):
        parser.error("input, impulse and output are required unless --list-irs is given")

    try:
        settings = resolve_settings(args)
        LOG.info("Using settings: %s", settings.describe())
        result = render_file(
            args.input,
            args.impulse,
            args.output,
            settings=settings,
            subtype=args.subtype,
            parallel_channels=args.threads,
        )
    except ConvolutionFxError as exc:
        LOG.error("%s", exc)
        return 1

    report = analyze_render(result.output, result.sample_rate)
    if args.log_json:
        RenderLog(args.log_json).append(Path(args.output).stem, report, settings.to_dict())
    LOG.info(
        "Processing complete (%s): %d frames | Peak %.2f dBFS | LUFS %.2f | Corr %.2f",
        result.status.value,
        result.n_frames,
        report.peak_dbfs,
        report.lufs,
        report.correlation,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
