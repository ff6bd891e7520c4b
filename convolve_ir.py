"""
Convolution FX
--------------
Entry point for the offline impulse-response convolution processor.

Usage:
  python convolve_ir.py "input.wav" "ir.wav" "output.wav"
  python convolve_ir.py "input.wav" "ir.wav" "output.wav" '{"dryWet":70,"stereoWidth":140}'
  python convolve_ir.py "input.wav" "ir.wav" "output.flac" --preset "Wide Hall" --subtype PCM_16
"""

from convolution_fx.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
