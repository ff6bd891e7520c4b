from __future__ import annotations

import enum
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field

import numpy as np

from .convolution import convolve_linear
from .dsp_utils import as_channel, interleave, split_channels
from .filters import high_pass, high_pass_active, low_pass, low_pass_active
from .mix import apply_gain, mix_dry_wet, normalize_peak
from .settings import EffectSettings
from .stereo import apply_width, width_active

LOG = logging.getLogger(__name__)


class ProcessStatus(enum.Enum):
    OK = "ok"
    EMPTY_INPUT = "empty_input"
    LENGTH_MISMATCH = "length_mismatch"


@dataclass
class ProcessResult:
    status: ProcessStatus
    output: np.ndarray
    sample_rate: int
    wet_length: int
    stages: list[str] = field(default_factory=list)
    normalization: tuple[float | None, float | None] = (None, None)

    @property
    def ok(self) -> bool:
        return self.status is ProcessStatus.OK

    @property
    def n_frames(self) -> int:
        return int(self.output.shape[0])


@dataclass
class _Channel:
    dry: np.ndarray
    impulse: np.ndarray
    wet: np.ndarray | None = None
    divisor: float | None = None


class ConvolutionProcessor:
    """Runs the fixed convolution effect chain over one stereo pair."""

    def __init__(self, settings: EffectSettings | None = None, parallel_channels: bool = False):
        self.settings = settings or EffectSettings()
        self.parallel_channels = bool(parallel_channels)

    def _classify(self, dry_left, dry_right, ir_left, ir_right) -> ProcessStatus:
        if min(dry_left.size, dry_right.size, ir_left.size, ir_right.size) == 0:
            return ProcessStatus.EMPTY_INPUT
        if dry_left.size != dry_right.size or ir_left.size != ir_right.size:
            return ProcessStatus.LENGTH_MISMATCH
        return ProcessStatus.OK

    def _for_each_channel(self, fn, channels: list[_Channel]) -> None:
        if self.parallel_channels:
            with ThreadPoolExecutor(max_workers=2) as pool:
                list(pool.map(fn, channels))
        else:
            for channel in channels:
                fn(channel)

    def _wet_stages(self) -> list[str]:
        stages = ["convolve"]
        if low_pass_active(self.settings.low_pass_freq):
            stages.append("low_pass")
        if high_pass_active(self.settings.high_pass_freq):
            stages.append("high_pass")
        return stages

    def _render_wet(self, channel: _Channel, sample_rate: int) -> None:
        s = self.settings
        wet = convolve_linear(channel.dry, channel.impulse)
        if low_pass_active(s.low_pass_freq):
            wet = low_pass(wet, s.low_pass_freq, sample_rate)
        if high_pass_active(s.high_pass_freq):
            wet = high_pass(wet, s.high_pass_freq, sample_rate)
        channel.wet = wet

    def _finish(self, channel: _Channel) -> None:
        s = self.settings
        out = mix_dry_wet(channel.dry, channel.wet, s.dry_wet)
        out = apply_gain(out, s.output_gain)
        if s.normalize:
            out, channel.divisor = normalize_peak(out)
        channel.wet = out

    def process(self, dry_left, dry_right, ir_left, ir_right, sample_rate: int) -> ProcessResult:
        s = self.settings
        dry_left = as_channel(dry_left, "dry_left")
        dry_right = as_channel(dry_right, "dry_right")
        ir_left = as_channel(ir_left, "ir_left")
        ir_right = as_channel(ir_right, "ir_right")

        status = self._classify(dry_left, dry_right, ir_left, ir_right)
        if status is not ProcessStatus.OK:
            LOG.warning(
                "Input %s: dry %d/%d samples, impulse %d/%d samples",
                status.value,
                dry_left.size,
                dry_right.size,
                ir_left.size,
                ir_right.size,
            )

        stages = ["input_gain", "impulse_gain"]
        left = _Channel(apply_gain(dry_left, s.input_gain), apply_gain(ir_left, s.impulse_gain))
        right = _Channel(apply_gain(dry_right, s.input_gain), apply_gain(ir_right, s.impulse_gain))
        channels = [left, right]

        stages.extend(self._wet_stages())
        self._for_each_channel(lambda ch: self._render_wet(ch, sample_rate), channels)
        LOG.debug("Wet stages %s -> %d/%d samples", stages[2:], left.wet.size, right.wet.size)

        if width_active(s.stereo_width):
            processed = apply_width(left.wet, right.wet, s.stereo_width)
            stages.append("stereo_width")
            LOG.debug("Stereo width %g%% over %d samples", s.stereo_width, processed)

        stages.extend(["dry_wet", "output_gain"])
        if s.normalize:
            stages.append("normalize")
        self._for_each_channel(self._finish, channels)

        output = interleave(left.wet, right.wet)
        stages.append("interleave")
        LOG.info(
            "Processed %d dry + %d impulse samples -> %d frames (%s)",
            dry_left.size,
            ir_left.size,
            output.shape[0],
            status.value,
        )
        return ProcessResult(
            status=status,
            output=output,
            sample_rate=int(sample_rate),
            wet_length=max(left.wet.size, right.wet.size),
            stages=stages,
            normalization=(left.divisor, right.divisor),
        )

    def process_stereo(self, dry: np.ndarray, impulse: np.ndarray, sample_rate: int) -> ProcessResult:
        dry_left, dry_right = split_channels(dry)
        ir_left, ir_right = split_channels(impulse)
        return self.process(dry_left, dry_right, ir_left, ir_right, sample_rate)
