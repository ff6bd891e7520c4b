from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from dataclasses import replace as _replace
from pathlib import Path
from typing import Any, Mapping

from .errors import SettingsError

LOG = logging.getLogger(__name__)

# Wire names used by the JSON settings string, mapped to attribute names.
WIRE_KEYS: dict[str, str] = {
    "dryWet": "dry_wet",
    "inputGain": "input_gain",
    "outputGain": "output_gain",
    "impulseGain": "impulse_gain",
    "lowPassFreq": "low_pass_freq",
    "highPassFreq": "high_pass_freq",
    "stereoWidth": "stereo_width",
    "normalize": "normalize",
}


def _parse_bool(key: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered == "true":
            return True
        if lowered == "false":
            return False
    raise SettingsError(f"{key}: expected a boolean, got {value!r}")


def _parse_float(key: str, value: Any) -> float:
    if isinstance(value, bool):
        raise SettingsError(f"{key}: expected a number, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise SettingsError(f"{key}: expected a number, got {value!r}") from exc


@dataclass(frozen=True)
class EffectSettings:
    """Per-run effect parameters. Values are never clamped."""

    dry_wet: float = 50.0
    input_gain: float = 0.0
    output_gain: float = 0.0
    impulse_gain: float = 0.0
    low_pass_freq: float = 20000.0
    high_pass_freq: float = 20.0
    stereo_width: float = 100.0
    normalize: bool = True

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any], base: "EffectSettings | None" = None) -> "EffectSettings":
        """Override ``base`` (or the defaults) with any recognised keys.

        Both the camelCase wire names and the attribute names are accepted;
        anything else is ignored.
        """
        base = base or cls()
        attr_names = {f.name for f in fields(cls)}
        overrides: dict[str, Any] = {}
        for key, value in mapping.items():
            attr = WIRE_KEYS.get(key, key)
            if attr not in attr_names:
                LOG.debug("Ignoring unknown setting %r", key)
                continue
            if attr == "normalize":
                overrides[attr] = _parse_bool(key, value)
            else:
                overrides[attr] = _parse_float(key, value)
        return _replace(base, **overrides)

    @classmethod
    def from_json(cls, text: str, base: "EffectSettings | None" = None) -> "EffectSettings":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise SettingsError(f"Settings are not valid JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise SettingsError("Settings JSON must be an object")
        return cls.from_mapping(data, base=base)

    def replace(self, **overrides: Any) -> "EffectSettings":
        return _replace(self, **overrides)

    def to_dict(self) -> dict[str, Any]:
        values = asdict(self)
        return {wire: values[attr] for wire, attr in WIRE_KEYS.items()}

    def describe(self) -> str:
        return (
            f"dryWet={self.dry_wet:g}%, inputGain={self.input_gain:g}dB, "
            f"outputGain={self.output_gain:g}dB, impulseGain={self.impulse_gain:g}dB, "
            f"lowPassFreq={self.low_pass_freq:g}Hz, highPassFreq={self.high_pass_freq:g}Hz, "
            f"stereoWidth={self.stereo_width:g}%, normalize={'true' if self.normalize else 'false'}"
        )


DEFAULT_PRESETS: dict[str, dict[str, Any]] = {
    "Default": {},
    "Room": {
        "dryWet": 30.0,
        "impulseGain": -3.0,
        "lowPassFreq": 12000.0,
    },
    "Cabinet": {
        "dryWet": 100.0,
        "lowPassFreq": 6000.0,
        "highPassFreq": 80.0,
        "stereoWidth": 0.0,
    },
    "Wide Hall": {
        "dryWet": 45.0,
        "impulseGain": -6.0,
        "highPassFreq": 120.0,
        "stereoWidth": 150.0,
    },
    "Mono Check": {
        "stereoWidth": 0.0,
        "normalize": False,
    },
}


class PresetManager:
    """Load/save named settings presets."""

    def __init__(self, presets_path: str | Path | None = None):
        self.presets_path = Path(presets_path) if presets_path else None

    def load_presets(self) -> dict[str, dict[str, Any]]:
        merged = {name: dict(values) for name, values in DEFAULT_PRESETS.items()}
        if self.presets_path is None or not self.presets_path.exists():
            return merged
        try:
            user = json.loads(self.presets_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise SettingsError(f"Could not read presets from {self.presets_path}: {exc}") from exc
        if not isinstance(user, dict):
            raise SettingsError(f"Presets file {self.presets_path} must hold a JSON object")
        for name, values in user.items():
            if not isinstance(values, dict):
                raise SettingsError(f"Preset {name!r} must be a JSON object")
            merged[name] = dict(values)
        return merged

    def save_presets(self, presets: dict[str, dict[str, Any]]) -> None:
        if self.presets_path is None:
            raise SettingsError("No presets path configured")
        self.presets_path.parent.mkdir(parents=True, exist_ok=True)
        self.presets_path.write_text(json.dumps(presets, indent=2), encoding="utf-8")

    def list_presets(self) -> list[str]:
        return sorted(self.load_presets().keys())

    def get_preset(self, name: str) -> EffectSettings:
        presets = self.load_presets()
        if name not in presets:
            raise SettingsError(f"Unknown preset {name!r}; available: {', '.join(sorted(presets))}")
        return EffectSettings.from_mapping(presets[name])
