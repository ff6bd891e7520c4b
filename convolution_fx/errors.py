from __future__ import annotations


class ConvolutionFxError(Exception):
    """Base error for everything raised outside the numeric core."""


class SettingsError(ConvolutionFxError):
    """Settings could not be parsed or a preset is unknown."""


class AudioFileError(ConvolutionFxError):
    """An audio file is missing, unreadable, or could not be written."""
