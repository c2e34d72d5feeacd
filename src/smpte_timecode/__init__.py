"""SMPTE timecode arithmetic with drop-frame and pulldown support."""

from .helpers import TimecodeAttributes, exact_frame_rate, is_valid_timecode_string
from .timecode import (
    DEFAULT_FRAME_RATE,
    FrameRateMismatchError,
    InvalidFieldError,
    ParseError,
    Timecode,
    TimecodeBuilder,
    TimecodeError,
    compare,
)

__version__ = "1.0.0"

__all__ = [
    "DEFAULT_FRAME_RATE",
    "FrameRateMismatchError",
    "InvalidFieldError",
    "ParseError",
    "Timecode",
    "TimecodeAttributes",
    "TimecodeBuilder",
    "TimecodeError",
    "compare",
    "exact_frame_rate",
    "is_valid_timecode_string",
]
