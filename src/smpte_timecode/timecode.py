"""Timecode class for handling timecode calculations."""

# Standard Library Imports
from __future__ import annotations

import datetime
import logging
import math
import sys
from collections.abc import Mapping
from fractions import Fraction
from typing import Any, Union

from .helpers import (
    HOURS_IN_ONE_DAY,
    MINUTES_IN_ONE_HOUR,
    SECONDS_IN_ONE_MINUTE,
    TIMECODE_PATTERN,
    TIMESTAMP_PATTERN,
    TimecodeAttributes,
    _Framerate,
    _Number,
    _truncated_divmod,
    exact_frame_rate,
    is_valid_timecode_string,
)

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

logger = logging.getLogger(__name__)

DEFAULT_FRAME_RATE = 29.97

_FIELD_NAMES = ("hours", "minutes", "seconds", "frames")

_Convertible = Union[
    int,
    float,
    str,
    "Timecode",
    TimecodeAttributes,
    Mapping[str, Any],
    datetime.time,
    datetime.datetime,
]


#%%
class TimecodeError(Exception):
    """Raised when an error occurred in timecode calculation."""


class ParseError(TimecodeError, ValueError):
    """Raised when a string is neither a timecode nor a timestamp."""


class InvalidFieldError(TimecodeError, ValueError):
    """Raised when a field setter gets a value that is not a number."""


class FrameRateMismatchError(TimecodeError):
    """Raised when ordering Timecodes that do not share a frame rate."""
####


#%%
class Timecode:
    """The main timecode class.

    Holds the hours, minutes, seconds and frames fields of a timecode along
    with its frame rate. Every field write goes through the setters, which keep
    the fields in range by carrying into or borrowing from the next field and
    skip the frame numbers that do not exist in drop-frame timecode.

    ``add``, ``subtract``, ``pulldown`` and ``pullup`` return new instances,
    the ``set_*`` methods change this instance in place.

    Args:
        value (int | float | str | Mapping | Timecode | datetime.time): The
            source of the timecode. It can be one of:

            * a frame count since ``00:00:00:00``,
            * a timecode string like ``'01:00:00:00'`` or ``'01:00:00;00'``,
            * a timestamp string like ``'00:00:21.240'``,
            * a mapping with any of the ``hours``, ``minutes``, ``seconds``,
              ``frames`` and ``frame_rate`` keys, or another Timecode,
            * a :class:`datetime.time` or :class:`datetime.datetime`, of which
              only the time of day is used.

            Defaults to 0, that is ``00:00:00:00``.
        frame_rate (int | float | Fraction | str | tuple): The frame rate of the
            Timecode instance. Strings like ``'29.97'`` or ``'30000/1001'`` and
            ``(numerator, denominator)`` tuples are converted to a Fraction.
            Defaults to 29.97. A ``frame_rate`` in a mapping ``value`` wins
            over this argument.

    Raises:
        ParseError: If a string value can not be parsed.
        InvalidFieldError: If a mapping value holds a non-numeric field.
        TypeError: If the value is of an unsupported type.
        ValueError: If the frame rate is invalid.
    """

    def __init__(
        self,
        value: _Convertible = 0,
        frame_rate: _Framerate = DEFAULT_FRAME_RATE,
    ) -> None:
        self.hours = 0
        self.minutes = 0
        self.seconds = 0
        self.frames = 0
        self.frame_rate = frame_rate

        self._dispatch_set_fields(value)

    ####

    def _dispatch_set_fields(self, value: _Convertible) -> None:
        """Helper to dispatch the constructor value to the right field setter.

        Args:
            value (_Convertible): See the class documentation.
        """
        if isinstance(value, Timecode):
            self._set_fields_from_object(value.to_object())
        elif isinstance(value, (datetime.datetime, datetime.time)):
            self._set_fields_from_time(value)
        elif isinstance(value, bool):
            raise TypeError("A bool can not be converted to a Timecode.")
        elif isinstance(value, (int, float, Fraction)):
            self._set_fields_from_frame_count(value)
        elif isinstance(value, str):
            self._set_fields_from_string(value)
        elif isinstance(value, Mapping):
            self._set_fields_from_object(value)
        else:
            raise TypeError(
                f"Type {value.__class__.__name__} can not be converted to a "
                "Timecode."
            )

    def _set_fields_from_frame_count(self, frame_count: _Number) -> None:
        """Split a frame count into the timecode fields.

        The count is reduced to a single day first, so negative counts are
        counted back from midnight. In drop-frame the first minute of every ten
        minutes holds the dropped frames, the others are shorter.

        Args:
            frame_count (int | float | Fraction): Frames since 00:00:00:00,
                fractional counts are truncated.
        """
        remaining = int(frame_count) % self._frames_per_day()
        drop_frames = self._frames_to_drop()
        frames_per_minute = self._frames_per_minute()

        hours, remaining = divmod(remaining, self._frames_per_hour())
        ten_minutes, remaining = divmod(remaining, self._frames_per_10_minutes())
        single_minutes = max(0, (remaining - drop_frames) // frames_per_minute)
        remaining -= single_minutes * frames_per_minute
        seconds, frames = divmod(remaining, self.nominal_frame_rate)

        self._set_fields_from_object(
            {
                "hours": hours,
                "minutes": ten_minutes * 10 + single_minutes,
                "seconds": seconds,
                "frames": frames,
            }
        )

    def _set_fields_from_string(self, timecode: str) -> None:
        """Parse and set the fields from a timecode or a timestamp string.

        Args:
            timecode (str): Either ``HH:MM:SS:FF`` (any separator but "." and
                ",") or ``HH:MM:SS[.mmm]``.

        Raises:
            ParseError: If the string matches neither format.
        """
        text = timecode.strip()

        if (match := TIMECODE_PATTERN.match(text)) is not None:
            hours, minutes, seconds, frames = map(int, match.groups())
            self._set_fields_from_object(
                {
                    "hours": hours,
                    "minutes": minutes,
                    "seconds": seconds,
                    "frames": frames,
                }
            )
            return

        if (match := TIMESTAMP_PATTERN.match(text)) is not None:
            hours, minutes, seconds, fraction = match.groups()
            self._set_fields_from_object(
                {
                    "hours": int(hours),
                    "minutes": int(minutes),
                    "seconds": int(seconds),
                    "frames": self._frames_from_fraction(
                        Fraction(f"0.{fraction or 0}")
                    ),
                }
            )
            return

        raise ParseError(f"Invalid timecode string {timecode!r}")

    def _set_fields_from_object(self, attributes: Mapping[str, Any]) -> None:
        """Set the fields given in the mapping, skipping the missing ones.

        The values are validated and stored as they are before any setter
        runs, so the drop-frame check never sees a half populated timecode.

        Args:
            attributes (Mapping): Any of the ``hours``, ``minutes``,
                ``seconds``, ``frames`` and ``frame_rate`` keys.

        Raises:
            InvalidFieldError: If a field value is not a number. No field is
                changed in that case.
        """
        numbers = {
            name: self._to_number(attributes[name], name)
            for name in _FIELD_NAMES
            if attributes.get(name) is not None
        }

        if attributes.get("frame_rate") is not None:
            self.frame_rate = attributes["frame_rate"]

        for name, number in numbers.items():
            setattr(self, name, int(number))

        self.set_hours(numbers.get("hours"))
        self.set_minutes(numbers.get("minutes"))
        self.set_seconds(numbers.get("seconds"))
        self.set_frames(numbers.get("frames"))

    def _set_fields_from_time(
        self, time: datetime.time | datetime.datetime
    ) -> None:
        """Set the fields from the time of day of a time or datetime.

        Args:
            time (datetime.time | datetime.datetime): The wall-clock value, the
                microseconds are converted to frames.
        """
        self._set_fields_from_object(
            {
                "hours": time.hour,
                "minutes": time.minute,
                "seconds": time.second,
                "frames": self._frames_from_fraction(
                    Fraction(time.microsecond, 1_000_000)
                ),
            }
        )

    def _frames_from_fraction(self, fraction: _Number) -> int:
        """Convert a fraction of a second to a number of frames.

        Values outside of [-1, 1] are scaled down by powers of ten first, so
        both ``0.2`` and ``200`` are read as two tenths of a second.

        Args:
            fraction (int | float | Fraction): The fraction of a second.

        Returns:
            int: The truncated number of frames.
        """
        while fraction > 1 or fraction < -1:
            fraction /= 10
        return int(fraction * self.nominal_frame_rate)

    @staticmethod
    def _to_number(value: Any, field: str) -> _Number:
        """Coerce a field value to a number.

        Args:
            value (Any): An int, float, Fraction or anything ``float()``
                accepts, like numeric strings.
            field (str): The name of the field, used in the error message.

        Raises:
            InvalidFieldError: If the value is not a finite number.

        Returns:
            int | float | Fraction: The value as a number.
        """
        if isinstance(value, (int, Fraction)):
            return value
        try:
            number = float(value)
        except (TypeError, ValueError) as e:
            raise InvalidFieldError(f"Cannot set {field} to {value!r}") from e
        if not math.isfinite(number):
            raise InvalidFieldError(f"Cannot set {field} to {value!r}")
        return number

    @property
    def frame_rate(self) -> _Number:
        """Frame rate getter.

        Returns:
            int | float | Fraction: The frame rate as it was given, strings
                and tuples are returned as a Fraction.
        """
        return self._frame_rate

    @frame_rate.setter
    def frame_rate(self, new_frame_rate: _Framerate) -> None:
        """Set a frame rate to the Timecode instance.

        The fields are not normalized again, use the setters for that.

        Args:
            new_frame_rate (_Framerate): The frame rate to use.

        Raises:
            ValueError: If the frame rate can not be parsed or is lower than
                0.5, which would make a nominal frame rate of zero.
        """
        try:
            if isinstance(new_frame_rate, (tuple, list)):
                new_frame_rate = Fraction(*map(int, new_frame_rate))
            elif isinstance(new_frame_rate, str):
                new_frame_rate = Fraction(new_frame_rate.strip())
        except (TypeError, ValueError, ZeroDivisionError) as e:
            raise ValueError(f"Invalid framerate {new_frame_rate!r}.") from e

        if isinstance(new_frame_rate, bool) or not isinstance(
            new_frame_rate, (int, float, Fraction)
        ):
            raise ValueError(f"Invalid framerate {new_frame_rate!r}.")
        if not math.isfinite(new_frame_rate) or round(new_frame_rate) < 1:
            raise ValueError("Invalid framerate (zero or negative).")

        self._frame_rate = new_frame_rate

    @property
    def nominal_frame_rate(self) -> int:
        """Return the frame rate rounded to the nearest integer.

        23.976 -> 24, 25 -> 25, 29.97 -> 30, 59.94 -> 60.

        Returns:
            int: The frame rate used for the field math.
        """
        return round(self._frame_rate)

    def is_drop_frame(self) -> bool:
        """Return True for 29.97 and 59.94 class frame rates.

        Returns:
            bool: True if this is a drop-frame Timecode.
        """
        return 29 < self._frame_rate < 30 or 59 < self._frame_rate < 60

    @property
    def frame_delimiter(self) -> str:
        """Return the frames separator, ";" for drop-frame, ":" otherwise.

        Returns:
            str: The frame delimiter.
        """
        return ";" if self.is_drop_frame() else ":"

    def _frames_to_drop(self) -> int:
        # 2 for 29.97, 4 for 59.94
        return self.nominal_frame_rate // 15 if self.is_drop_frame() else 0

    def _frames_per_minute(self) -> int:
        return 60 * self.nominal_frame_rate - self._frames_to_drop()

    def _frames_per_10_minutes(self) -> int:
        # the dropped frames are kept on every tenth minute
        return self._frames_per_minute() * 10 + self._frames_to_drop()

    def _frames_per_hour(self) -> int:
        return self._frames_per_10_minutes() * 6

    def _frames_per_day(self) -> int:
        return self._frames_per_hour() * HOURS_IN_ONE_DAY

    def _correct_drop_frame(self) -> None:
        """Skip the frame numbers dropped at the start of a non-tenth minute."""
        # Two labels at 29.97 and four at 59.94, so frame counts stay monotonic.
        drop_frames = self._frames_to_drop()
        if (
            drop_frames
            and 0 <= self.frames < drop_frames
            and self.seconds == 0
            and self.minutes % 10 != 0
        ):
            logger.debug(
                "Frame %02d:%02d:00;%02d is dropped at %s fps, using frame %02d",
                self.hours,
                self.minutes,
                self.frames,
                self._frame_rate,
                self.frames + drop_frames,
            )
            self.frames += drop_frames

    def set_hours(self, hours: _Number | str | None = None) -> Self:
        """Set the hours field.

        Hours roll over after 23 and count down from 24 if negative.

        Args:
            hours (int | float | str | None): The new hours, fractional values
                are truncated. None leaves the field unchanged.

        Raises:
            InvalidFieldError: If hours is not a number.

        Returns:
            Timecode: This instance.
        """
        if hours is None:
            return self

        self.hours = int(self._to_number(hours, "hours")) % HOURS_IN_ONE_DAY
        self._correct_drop_frame()
        return self

    def set_minutes(self, minutes: _Number | str | None = None) -> Self:
        """Set the minutes field.

        Minutes over 59 roll over into the hours field, negative minutes
        borrow from it.

        Args:
            minutes (int | float | str | None): The new minutes, fractional
                values are truncated. None leaves the field unchanged.

        Raises:
            InvalidFieldError: If minutes is not a number.

        Returns:
            Timecode: This instance.
        """
        if minutes is None:
            return self

        carry, self.minutes = _truncated_divmod(
            int(self._to_number(minutes, "minutes")), MINUTES_IN_ONE_HOUR
        )
        self.set_hours(self.hours + carry)

        if self.minutes < 0:
            self.minutes += MINUTES_IN_ONE_HOUR
            self.set_hours(self.hours - 1)

        self._correct_drop_frame()
        return self

    def set_seconds(self, seconds: _Number | str | None = None) -> Self:
        """Set the seconds field.

        Seconds over 59 roll over into the minutes field, negative seconds
        borrow from it. A fractional part is converted to frames and replaces
        the frames field.

        Args:
            seconds (int | float | str | None): The new seconds. None leaves
                the field unchanged.

        Raises:
            InvalidFieldError: If seconds is not a number.

        Returns:
            Timecode: This instance.
        """
        if seconds is None:
            return self

        seconds = self._to_number(seconds, "seconds")
        if isinstance(seconds, float):
            # 1.2 - 1 is 0.19999999999999996 in binary
            seconds = Fraction(str(seconds))
        whole_seconds = int(seconds)
        fraction = seconds - whole_seconds

        carry, self.seconds = _truncated_divmod(
            whole_seconds, SECONDS_IN_ONE_MINUTE
        )
        self.set_minutes(self.minutes + carry)

        if self.seconds < 0:
            self.seconds += SECONDS_IN_ONE_MINUTE
            self.set_minutes(self.minutes - 1)

        if fraction:
            self.set_frames(self._frames_from_fraction(fraction))

        self._correct_drop_frame()
        return self

    def set_frames(self, frames: _Number | str | None = None) -> Self:
        """Set the frames field.

        Frames over the nominal frame rate roll over into the seconds field,
        negative frames borrow from it.

        Args:
            frames (int | float | str | None): The new frames, fractional
                values are truncated. None leaves the field unchanged.

        Raises:
            InvalidFieldError: If frames is not a number.

        Returns:
            Timecode: This instance.
        """
        if frames is None:
            return self

        nominal_frame_rate = self.nominal_frame_rate
        carry, self.frames = _truncated_divmod(
            int(self._to_number(frames, "frames")), nominal_frame_rate
        )
        self.set_seconds(self.seconds + carry)

        if self.frames < 0:
            self.frames += nominal_frame_rate
            self.set_seconds(self.seconds - 1)

        self._correct_drop_frame()
        return self

    def frame_count(self) -> int:
        """Return the number of frames since 00:00:00:00.

        Returns:
            int: The frame count of this Timecode.
        """
        return (
            self.hours * self._frames_per_hour()
            + (self.minutes // 10) * self._frames_per_10_minutes()
            + (self.minutes % 10) * self._frames_per_minute()
            + self.seconds * self.nominal_frame_rate
            + self.frames
        )

    def fractional_seconds(self) -> float:
        """Return the seconds field with the frames as a fraction of a second.

        Returns:
            float: ``seconds + frames / nominal_frame_rate``.
        """
        return self.seconds + self.frames / self.nominal_frame_rate

    def _as_operand(self, other: _Convertible) -> Timecode:
        """Return other as a Timecode at the frame rate of this one.

        Args:
            other (_Convertible): Anything the constructor accepts. Timecodes
                at another frame rate are pulled down to this one.

        Returns:
            Timecode: A Timecode with the frame rate of this instance.
        """
        if not isinstance(other, Timecode):
            other = Timecode(other, self.frame_rate)
        if other.frame_rate != self.frame_rate:
            other = other.pulldown(self.frame_rate)
        return other

    def add(self, addend: _Convertible) -> Timecode:
        """Return a new Timecode with the given value added to this one.

        The fields are added one by one, from hours to frames, so the carries
        propagate correctly.

        Args:
            addend (_Convertible): A Timecode or anything the constructor
                accepts, numbers are frame counts. Non Timecode values are read
                at the frame rate of this instance.

        Returns:
            Timecode: The resultant Timecode instance, at the frame rate of
                this one.
        """
        addend = self._as_operand(addend)

        tc = Timecode(self)
        tc.set_hours(self.hours + addend.hours)
        tc.set_minutes(self.minutes + addend.minutes)
        tc.set_seconds(self.seconds + addend.seconds)
        tc.set_frames(self.frames + addend.frames)
        return tc

    def subtract(self, subtrahend: _Convertible) -> Timecode:
        """Return a new Timecode with the given value subtracted from this one.

        Results before midnight wrap around to the previous day, so
        ``00:00:00:00`` minus one frame is ``23:59:59:29`` at 30 fps.

        The subtraction is field-wise. At drop-frame rates a difference that
        lands on a dropped label resolves forward, so ``00:01:00;02`` minus
        one frame is ``00:01:00;03`` at 29.97. Subtract frame counts instead
        when the result must be frame accurate.

        Args:
            subtrahend (_Convertible): A Timecode or anything the constructor
                accepts, numbers are frame counts.

        Returns:
            Timecode: The resultant Timecode instance, at the frame rate of
                this one.
        """
        subtrahend = self._as_operand(subtrahend)

        tc = Timecode(self)
        tc.set_hours(self.hours - subtrahend.hours)
        tc.set_minutes(self.minutes - subtrahend.minutes)
        tc.set_seconds(self.seconds - subtrahend.seconds)
        tc.set_frames(self.frames - subtrahend.frames)
        return tc

    def pulldown(
        self, frame_rate: _Framerate, start: _Convertible = 0
    ) -> Timecode:
        """Convert this Timecode to another frame rate.

        The ``start`` timecode has the same fields in both frame rates. The
        distance from it is scaled by the ratio of the nominal frame rates and
        rounded up, so a frame is never lost but a partial one can be gained.

        Args:
            frame_rate (_Framerate): The target frame rate.
            start (_Convertible): The anchor of the conversion, anything the
                constructor accepts. Only its fields are used, not its frame
                rate. Defaults to 00:00:00:00.

        Returns:
            Timecode: A new Timecode at the target frame rate.
        """
        if isinstance(start, Timecode):
            start = start.to_object()
        if isinstance(start, Mapping):
            start = {
                name: value
                for name, value in start.items()
                if name != "frame_rate"
            }

        old_base = Timecode(start, self.frame_rate)
        new_base = Timecode(start, frame_rate)
        output = Timecode(0, frame_rate)

        output_frames = math.ceil(
            Fraction(
                self.subtract(old_base).frame_count()
                * output.nominal_frame_rate,
                self.nominal_frame_rate,
            )
        )
        logger.debug(
            "Pulling %s from %s to %s fps as %d frames from %s",
            self,
            self.frame_rate,
            output.frame_rate,
            output_frames,
            new_base,
        )

        output._set_fields_from_frame_count(output_frames)
        return output.add(new_base)

    def pullup(
        self, frame_rate: _Framerate, start: _Convertible = 0
    ) -> Timecode:
        """Convert this Timecode to another frame rate.

        Same as :meth:`pulldown`, named for conversions to a higher rate.

        Args:
            frame_rate (_Framerate): The target frame rate.
            start (_Convertible): The anchor of the conversion.

        Returns:
            Timecode: A new Timecode at the target frame rate.
        """
        return self.pulldown(frame_rate, start)

    @staticmethod
    def compare(a: Timecode, b: Timecode) -> int:
        """Compare two Timecodes field by field.

        Usable as a sort key with :func:`functools.cmp_to_key`.

        Args:
            a (Timecode): The first Timecode.
            b (Timecode): The second Timecode, with the same frame rate.

        Raises:
            FrameRateMismatchError: If the frame rates differ, the fields of
                two frame rates can not be ordered.

        Returns:
            int: -1 if a is before b, 1 if a is after b, 0 otherwise.
        """
        if a.frame_rate != b.frame_rate:
            raise FrameRateMismatchError(
                f"Can not compare a {a.frame_rate} fps Timecode with a "
                f"{b.frame_rate} fps Timecode, convert one of them first."
            )
        left = (a.hours, a.minutes, a.seconds, a.frames)
        right = (b.hours, b.minutes, b.seconds, b.frames)
        return (left > right) - (left < right)

    is_valid_timecode_string = staticmethod(is_valid_timecode_string)
    exact_frame_rate = staticmethod(exact_frame_rate)

    def _compare_to(self, other: _Convertible) -> int:
        if not isinstance(other, Timecode):
            other = Timecode(other, self.frame_rate)
        return Timecode.compare(self, other)

    def is_before(self, timecode: _Convertible) -> bool:
        """Return True if this Timecode comes before the given one.

        Args:
            timecode (_Convertible): A Timecode or anything the constructor
                accepts, read at the frame rate of this instance.

        Returns:
            bool: True if this Timecode is before the other.
        """
        return self._compare_to(timecode) < 0

    def is_same(self, timecode: _Convertible) -> bool:
        """Return True if both Timecodes have the same fields."""
        return self._compare_to(timecode) == 0

    def is_after(self, timecode: _Convertible) -> bool:
        """Return True if this Timecode comes after the given one."""
        return self._compare_to(timecode) > 0

    def is_between(
        self, early_timecode: _Convertible, later_timecode: _Convertible
    ) -> bool:
        """Return True if this Timecode is strictly between the given ones.

        Args:
            early_timecode (_Convertible): The lower bound, excluded.
            later_timecode (_Convertible): The upper bound, excluded.

        Returns:
            bool: True if this Timecode is after the early one and before the
                later one.
        """
        return self.is_after(early_timecode) and self.is_before(later_timecode)

    def to_string(self) -> str:
        """Return the Timecode as ``HH:MM:SS:FF``, or ``HH:MM:SS;FF`` for drop-frame.

        Returns:
            str: The string of this Timecode.
        """
        return (
            f"{self.hours:02d}:{self.minutes:02d}:{self.seconds:02d}"
            f"{self.frame_delimiter}{self.frames:02d}"
        )

    def to_srt_string(self, real_time: bool = False) -> str:
        """Return the Timecode as a SubRip timestamp ``HH:MM:SS,mmm``.

        Args:
            real_time (bool): If True the Timecode is pulled down to 29.97
                first.

        Returns:
            str: The SubRip timestamp, milliseconds are truncated.
        """
        tc = self.pulldown(DEFAULT_FRAME_RATE) if real_time else self
        milliseconds = tc.frames * 1000 // tc.nominal_frame_rate
        return (
            f"{tc.hours:02d}:{tc.minutes:02d}:{tc.seconds:02d},"
            f"{milliseconds:03d}"
        )

    def to_dcdm_string(self) -> str:
        """Return the Timecode as a DCDM subtitle time ``HH:MM:SS:TTT``.

        TTT is the part of the second in ticks of 4 milliseconds.

        Returns:
            str: The DCDM time, ticks are truncated.
        """
        ticks = self.frames * 250 // self.nominal_frame_rate
        return (
            f"{self.hours:02d}:{self.minutes:02d}:{self.seconds:02d}:"
            f"{ticks:03d}"
        )

    def to_object(self) -> TimecodeAttributes:
        """Return the fields and the frame rate as a new dictionary.

        Returns:
            TimecodeAttributes: The ``hours``, ``minutes``, ``seconds``,
                ``frames`` and ``frame_rate`` of this Timecode.
        """
        return {
            "hours": self.hours,
            "minutes": self.minutes,
            "seconds": self.seconds,
            "frames": self.frames,
            "frame_rate": self.frame_rate,
        }

    def __eq__(self, other: object) -> bool:
        """Override the equality operator.

        Args:
            other (int | str | Timecode): Either an int representing the
                number of frames, a str representing a Timecode with the same
                frame rate of this one, or a Timecode.

        Returns:
            bool: True if the other is equal to this Timecode instance.
        """
        if isinstance(other, Timecode):
            return (
                self.frame_rate == other.frame_rate
                and Timecode.compare(self, other) == 0
            )
        if isinstance(other, str):
            return self.__eq__(Timecode(other, self.frame_rate))
        if isinstance(other, int) and not isinstance(other, bool):
            return self.frame_count() == other
        return False

    def __lt__(self, other: _Convertible) -> bool:
        return self.is_before(other)

    def __le__(self, other: _Convertible) -> bool:
        return self._compare_to(other) <= 0

    def __gt__(self, other: _Convertible) -> bool:
        return self.is_after(other)

    def __ge__(self, other: _Convertible) -> bool:
        return self._compare_to(other) >= 0

    def __add__(self, other: _Convertible) -> Timecode:
        return self.add(other)

    def __sub__(self, other: _Convertible) -> Timecode:
        return self.subtract(other)

    def __int__(self) -> int:
        """Return the frame count.

        Returns:
            int: The frame count of this Timecode.
        """
        return self.frame_count()

    def __float__(self) -> float:
        """Return the real time in seconds since 00:00:00:00.

        Returns:
            float: The frame count divided by the frame rate.
        """
        return float(Fraction(self.frame_count()) / Fraction(self.frame_rate))

    def __str__(self) -> str:
        """Return the actual Timecode as a string.

        Returns:
            str: The string of this Timecode.
        """
        return self.to_string()

    def __repr__(self) -> str:
        """Return the string representation of this Timecode instance.

        Returns:
            str: The string representation of this Timecode instance.
        """
        return f"{__class__.__name__}('{self}', frame_rate={self.frame_rate!r})"
####


compare = Timecode.compare


#%%
class TimecodeBuilder:
    """Helper class to pre-configure instantiation of Timecodes.

    A list of kwargs of class Timecode can be provided to the builder, which
    will be used when the builder instance is called to create new Timecodes.

    Example:
        >>> make_tc = TimecodeBuilder(frame_rate=25)
        >>> str(make_tc("01:00:00:00"))
        '01:00:00:00'

    Args:
        kwargs (dict): list of pre-configured arguments for the Timecodes
            instantiated by calling this builder. Refer to Timecode docu.
    """

    def __init__(self, **kwargs) -> None:
        self.kwargs = kwargs

    def __call__(self, *args, **kwargs) -> Timecode:
        """Create a Timecode combining the preconfigured and user arguments.

        Returns:
            Timecode: timecode instance given the arguments.
        """
        kwargs = self.kwargs | kwargs
        return Timecode(*args, **kwargs)
####
