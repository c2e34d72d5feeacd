from fractions import Fraction

import pytest

from smpte_timecode.helpers import (
    _truncated_divmod,
    exact_frame_rate,
    is_valid_timecode_string,
)


@pytest.mark.parametrize(
    "args,expected",
    [
        ((130, 60), (2, 10)),
        ((-1, 60), (0, -1)),
        ((-61, 60), (-1, -1)),
        ((-60, 60), (-1, 0)),
        ((0, 24), (0, 0)),
    ],
)
def test_truncated_divmod(args: tuple[int, int], expected: tuple[int, int]) -> None:
    assert _truncated_divmod(*args) == expected


@pytest.mark.parametrize(
    "timecode,expected",
    [
        ("12:23:45:67", True),
        ("00;11;22;33", True),
        ("1:23:4:56", True),
        ("1:2:3:4", True),
        ("01:00:00;00", True),
        (" 01:00:00:00 ", True),
        ("01:23:45", False),
        ("56:43", False),
        ("01-02-03-04", False),
        ("001:02:03:04", False),
        ("01:00:00.000", False),
        ("", False),
    ],
)
def test_is_valid_timecode_string(timecode: str, expected: bool) -> None:
    assert is_valid_timecode_string(timecode) is expected


def test_is_valid_timecode_string_rejects_non_strings() -> None:
    assert is_valid_timecode_string(None) is False  # type: ignore[arg-type]
    assert is_valid_timecode_string(1000) is False  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "frame_rate,expected",
    [
        (23.976, Fraction(24000, 1001)),
        (23.98, Fraction(24000, 1001)),
        (29.97, Fraction(30000, 1001)),
        (59.94, Fraction(60000, 1001)),
        (24, 24),
        (25, 25),
        (30, 30),
        (60, 60),
        (50, 50),
    ],
)
def test_exact_frame_rate(frame_rate: float, expected: Fraction) -> None:
    assert exact_frame_rate(frame_rate) == expected
