"""
Duration Parsing

Turns human readable durations from config files ("3h5m43s", "2 weeks",
"perma") into milliseconds, so admins never have to write raw tick or
millisecond counts.
"""

import re
from enum import Enum
from typing import Callable, Dict

from .config import PERMANENT_DAYS, TICK_MILLIS

_SECOND = 1000
_MINUTE = 60 * _SECOND
_HOUR = 60 * _MINUTE
_DAY = 24 * _HOUR

PERMANENT_MILLIS = PERMANENT_DAYS * _DAY

_PLAIN_INTEGER = re.compile(r"[+-]?[0-9]+")


class TimeUnit(Enum):
    """Target units for conversion, value is the unit length in nanoseconds"""
    NANOSECONDS = 1
    MICROSECONDS = 1000
    MILLISECONDS = 1000 ** 2
    SECONDS = 1000 ** 3
    MINUTES = 60 * 1000 ** 3
    HOURS = 60 * 60 * 1000 ** 3
    DAYS = 24 * 60 * 60 * 1000 ** 3

    def from_millis(self, millis: int) -> int:
        """Convert milliseconds to this unit, truncating toward zero"""
        nanos = millis * TimeUnit.MILLISECONDS.value
        quotient = abs(nanos) // self.value
        return quotient if nanos >= 0 else -quotient


# Unit suffix -> milliseconds per unit
UNIT_MILLIS: Dict[str, int] = {}
for _suffixes, _millis in (
    (("ms", "milli", "millis"), 1),
    (("t", "tick", "ticks"), TICK_MILLIS),
    (("s", "sec", "second", "seconds"), _SECOND),
    (("m", "min", "minute", "minutes"), _MINUTE),
    (("h", "hour", "hours"), _HOUR),
    (("d", "day", "days"), _DAY),
    (("w", "week", "weeks"), 7 * _DAY),
    (("month", "months"), 30 * _DAY),
    (("y", "year", "years"), 365 * _DAY),
):
    for _suffix in _suffixes:
        UNIT_MILLIS[_suffix] = _millis

# Suffixes meaning "forever"; they ignore any magnitude in front of them
PERMANENT_SUFFIXES = frozenset({"never", "inf", "infinite", "perm", "perma", "forever"})


def _split_suffix(text: str, selector: Callable[[str], bool]):
    """Split text into (rest, longest trailing run of characters matching selector)"""
    index = len(text)
    while index > 0 and selector(text[index - 1]):
        index -= 1
    return text[:index], text[index:]


def _unit_millis(suffix: str, magnitude: int) -> int:
    if suffix in PERMANENT_SUFFIXES:
        return PERMANENT_MILLIS
    return magnitude * UNIT_MILLIS.get(suffix, 0)


def parse_duration(text: str, unit: TimeUnit = TimeUnit.MILLISECONDS) -> int:
    """
    Parse a human readable duration

    A number followed by a unit, e.g. "5h" or "34s". Amounts can be chained
    without separators in any order, also repeating units: "3h5m43s" is
    3 hours, 5 minutes and 43 seconds and "1h1h" is 2 hours. A missing
    number counts as 1 ("h" is one hour). A bare integer is taken as
    milliseconds. Spaces and commas are ignored, unknown units count as 0.

    Args:
        text: Duration as written in config
        unit: Unit of the returned value (default: milliseconds)

    Returns:
        The duration in the requested unit, truncated
    """
    text = text.replace(" ", "").replace(",", "").lower()
    if _PLAIN_INTEGER.fullmatch(text):
        return unit.from_millis(int(text))

    total = 0
    while text:
        text, suffix = _split_suffix(text, str.isalpha)
        text, number = _split_suffix(text, str.isdecimal)
        if not suffix and not number:
            # neither a unit nor a number, skip the stray character
            text = text[:-1]
            continue
        magnitude = int(number) if number else 1
        total += _unit_millis(suffix, magnitude)
    return unit.from_millis(total)


def parse_duration_as_ticks(text: str) -> int:
    """Parse a duration and return it in server ticks (50ms each)"""
    return parse_duration(text) // TICK_MILLIS


def is_permanent(millis: int) -> bool:
    """Whether a parsed duration is long enough to count as permanent"""
    return millis >= PERMANENT_MILLIS
