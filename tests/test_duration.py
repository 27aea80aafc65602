import pytest

from minecraft_config_utils.duration import (
    PERMANENT_MILLIS,
    TimeUnit,
    is_permanent,
    parse_duration,
    parse_duration_as_ticks,
)

SECOND = 1000
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE
DAY = 24 * HOUR


@pytest.mark.parametrize("number", [0, 1, 50, 1234567, 9999999999999])
def test_plain_integer_is_milliseconds(number):
    assert parse_duration(str(number)) == number


def test_plain_integer_ignores_spaces_and_commas():
    assert parse_duration("1,000 000") == 1000000


def test_composite_duration():
    assert parse_duration("3h5m43s") == 3 * HOUR + 5 * MINUTE + 43 * SECOND


def test_order_does_not_matter():
    assert parse_duration("43s3h5m") == parse_duration("3h5m43s")


def test_repeated_units_accumulate():
    assert parse_duration("1h1h") == 2 * HOUR


@pytest.mark.parametrize("text,expected", [
    ("250ms", 250),
    ("3millis", 3),
    ("2t", 100),
    ("20ticks", SECOND),
    ("10s", 10 * SECOND),
    ("1sec", SECOND),
    ("5 seconds", 5 * SECOND),
    ("2m", 2 * MINUTE),
    ("2min", 2 * MINUTE),
    ("1minute", MINUTE),
    ("4h", 4 * HOUR),
    ("1hour", HOUR),
    ("3d", 3 * DAY),
    ("2days", 2 * DAY),
    ("1w", 7 * DAY),
    ("2weeks", 14 * DAY),
    ("1month", 30 * DAY),
    ("2months", 60 * DAY),
    ("1y", 365 * DAY),
    ("2years", 730 * DAY),
])
def test_unit_suffixes(text, expected):
    assert parse_duration(text) == expected


def test_missing_magnitude_counts_as_one():
    assert parse_duration("h") == HOUR
    assert parse_duration("d1h") == DAY + HOUR


def test_case_and_separators_are_ignored():
    assert parse_duration("1H, 30M") == HOUR + 30 * MINUTE


@pytest.mark.parametrize("text", ["never", "inf", "infinite", "perm", "perma", "forever"])
def test_permanent_suffixes(text):
    assert parse_duration(text) >= 1000 * 365 * DAY
    assert is_permanent(parse_duration(text))


def test_permanent_is_added_once():
    assert parse_duration("5perma") == PERMANENT_MILLIS
    assert parse_duration("perma1h") == PERMANENT_MILLIS + HOUR


def test_unknown_suffix_is_ignored():
    assert parse_duration("5gibberish") == 0
    assert parse_duration("5gibberish10s") == 10 * SECOND


def test_empty_string():
    assert parse_duration("") == 0


def test_stray_characters_do_not_hang():
    assert parse_duration("5s-") == 5 * SECOND
    assert parse_duration("1h+2m") == HOUR + 2 * MINUTE
    assert parse_duration("---") == 0


def test_negative_plain_integer():
    assert parse_duration("-100") == -100


@pytest.mark.parametrize("text", ["0", "49", "50", "30s", "3h5m43s", "1t", "perma", "5gibberish"])
def test_ticks_are_floored_milliseconds(text):
    assert parse_duration_as_ticks(text) == parse_duration(text) // 50


def test_ticks():
    assert parse_duration_as_ticks("30s") == 600
    assert parse_duration_as_ticks("75") == 1


def test_target_unit_truncates():
    assert parse_duration("90s", TimeUnit.MINUTES) == 1
    assert parse_duration("1h59m", TimeUnit.HOURS) == 1
    assert parse_duration("2d", TimeUnit.HOURS) == 48
    assert parse_duration("1500", TimeUnit.SECONDS) == 1


def test_target_unit_smaller_than_millis():
    assert parse_duration("2ms", TimeUnit.MICROSECONDS) == 2000
    assert parse_duration("1s", TimeUnit.NANOSECONDS) == 1000 ** 3


def test_negative_conversion_truncates_toward_zero():
    assert TimeUnit.SECONDS.from_millis(-1500) == -1
