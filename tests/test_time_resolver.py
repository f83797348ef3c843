import pytest

from lumberjack.engine import TimeParseError, resolve_time, resolve_window
from lumberjack.engine.time_resolver import DEFAULT_LOOKBACK_MS

NOW = 1_765_447_200_000  # 2025-12-11T10:00:00Z


def test_empty_start_defaults_to_lookback():
    assert resolve_time("", NOW) == NOW - DEFAULT_LOOKBACK_MS


def test_empty_end_is_now():
    assert resolve_time("   ", NOW, is_end=True) == NOW


@pytest.mark.parametrize("spec, offset", [
    ("-30s", 30_000),
    ("-5m", 300_000),
    ("-1h", 3_600_000),
    ("-2d", 172_800_000),
    ("-90", 90_000),
    ("  -5m  ", 300_000),
])
def test_relative(spec, offset):
    assert resolve_time(spec, NOW) == NOW - offset


def test_rfc3339_utc():
    assert resolve_time("2025-12-11T10:00:00Z", NOW) == NOW


def test_rfc3339_with_offset():
    assert resolve_time("2025-12-11T12:00:00+02:00", NOW) == NOW


def test_rfc3339_fractional_seconds():
    assert resolve_time("2025-12-11T10:00:00.250Z", NOW) == NOW + 250


def test_simple_format_is_utc():
    assert resolve_time("2025-12-11 10:00:00", NOW) == NOW


def test_bad_unit():
    with pytest.raises(TimeParseError) as exc:
        resolve_time("-5x", NOW)
    assert "Allowed units: s, m, h, d" in str(exc.value)


def test_missing_number():
    with pytest.raises(TimeParseError) as exc:
        resolve_time("-m", NOW)
    assert "missing number" in str(exc.value)


def test_overflow():
    with pytest.raises(TimeParseError) as exc:
        resolve_time("-99999999999999999999d", NOW)
    assert "too large" in str(exc.value)


def test_overflow_with_thousands_of_digits():
    with pytest.raises(TimeParseError) as exc:
        resolve_time("-" + "9" * 5000 + "m", NOW)
    assert "too large" in str(exc.value)


def test_leading_zeros_do_not_count_towards_size():
    assert resolve_time("-" + "0" * 5000 + "5m", NOW) == NOW - 300_000


@pytest.mark.parametrize("spec", ["yesterday", "2025-13-45 99:00:00", "10:00"])
def test_unparseable(spec):
    with pytest.raises(TimeParseError) as exc:
        resolve_time(spec, NOW)
    assert "Use either" in str(exc.value)
    assert exc.value.spec == spec


def test_time_parse_error_is_value_error():
    with pytest.raises(ValueError):
        resolve_time("-5x", NOW)


def test_window_shares_reference_instant():
    start, end = resolve_window("-5m", "", NOW)
    assert end - start == 300_000
    assert end == NOW
