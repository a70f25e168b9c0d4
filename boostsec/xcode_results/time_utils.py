"""Time and legacy-status helpers shared by the tree walkers."""

from decimal import Decimal, InvalidOperation

from boostsec.xcode_results.models.test_result import Status, TimeWindow

_MILLIS_PER_SECOND = Decimal(1000)

_LEGACY_STATUSES = {
    "Success": Status.PASSED,
    "Failure": Status.FAILED,
}


def millis_from_seconds(seconds: float | None) -> int | None:
    """Convert seconds to whole milliseconds, truncating toward zero.

    The conversion goes through the shortest decimal representation of the
    float so that 12.345 becomes exactly 12345.

    Args:
        seconds: Time in seconds, or None

    Returns:
        Milliseconds, or None when absent or not representable

    """
    if seconds is None:
        return None
    try:
        return int(Decimal(repr(seconds)) * _MILLIS_PER_SECOND)
    except (InvalidOperation, ValueError, OverflowError, TypeError):
        return None


def time_window(start: float | None, duration: float | None) -> TimeWindow:
    """Build a time window from a start and a duration in seconds.

    Args:
        start: Start time in seconds, or None
        duration: Duration in seconds, or None

    Returns:
        [start, start + duration] in milliseconds; [duration, duration] when
        start is absent; an empty window when duration is absent or any
        value cannot be converted

    """
    if duration is None:
        return TimeWindow()

    duration_ms = millis_from_seconds(duration)
    if duration_ms is None:
        return TimeWindow()

    if start is None:
        return TimeWindow(start=duration_ms, stop=duration_ms)

    start_ms = millis_from_seconds(start)
    if start_ms is None:
        return TimeWindow()
    return TimeWindow(start=start_ms, stop=start_ms + duration_ms)


def status_from_legacy(text: str | None) -> Status:
    """Map the legacy TestStatus string; anything but Success/Failure is unknown."""
    if text is None:
        return Status.UNKNOWN
    return _LEGACY_STATUSES.get(text, Status.UNKNOWN)
