"""Fixed-width formatting for durations given in seconds."""

import math

# julian year (c.f. the actual orbital period, 365.256363004d)
YEAR_DAYS = 365.25

SUBSECOND_SUFFIXES = ("m", "u", "n")


class InvalidDurationError(ValueError):
    """Raised when a duration is NaN or infinite."""

    def __init__(self, seconds: float) -> None:
        super().__init__(f"duration must be a finite number, got {seconds!r}")
        self.seconds = seconds


def _divmod(a: float, b: float) -> tuple[float, float]:
    """Floor quotient and matching remainder, without float modulo."""
    q = math.floor(a / b)
    return q, a - q * b


def _split(a: float, b: int) -> tuple[int, int]:
    """Like _divmod, with the remainder rounded to a whole unit.

    A remainder that rounds up to ``b`` carries into the quotient, so
    e.g. 119.6s splits into (2, 0) rather than (1, 60).
    """
    q, r = _divmod(a, b)
    r = round(r)
    if r >= b:
        q, r = q + 1, r - b
    return q, r


def _format_subminute(dt: float) -> str:
    if dt >= 9.995:
        return f"{dt:.1f}s"
    if dt >= 0.9995:
        return f"{dt:.2f}s"

    suffix = ""
    for suffix in SUBSECOND_SUFFIXES:
        dt *= 1000
        if dt >= 0.9995:
            break

    if dt > 9.5:
        return f"{dt:3.0f}{suffix}s"
    return f"{dt:.1f}{suffix}s"


def format_duration(seconds: float) -> str:
    """Format a duration in seconds into a 5 column string.

    Each magnitude range has its own layout, e.g. '5.00s', '1m05s',
    '61.0m', '2h01m', '3d04h', ' 123d', '2.50y', '500ms', '1.5us'.

    Compound layouts round the smaller unit and carry, so 119.6s is
    '2m00s' and 36576s is '10.2h' rather than '10h10m'.

    Negative durations are not normalized; they land in the
    nanosecond branch and come out wider than 5 columns.

    Raises:
        InvalidDurationError: If seconds is NaN or infinite.
    """
    dt = float(seconds)
    if not math.isfinite(dt):
        raise InvalidDurationError(seconds)

    if dt < 60:
        return _format_subminute(dt)

    # within half a unit of each upper bound the remainder would round up
    # to the next unit (599.6s as "10m00s"); those use the next layout
    if dt < 599.5:
        m, s = _split(dt, 60)
        return f"{m}m{s:02d}s"

    dt /= 60  # minutes

    if dt < 99.95:
        return f"{dt:3.1f}m"

    if dt < 10 * 60 - 0.5:
        h, m = _split(dt, 60)
        return f"{h}h{m:02d}m"

    if dt < 24 * 60 - 0.5:
        h, m = _split(dt, 60)
        if m < 10:
            return f"{h}h{m}m"
        return f"{dt / 60:3.1f}h"

    dt /= 60  # hours

    if dt < 10 * 24 - 0.5:
        d, h = _split(dt, 24)
        return f"{d}d{h:02d}h"

    if dt < 99.95 * 24:
        d, h = _split(dt, 24)
        if h < 10:
            return f"{d}d{h}h"
        return f"{dt / 24:4.1f}d"

    dt /= 24  # days

    if dt < 2 * YEAR_DAYS:
        return f"{dt:4.0f}d"

    dt /= YEAR_DAYS  # years

    if dt < 9.995:
        return f"{dt:4.2f}y"
    if dt < 99.95:
        return f"{dt:4.1f}y"
    return f"{dt:4.0f}y"
