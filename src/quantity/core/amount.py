"""Fixed-width SI formatting for counts, byte counts and byte rates."""

import math

from quantity.core.duration import InvalidDurationError

DEFAULT_WIDTH = 5
NARROW_WIDTH = 3
U64_MAX = 2**64 - 1

# Each step divides by 1000. zetta and yotta are unreachable from a u64
# (max is ~18.4E) but larger Python ints still end up on "Y".
SI_SUFFIXES: tuple[tuple[int, str], ...] = (
    (1000, "k"),
    (1000, "M"),
    (1000, "G"),
    (1000, "T"),
    (1000, "P"),
    (1000, "E"),
    (1000, "Z"),
    (1000, "Y"),
)


class ZeroDurationError(ZeroDivisionError):
    """Raised when a byte rate is requested over a zero-length duration."""

    def __init__(self) -> None:
        super().__init__("cannot compute a byte rate over a zero duration")


def _regime(width: int | None) -> tuple[int, int, float]:
    """Return (working width, plain cutoff, float cutoff) for a width."""
    if width is None or width < 0:
        width = DEFAULT_WIDTH
    if width < 4:
        return NARROW_WIDTH, 999, 99.5
    return width, 5000, 999.5


def _scale(amount: int, cutoff: float) -> tuple[float, str]:
    """Divide down the suffix table until the value drops below cutoff."""
    value = float(amount)
    suffix = ""
    for divisor, suffix in SI_SUFFIXES:
        value /= divisor
        if value < cutoff:
            break
    return value, suffix


def format_amount(amount: int, width: int | None = None) -> str:
    """Format a unitless count into exactly ``width`` columns.

    A width of None (or any negative width) means the default of 5.
    Widths below 4 are clamped to 3 and use tighter cutoffs, so e.g.
    ``format_amount(999, 3) == "999"`` but ``format_amount(1000, 3)``
    already needs a suffix.

    Examples:
        - 5000, 5 -> ' 5000'
        - 5001, 5 -> '5.00k'
        - 100000, 3 -> '.1M'

    Raises:
        ValueError: If amount is negative.
    """
    if amount < 0:
        raise ValueError(f"amount must be non-negative, got {amount}")

    width, plain_cutoff, float_cutoff = _regime(width)

    if amount <= plain_cutoff:
        pad = " " if width > 5 else ""
        return f"{amount:>{width - len(pad)}d}{pad}"

    value, suffix = _scale(amount, float_cutoff)

    width -= 1
    digits = 3
    if value < 99.5:
        digits -= 1
        if value < 9.5:
            digits -= 1
            if value < 0.95:
                digits -= 1
    precision = width - digits - 1 if width - digits > 1 else 0

    rendered = f"{value:>{width}.{precision}f}{suffix}"
    if value < 0.95:
        # leading "0" before the point carries no information
        return rendered[1:]
    return rendered


def format_bytes(amount: int, width: int | None = None) -> str:
    """Format a byte count; the trailing 'B' takes one column of width."""
    if width is not None:
        width -= 1
    return format_amount(amount, width) + "B"


def format_bps(amount: int, seconds: float, width: int | None = None) -> str:
    """Format bytes transferred over ``seconds`` as a byte rate.

    The '/s' takes two columns. Minimum useful width is 6 and the
    default (width None) comes out at 8. The sign of ``seconds`` is
    ignored.

    Raises:
        ZeroDurationError: If seconds is zero.
        InvalidDurationError: If seconds is NaN.
    """
    if math.isnan(seconds):
        raise InvalidDurationError(seconds)
    seconds = abs(seconds)
    if seconds == 0:
        raise ZeroDurationError()

    rate = amount / seconds
    bps = U64_MAX if rate >= U64_MAX else int(rate)

    if width is not None:
        width -= 2
    return format_bytes(bps, width) + "/s"
