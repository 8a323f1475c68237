"""Value types that render through ``format()`` and f-strings."""

from dataclasses import dataclass

from quantity.core.amount import format_amount, format_bps, format_bytes
from quantity.core.duration import format_duration


def _parse_width(format_spec: str) -> int | None:
    """Read the width out of a format spec; an empty spec means default."""
    if not format_spec:
        return None
    if not format_spec.isdigit():
        raise ValueError(f"Invalid format specifier {format_spec!r}")
    return int(format_spec)


class Amount(int):
    """A unitless count. ``f"{Amount(n):6}"`` is ``format_amount(n, 6)``."""

    def __format__(self, format_spec: str) -> str:
        return format_amount(int(self), _parse_width(format_spec))

    def __str__(self) -> str:
        return format(self, "")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int(self)})"


class Bytes(Amount):
    """An amount of bytes."""

    def __format__(self, format_spec: str) -> str:
        return format_bytes(int(self), _parse_width(format_spec))


class Duration(float):
    """A duration in seconds.

    Layout is fixed, so a format spec only aligns the rendered text,
    e.g. ``f"{Duration(65):>7}"`` gives ``'  1m05s'``.
    """

    def __format__(self, format_spec: str) -> str:
        return format(format_duration(float(self)), format_spec)

    def __str__(self) -> str:
        return format(self, "")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({float(self)!r})"


@dataclass(frozen=True)
class BPS:
    """Bytes transferred over a duration, i.e. a byte rate."""

    amount: int
    seconds: float

    def __format__(self, format_spec: str) -> str:
        return format_bps(
            int(self.amount), float(self.seconds), _parse_width(format_spec)
        )

    def __str__(self) -> str:
        return format(self, "")
