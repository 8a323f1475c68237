"""Display helpers for progress meters and sample tables."""

import sys
from dataclasses import dataclass

from rich.console import Console
from rich.table import Table

from quantity.core.amount import format_amount, format_bps, format_bytes
from quantity.core.duration import format_duration

console = Console()

_BAR_WIDTH = 20
_LABEL_WIDTH = 24

SAMPLE_AMOUNTS = (
    0,
    999,
    1000,
    5000,
    5001,
    123_456,
    9_999_999,
    1_500_000_000,
    2**32,
    2**64 - 1,
)

SAMPLE_DURATIONS = (
    0.000_000_5,
    0.000_012,
    0.25,
    5.0,
    42.0,
    65.0,
    3661.0,
    7261.0,
    40_000.0,
    300_000.0,
    2_000_000.0,
    20_000_000.0,
    100_000_000.0,
    5_000_000_000.0,
)


@dataclass
class TransferProgress:
    """Snapshot of a running transfer."""

    label: str
    done_bytes: int
    total_bytes: int
    elapsed_seconds: float

    @property
    def percent(self) -> float:
        if self.total_bytes <= 0:
            return 0.0
        return min(100.0, self.done_bytes / self.total_bytes * 100)

    @property
    def eta_seconds(self) -> float | None:
        """Remaining seconds at the average rate so far."""
        if self.done_bytes <= 0 or self.elapsed_seconds <= 0:
            return None
        remaining = max(0, self.total_bytes - self.done_bytes)
        return remaining * self.elapsed_seconds / self.done_bytes


def format_progress_line(progress: TransferProgress) -> str:
    """Build a fixed-layout meter line for a single update.

    Every numeric field comes out of the fixed-width formatters, so
    successive lines stay aligned column for column.
    """
    pct = progress.percent
    filled = int(_BAR_WIDTH * pct / 100)
    bar = "\u2588" * filled + "\u2591" * (_BAR_WIDTH - filled)
    label = (progress.label or "Working")[:_LABEL_WIDTH]

    parts = [
        f"{label:<{_LABEL_WIDTH}s} {bar} {pct:5.1f}%",
        f"  {format_bytes(progress.done_bytes)}"
        f" / {format_bytes(progress.total_bytes)}",
    ]
    if progress.elapsed_seconds > 0:
        parts.append(
            f"  {format_bps(progress.done_bytes, progress.elapsed_seconds)}"
        )
        parts.append(f"  {format_duration(progress.elapsed_seconds):>5s}")
    else:
        parts.append(f"  {'-':>8s}  {'-':>5s}")

    eta = progress.eta_seconds
    if eta is not None:
        parts.append(f"  ETA {format_duration(eta):>5s}")
    return "".join(parts)


def print_progress(progress: TransferProgress) -> None:
    """Print single-line progress update with carriage return."""
    sys.stdout.write(f"\r{format_progress_line(progress)}")
    sys.stdout.flush()


def build_sample_table(width: int | None = None) -> Table:
    """Render the sample magnitudes through every amount formatter."""
    table = Table(show_header=True, padding=(0, 1))
    table.add_column("Amount", justify="right")
    table.add_column("Narrow", justify="right")
    table.add_column("Amount", justify="right")
    table.add_column("Bytes", justify="right")
    table.add_column("Per second", justify="right")

    for n in SAMPLE_AMOUNTS:
        table.add_row(
            str(n),
            repr(format_amount(n, 3)),
            repr(format_amount(n, width)),
            repr(format_bytes(n, None if width is None else width + 1)),
            repr(format_bps(n, 1.0, None if width is None else width + 3)),
        )
    return table


def build_duration_table() -> Table:
    """Render the sample durations."""
    table = Table(show_header=True, padding=(0, 1))
    table.add_column("Seconds", justify="right")
    table.add_column("Duration", justify="right")

    for dt in SAMPLE_DURATIONS:
        table.add_row(f"{dt:g}", repr(format_duration(dt)))
    return table


def print_sample_tables(width: int | None = None) -> None:
    """Print sample tables using Rich."""
    console.print(build_sample_table(width))
    console.print(build_duration_table())
