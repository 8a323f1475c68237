"""Exhaustive width-fixity check for format_amount, striped over threads."""

import logging
import threading
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field

from quantity.core.amount import DEFAULT_WIDTH, NARROW_WIDTH, format_amount

logger = logging.getLogger(__name__)


@dataclass
class WidthViolation:
    """An amount whose rendering did not have the expected length."""

    amount: int
    width: int
    rendered: str


@dataclass
class CheckProgress:
    """Progress update from a single stripe."""

    stripe: int
    checked: int
    current: int


@dataclass
class CheckResult:
    """Outcome of a width-fixity check."""

    width: int
    checked: int = 0
    violations: list[WidthViolation] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.violations


ProgressCallback = Callable[[CheckProgress], None]


def expected_width(width: int | None) -> int:
    """Length every format_amount(n, width) result must have."""
    if width is None or width < 0:
        return DEFAULT_WIDTH
    return width if width >= 4 else NARROW_WIDTH


def _check_stripe(
    stripe: int,
    stride: int,
    width: int | None,
    limit: int,
    batch: int,
    stop: threading.Event,
    on_progress: ProgressCallback | None,
) -> tuple[int, WidthViolation | None]:
    """Check n = stripe, stripe + stride, ... below limit."""
    expected = expected_width(width)
    checked = 0
    n = stripe
    while n < limit and not stop.is_set():
        end = min(limit, n + batch * stride)
        for amount in range(n, end, stride):
            rendered = format_amount(amount, width)
            checked += 1
            if len(rendered) != expected:
                logger.debug(
                    "Formatting %d at width %s gave %r", amount, width, rendered
                )
                stop.set()
                return checked, WidthViolation(amount, expected, rendered)
        n = end
        if on_progress:
            on_progress(CheckProgress(stripe=stripe, checked=checked, current=n))
    return checked, None


def check_fixed_width(
    width: int | None = DEFAULT_WIDTH,
    limit: int = 2**32,
    workers: int = 1,
    batch: int = 10000,
    on_progress: ProgressCallback | None = None,
) -> CheckResult:
    """Verify that every amount below ``limit`` renders at a fixed width.

    The range is split into ``workers`` interleaved stripes. The first
    violation found stops all stripes, as does an exception raised in a
    stripe (including from ``on_progress``), which is re-raised here.
    """
    workers = max(1, workers)
    batch = max(1, batch)
    stop = threading.Event()
    result = CheckResult(width=expected_width(width))

    logger.info(
        "Checking widths of %d amounts at width %d on %d stripe(s)",
        limit,
        result.width,
        workers,
    )

    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = [
            pool.submit(
                _check_stripe, i, workers, width, limit, batch, stop, on_progress
            )
            for i in range(workers)
        ]
        try:
            for future in as_completed(futures):
                checked, violation = future.result()
                result.checked += checked
                if violation:
                    result.violations.append(violation)
        finally:
            # ends the remaining stripes after an exception or interrupt
            stop.set()

    logger.info(
        "Checked %d amounts, %d violation(s)",
        result.checked,
        len(result.violations),
    )
    return result
