"""Typer CLI interface for quantity."""

import logging
import threading

import typer
from rich.progress import BarColumn, Progress, TaskProgressColumn, TextColumn

from quantity.config.settings import Settings
from quantity.core.amount import (
    ZeroDurationError,
    format_amount,
    format_bps,
    format_bytes,
)
from quantity.core.duration import InvalidDurationError, format_duration

app = typer.Typer(
    name="quantity",
    help="Fixed-width human-readable amounts, byte counts, rates and durations.",
    no_args_is_help=True,
)

logger = logging.getLogger(__name__)

_WIDTH_HELP = "Output width in columns (-1 for the default)"


def _get_settings() -> Settings:
    """Load settings, warning on config errors."""
    try:
        return Settings()
    except Exception as e:
        logger.warning("Failed to load config: %s", e)
        logger.warning("Using default settings")
        return Settings.model_construct()


def _width(value: int | None, default: int) -> int | None:
    """Resolve a CLI width against the configured default."""
    width = default if value is None else value
    return None if width < 0 else width


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output"),
) -> None:
    """Format quantities for aligned columnar display."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )


@app.command()
def amount(
    n: int = typer.Argument(..., min=0, help="Non-negative count"),
    width: int | None = typer.Option(None, "--width", "-w", help=_WIDTH_HELP),
) -> None:
    """Format a unitless count."""
    settings = _get_settings()
    typer.echo(format_amount(n, _width(width, settings.amount_width)))


@app.command(name="bytes")
def bytes_(
    n: int = typer.Argument(..., min=0, help="Number of bytes"),
    width: int | None = typer.Option(None, "--width", "-w", help=_WIDTH_HELP),
) -> None:
    """Format a byte count."""
    settings = _get_settings()
    typer.echo(format_bytes(n, _width(width, settings.bytes_width)))


_SIGNED_ARGS = {"ignore_unknown_options": True}


@app.command(context_settings=_SIGNED_ARGS)
def rate(
    n: int = typer.Argument(..., min=0, help="Number of bytes transferred"),
    seconds: float = typer.Argument(
        ..., help="Elapsed seconds; the sign is ignored"
    ),
    width: int | None = typer.Option(None, "--width", "-w", help=_WIDTH_HELP),
) -> None:
    """Format a byte rate from bytes over elapsed seconds."""
    settings = _get_settings()
    try:
        typer.echo(format_bps(n, seconds, _width(width, settings.rate_width)))
    except (ZeroDurationError, InvalidDurationError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command(context_settings=_SIGNED_ARGS)
def duration(
    seconds: float = typer.Argument(..., help="Duration in seconds"),
) -> None:
    """Format a duration into five columns."""
    try:
        typer.echo(format_duration(seconds))
    except InvalidDurationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command()
def table(
    width: int | None = typer.Option(None, "--width", "-w", help=_WIDTH_HELP),
) -> None:
    """Show sample magnitudes rendered by every formatter."""
    from quantity.display import print_sample_tables

    settings = _get_settings()
    print_sample_tables(_width(width, settings.amount_width))


@app.command()
def check(
    width: int | None = typer.Option(None, "--width", "-w", help=_WIDTH_HELP),
    limit: int | None = typer.Option(
        None, "--limit", "-n", min=0, help="Check every amount below this"
    ),
    workers: int | None = typer.Option(
        None, "--workers", "-j", min=1, help="Number of interleaved stripes"
    ),
) -> None:
    """Verify that amounts always format to a fixed width."""
    from quantity.core.check import check_fixed_width, expected_width

    settings = _get_settings()
    width = _width(width, settings.check_width)
    limit = settings.check_limit if limit is None else limit
    workers = settings.check_workers if workers is None else workers

    typer.echo(
        f"Checking {format_amount(limit)} amounts at width "
        f"{expected_width(width)} on {workers} stripe(s)"
    )

    lock = threading.Lock()
    per_stripe = -(-limit // workers)

    with Progress(
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        TextColumn("{task.fields[checked]}"),
    ) as progress:
        tasks = [
            progress.add_task(
                f"stripe {i:>2d}", total=per_stripe, checked=format_amount(0)
            )
            for i in range(workers)
        ]

        def _on_progress(p):
            with lock:
                progress.update(
                    tasks[p.stripe],
                    completed=p.checked,
                    checked=format_amount(p.checked),
                )

        result = check_fixed_width(
            width=width,
            limit=limit,
            workers=workers,
            batch=settings.check_batch,
            on_progress=_on_progress,
        )

    if not result.ok:
        for v in result.violations:
            typer.echo(
                f"Formatting {v.amount}: expected length {result.width}, "
                f"got {v.rendered!r}",
                err=True,
            )
        raise typer.Exit(1)

    typer.echo(f"OK: {result.checked} amounts")
