"""CLI commands for logsync."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, NoReturn

import typer

from logsync.config import BUCKET_ENV, Settings
from logsync.core.date_paths import format_compact_date
from logsync.core.exceptions import LogsyncError
from logsync.core.watermark import sequence_filename
from logsync.log_config import configure_logging


if TYPE_CHECKING:
    from logsync.core.models import Watermark
    from logsync.core.services import LogSync


logger = logging.getLogger(__name__)

app = typer.Typer(
    name="logsync",
    help="Sync JSON log objects from a storage bucket to local files.",
    no_args_is_help=True,
)


def _exit_with_error(error: LogsyncError) -> NoReturn:
    """Print a library error with its recovery hint and exit with status 1."""
    typer.echo(f"Error: {error}", err=True)
    if error.recovery_hint:
        typer.echo(f"Hint: {error.recovery_hint}", err=True)
    raise typer.Exit(1)


def load_service(
    bucket: str | None,
    output_dir: Path | None,
    combined_name: str | None = None,
) -> LogSync:
    """Resolve settings and build the LogSync service for CLI commands.

    Raises:
        typer.Exit: If required configuration is missing.
    """
    from logsync.core.services import LogSync

    try:
        settings = Settings.from_env(
            bucket=bucket, output_dir=output_dir, combined_name=combined_name
        )
    except LogsyncError as e:
        _exit_with_error(e)

    return LogSync.from_settings(settings)


def format_watermark(watermark: Watermark | None) -> str:
    """Render a watermark as the sequence file name it came from."""
    if watermark is None:
        return "none"
    return sequence_filename(format_compact_date(watermark.date), watermark.sequence)


@app.command()
def sync(
    bucket: str | None = typer.Option(
        None,
        "--bucket",
        "-b",
        envvar=BUCKET_ENV,
        show_envvar=True,
        help="Bucket name, s3://bucket/prefix URI, or local directory.",
    ),
    output_dir: Path | None = typer.Option(
        None,
        "--output-dir",
        "-o",
        help="Directory for synced files. Defaults to <project root>/data.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging.",
    ),
) -> None:
    """Download objects newer than the local watermark into sequence files."""
    configure_logging(verbose)
    service = load_service(bucket, output_dir)

    try:
        report = service.sync()
    except LogsyncError as e:
        _exit_with_error(e)
    except Exception:
        logger.exception("Error syncing files")
        raise

    typer.echo(f"Watermark: {format_watermark(report.watermark)}")
    typer.echo(f"New objects: {report.candidates}")
    typer.echo(f"Written: {len(report.written)}")
    for path in report.written:
        typer.echo(f"  {path.name}")
    typer.echo(f"Skipped: {len(report.skipped)}")
    typer.echo(f"Failed: {len(report.failed)}")


@app.command()
def today(
    bucket: str | None = typer.Option(
        None,
        "--bucket",
        "-b",
        envvar=BUCKET_ENV,
        show_envvar=True,
        help="Bucket name, s3://bucket/prefix URI, or local directory.",
    ),
    output_dir: Path | None = typer.Option(
        None,
        "--output-dir",
        "-o",
        help="Directory for synced files. Defaults to <project root>/data.",
    ),
    combined_file: str | None = typer.Option(
        None,
        "--combined-file",
        "-f",
        help="Name of the combined output file (default: today.json).",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging.",
    ),
) -> None:
    """Combine today's JSON objects into one line-delimited file."""
    configure_logging(verbose)
    service = load_service(bucket, output_dir, combined_file)

    try:
        report = service.aggregate_today()
    except LogsyncError as e:
        _exit_with_error(e)
    except Exception:
        logger.exception("Error processing files")
        raise

    if not report.written:
        typer.echo(f"No JSON files found for today ({report.date_fragment})")
        return

    typer.echo("Processing completed:")
    typer.echo(f"- {report.objects} files processed")
    typer.echo(f"- {report.entries} entries written")
    if report.skipped:
        typer.echo(f"- {len(report.skipped)} files skipped")
    if report.failed:
        typer.echo(f"- {len(report.failed)} files failed")
    typer.echo(f"- Output saved to: {report.output_path}")


@app.command()
def watermark(
    bucket: str | None = typer.Option(
        None,
        "--bucket",
        "-b",
        envvar=BUCKET_ENV,
        show_envvar=True,
        help="Bucket name, s3://bucket/prefix URI, or local directory.",
    ),
    output_dir: Path | None = typer.Option(
        None,
        "--output-dir",
        "-o",
        help="Directory for synced files. Defaults to <project root>/data.",
    ),
) -> None:
    """Show the most recent sequence file present locally."""
    service = load_service(bucket, output_dir)

    current = service.watermark()
    if current is None:
        typer.echo(f"No sequence files found in {service.output_dir}")
        return
    typer.echo(format_watermark(current))


def main() -> None:
    """Entry point for the CLI."""
    app()
