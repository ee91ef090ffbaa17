"""Tree command for CLI."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.text import Text
from rich.tree import Tree

from logsync.cli.main import _exit_with_error, app, load_service
from logsync.config import BUCKET_ENV
from logsync.core.exceptions import LogsyncError


@app.command()
def tree(
    bucket: str | None = typer.Option(
        None,
        "--bucket",
        "-b",
        envvar=BUCKET_ENV,
        show_envvar=True,
        help="Bucket name, s3://bucket/prefix URI, or local directory.",
    ),
) -> None:
    """Show the bucket structure grouped by directory."""
    service = load_service(bucket, output_dir=None)

    try:
        structure = service.bucket_tree()
    except LogsyncError as e:
        _exit_with_error(e)

    # Build Rich tree, one branch per directory
    root = Tree(Text(f"Bucket structure for: {bucket}", style="bold"))
    for directory, names in structure.items():
        branch = root.add(Text(f"{directory}/", style="blue"))
        for name in names:
            branch.add(Text(name))

    console = Console(highlight=False)
    console.print(root)

    total = sum(len(names) for names in structure.values())
    typer.echo(f"Total files in bucket: {total}")
