"""CLI for logsync."""

# Import commands to register them with the app
# These imports have side effects (registering commands with @app.command())
from logsync.cli.commands import tree as _tree_module  # noqa: F401
from logsync.cli.main import app, main


__all__ = ["app", "main"]
