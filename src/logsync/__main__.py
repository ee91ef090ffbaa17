"""Allow running logsync with ``python -m logsync``."""

from logsync.cli import main


main()
