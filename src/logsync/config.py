"""Configuration utilities for logsync.

Settings are read from the environment once at startup. BUCKET_NAME is
required; everything else has a default.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from logsync.core.exceptions import ConfigurationError


BUCKET_ENV = "BUCKET_NAME"
OUTPUT_DIR_ENV = "LOGSYNC_OUTPUT_DIR"
COMBINED_FILE_ENV = "LOGSYNC_COMBINED_FILE"
TIMEZONE_ENV = "LOGSYNC_TIMEZONE"

DEFAULT_COMBINED_FILE = "today.json"


def find_project_root(start: Path | None = None) -> Path:
    """Find the project root directory by walking up from start directory.

    Searches for marker files in the following priority order:
    1. .logsync - Explicit project marker
    2. pyproject.toml - Python project root
    3. .git - Version control root

    Args:
        start: Directory to start searching from. If None, uses current directory.

    Returns:
        Path to project root directory. Returns start directory if no markers found.
    """
    if start is None:
        start = Path.cwd()

    markers = [".logsync", "pyproject.toml", ".git"]
    current = start.resolve()

    for parent in [current, *current.parents]:
        for marker in markers:
            if (parent / marker).exists():
                return parent

    return current


def resolve_timezone(name: str | None) -> ZoneInfo | None:
    """Look up an IANA timezone name; None or blank means local time.

    Raises:
        ConfigurationError: If the name is unknown.
    """
    if not name or not name.strip():
        return None
    try:
        return ZoneInfo(name.strip())
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ConfigurationError(
            f"Unknown timezone '{name}'", setting=TIMEZONE_ENV
        ) from e


@dataclass(frozen=True, slots=True)
class Settings:
    """Runtime configuration.

    Attributes:
        bucket: Bucket name, "s3://bucket/prefix" URI, or local directory.
        output_dir: Directory receiving sequence files and the combined file.
        combined_name: File name of the combined daily output.
        timezone: Timezone for sequence file dates (None for local time).
    """

    bucket: str
    output_dir: Path
    combined_name: str = DEFAULT_COMBINED_FILE
    timezone: ZoneInfo | None = None

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        bucket: str | None = None,
        output_dir: Path | None = None,
        combined_name: str | None = None,
    ) -> Settings:
        """Build settings from environment variables.

        Explicit arguments take precedence over the environment.

        Args:
            environ: Environment mapping. Defaults to os.environ.
            bucket: Overrides BUCKET_NAME.
            output_dir: Overrides LOGSYNC_OUTPUT_DIR.
            combined_name: Overrides LOGSYNC_COMBINED_FILE.

        Raises:
            ConfigurationError: If no bucket is configured or the timezone
                is unknown.
        """
        env = os.environ if environ is None else environ

        bucket = bucket or env.get(BUCKET_ENV, "")
        if not bucket.strip():
            raise ConfigurationError(f"{BUCKET_ENV} is not defined", setting=BUCKET_ENV)

        if output_dir is None:
            env_dir = env.get(OUTPUT_DIR_ENV)
            output_dir = Path(env_dir) if env_dir else find_project_root() / "data"

        return cls(
            bucket=bucket.strip(),
            output_dir=output_dir,
            combined_name=combined_name
            or env.get(COMBINED_FILE_ENV)
            or DEFAULT_COMBINED_FILE,
            timezone=resolve_timezone(env.get(TIMEZONE_ENV)),
        )
