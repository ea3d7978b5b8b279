"""Logging setup for the dbtypes command line tool."""

from __future__ import annotations

import logging
from typing import Final

from .env import read_env_var

LOG_LEVEL_ENV_VAR: Final[str] = "DBTYPES_LOG_LEVEL"


def configure_logging(*, level: int | str | None = None, force: bool = False) -> None:
    """Configure the root logger.

    ``level`` falls back to ``DBTYPES_LOG_LEVEL`` and then to ``WARNING`` so the CLI
    only reports problems unless asked for more.
    """

    resolved = level if level is not None else read_env_var(LOG_LEVEL_ENV_VAR) or logging.WARNING
    if isinstance(resolved, str):
        resolved = resolved.upper()

    logging.basicConfig(
        level=resolved,
        format="%(levelname)s [%(name)s] %(message)s",
        force=force,
    )
