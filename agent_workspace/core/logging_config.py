import logging
import sys
from typing import Optional

from agent_workspace.core.config import get_settings


_configured = False


def configure_logging(level_override: Optional[str] = None) -> None:
    """
    Configure process-wide logging for the service and CLI entrypoints.

    Idempotent. An unknown level name (e.g. AI_LOG_LEVEL=verbose) falls back
    to INFO instead of failing at startup.
    """
    global _configured

    if _configured:
        return

    level_name = (level_override or get_settings().log_level).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        stream=sys.stdout,
    )

    # Request lines from httpx would echo every backend call at INFO.
    for noisy_logger in ("uvicorn", "uvicorn.access", "httpx", "httpcore"):
        logging.getLogger(noisy_logger).setLevel(logging.WARNING)

    if level_name != logging.getLevelName(level):
        logging.getLogger(__name__).warning("Unknown log level %r; using INFO", level_name)

    _configured = True
