"""
Templating context logger: [template]-prefixed wrappers over loguru.

Templating modules log through this module rather than loguru directly.
"""

from pathlib import Path

from loguru import logger

from resumeforge.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[template]"


def setup_templating_logger(log_dir: Path = None) -> Path:
    """Start a "template" session log (see utils.logger.setup_logger)."""
    return _setup_logger(context_name="template", log_dir=log_dir)


def _log_info(message: str) -> None:
    logger.opt(depth=1).info(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    logger.opt(depth=1).debug(f"{CONTEXT_PREFIX} {message}")
