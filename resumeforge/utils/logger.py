"""
Session logging for the resumeforge scripts.

Each script run gets one log file (DEBUG and up) plus INFO-level console
output, both opened with a provenance header. Library modules never configure
sinks themselves; they log through the prefixed wrappers in
contexts/{context}/logger.py.
"""

import os
import sys
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

from resumeforge import __version__

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {name}:{line} | {message}"
CONSOLE_FORMAT = "{time:HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"

LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}


def session_log_dir(context_name: str, now: datetime = None) -> Path:
    """
    Timestamped directory under LOGS_PATH for one script run.

    Example:
        >>> session_log_dir("render", datetime(2025, 11, 14, 12, 34, 56)).name
        'render_20251114_123456'
    """
    now = now or datetime.now()
    return LOGS_PATH / f"{context_name}_{now:%Y%m%d_%H%M%S}"


def setup_logger(
    context_name: str,
    log_dir: Path = None,
    extra_provenance: dict = None,
    level_colors: dict = None,
) -> Path:
    """
    Point loguru at a session log file and the console.

    Args:
        context_name: Context identifier, also the log file stem ("score", "render")
        log_dir: Directory for this session (default: a new session_log_dir)
        extra_provenance: Extra key-value pairs for the provenance header
        level_colors: Console color overrides, e.g. {"INFO": "<cyan>"}

    Returns:
        Path to the log file
    """
    log_dir = Path(log_dir) if log_dir is not None else session_log_dir(context_name)
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    for level_name, color in {**LEVEL_COLORS, **(level_colors or {})}.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level="INFO", colorize=True)

    log_provenance(extra_provenance)
    return log_file


def log_provenance(extra_context: dict = None) -> None:
    """Log which command produced this session, plus any extra context."""
    rows = {
        "Script": sys.argv[0],
        "Command": " ".join(sys.argv),
        "Working directory": Path.cwd(),
        "Python": sys.version.split()[0],
        "resumeforge": __version__,
        **(extra_context or {}),
    }

    logger.info("=" * 80)
    for key, value in rows.items():
        logger.info(f"{key}: {value}")
    logger.info("=" * 80)
