"""
Rendering context logger: [render]-prefixed wrappers over loguru, plus
summaries of finished layouts and serializations.

Rendering modules log through this module rather than loguru directly.
"""

from pathlib import Path

from loguru import logger

from resumeforge.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Path = None, theme_id: str = None) -> Path:
    """
    Start a "render" session log.

    Args:
        log_dir: Session directory (default: a new folder under LOGS_PATH)
        theme_id: Requested theme, recorded in the provenance header

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        extra_provenance={"Theme": theme_id} if theme_id else None,
    )


def _log_success(message: str) -> None:
    logger.opt(depth=1).success(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    logger.opt(depth=1).warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    logger.opt(depth=1).debug(f"{CONTEXT_PREFIX} {message}")


def log_layout_result(layout, theme_id: str) -> None:  # layout: PageLayout
    run_count = sum(len(page.runs) for page in layout.pages)
    _log_debug(f"Laid out {run_count} runs on {layout.page_count} page(s) with theme {theme_id}")
    for page in layout.pages:
        _log_debug(f"  Page {page.number}: {len(page.runs)} runs, {len(page.rules)} rules")


def log_serialization_result(fmt: str, size_bytes: int, elapsed_time: float) -> None:
    _log_success(f"Rendered {fmt.upper()} ({size_bytes:,} bytes, {elapsed_time:.2f}s)")
