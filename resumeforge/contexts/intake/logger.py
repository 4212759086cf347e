"""
Intake context logger: [intake]-prefixed wrappers over loguru.

Intake modules log through this module rather than loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[intake]"


def _log_info(message: str) -> None:
    logger.opt(depth=1).info(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    logger.opt(depth=1).debug(f"{CONTEXT_PREFIX} {message}")


def log_extraction_result(source_name: str, declared_type: str, text: str) -> None:
    """Log size and line count of freshly extracted resume text."""
    _log_info(f"Extracted {len(text)} chars from {source_name} ({declared_type})")
    _log_debug(f"  Lines: {len(text.splitlines())}")
