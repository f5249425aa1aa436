"""
Templating context logger.

Provides logging interface for templating context with automatic [template] prefix.
All templating modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from scribe.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[template]"


def setup_templating_logger(log_dir: Path, phase: str = "render") -> Path:
    """
    Setup logger for templating context.

    Args:
        log_dir: Directory for this templating session
        phase: Phase name for provenance ("render" or "rewrite")

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="template",
        log_dir=log_dir,
        extra_provenance={"Phase": phase},
    )


# Wrapper functions with automatic [template] prefix


def _log_info(message: str) -> None:
    """Log info message with [template] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [template] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [template] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [template] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [template] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level templating-specific logging helpers


def log_classification(sidebar_titles: list, main_titles: list) -> None:
    """Log the sidebar/main split of a parsed document."""
    _log_debug(f"Sidebar sections: {sidebar_titles or '(none)'}")
    _log_debug(f"Main sections: {main_titles or '(none)'}")


def log_render_result(template_name: str, n_sidebar: int, n_main: int, n_chars: int) -> None:
    """Log a completed render."""
    _log_success(
        f"Rendered layout '{template_name}': {n_sidebar} sidebar + {n_main} main sections "
        f"({n_chars} chars)"
    )


def log_rewrite_result(title: str, n_items: int, itemized: bool) -> None:
    """Log a completed section rewrite."""
    style = "itemized" if itemized else "leveled"
    _log_success(f"Rewrote section '{title}' with {n_items} {style} item(s)")
