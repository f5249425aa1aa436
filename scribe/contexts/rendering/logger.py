"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from scribe.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Path, template_name: str = None) -> Path:
    """
    Setup logger for rendering context.

    Configures loguru with provenance tracking and rendering-specific context.

    Args:
        log_dir: Directory for this rendering session
        template_name: Layout requested on the command line, if any

    Returns:
        Path to log file

    Example:
        from scribe.contexts.rendering.logger import setup_rendering_logger

        log_file = setup_rendering_logger(log_dir, template_name="klassiek")
    """
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        extra_provenance={"Layout": template_name or "(from document)"},
    )


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_render_start(document_path: Path, output_path: Path) -> None:
    """Log start of an export with context."""
    _log_info(f"Rendering {document_path.name}")
    _log_debug(f"  Source: {document_path}")
    _log_debug(f"  Target: {output_path}")


def log_export_result(result) -> None:
    """
    Log export result.

    Args:
        result: ExportResult from export_html()
    """
    if result.success:
        _log_success(
            f"{result.input_path.name}: layout '{result.template_name}' "
            f"-> {result.output_path} ({result.time_s:.2f}s)"
        )
        _log_debug(
            f"  Page: {result.page.width} x {result.page.height}, "
            f"margin {result.page.margin}, background {result.page.print_background}"
        )
    else:
        _log_error(f"{result.input_path.name}: export failed ({result.time_s:.2f}s)")
        _log_error(f"  {result.error}")
