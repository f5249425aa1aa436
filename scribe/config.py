"""
Scribe Configuration

Structured configuration for the CLI and storage layer. Values come from the
ScribeConfig defaults, overridden by an optional YAML file whose path is
passed explicitly or read from SCRIBE_CONFIG_PATH (.env supported).

The templating core never reads configuration itself; callers convert the
loaded config to a RenderDefaults value and pass it in.

Example config file:
    drafts_dir: data/cv_drafts
    output_dir: outs/html
    default_template: klassiek
    default_accent: "#7a3e9d"
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from loguru import logger
from omegaconf import OmegaConf

from scribe.contexts.templating.defaults import (
    DEFAULT_ACCENT,
    DEFAULT_DARK,
    DEFAULT_TEMPLATE,
    RenderDefaults,
)

load_dotenv()

CONFIG_PATH_ENV = "SCRIBE_CONFIG_PATH"


@dataclass
class ScribeConfig:
    """
    Settings shared by the CLI commands.

    Attributes:
        drafts_dir: Directory holding cv_v<N> drafts
        output_dir: Directory for rendered HTML
        logs_dir: Root directory for per-run log folders
        default_template: Layout used when a document names none
        default_accent: Accent color used when a document sets none
        default_dark: Dark color used when a document sets none
    """

    drafts_dir: str = "data/cv_drafts"
    output_dir: str = "outs/html"
    logs_dir: str = "outs/logs"
    default_template: str = DEFAULT_TEMPLATE
    default_accent: str = DEFAULT_ACCENT
    default_dark: str = DEFAULT_DARK

    def to_render_defaults(self) -> RenderDefaults:
        """Render fallbacks for the templating core."""
        return RenderDefaults(
            accent=self.default_accent,
            dark=self.default_dark,
            template=self.default_template,
        )


def load_config(config_path: Optional[Path] = None) -> ScribeConfig:
    """
    Load configuration, merging a YAML file over the defaults.

    Args:
        config_path: Optional YAML file (defaults to SCRIBE_CONFIG_PATH env variable)

    Returns:
        ScribeConfig instance

    Raises:
        FileNotFoundError: If config_path is given explicitly and does not exist
        omegaconf.errors.ValidationError: If the file holds a value of the wrong type
        omegaconf.errors.ConfigKeyError: If the file holds an unknown key
    """
    schema = OmegaConf.structured(ScribeConfig)

    if config_path is None:
        env_path = os.getenv(CONFIG_PATH_ENV)
        if not env_path:
            return OmegaConf.to_object(schema)
        config_path = Path(env_path)
        if not config_path.exists():
            logger.warning(f"{CONFIG_PATH_ENV} points to missing file {config_path}, using defaults")
            return OmegaConf.to_object(schema)

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    merged = OmegaConf.merge(schema, OmegaConf.load(config_path))
    logger.debug(f"Loaded config from {config_path}")
    return OmegaConf.to_object(merged)
