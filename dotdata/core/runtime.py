"""
Runtime context and configuration for the dotdata command line.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
import logging
import os
from pathlib import Path

from dotdata.core.settings import load_settings, save_settings, Settings
from dotdata.core import paths

ENV_OUTPUT_FORMAT = "DOTDATA_OUTPUT_FORMAT"


@dataclass
class Runtime:
    """Resolved configuration for one CLI invocation."""
    settings_dir: Path
    settings: Settings
    logger: logging.Logger

    def save_settings(self, settings: Settings) -> Path:
        """Persist new settings and make them current."""
        self.settings = settings
        path = save_settings(self.settings_dir, settings)
        self.logger.info("Saved settings to %s", path)
        return path

# --- Runtime management ---

def build_runtime(
    *,
    settings_dir: Path | None = None,
    output_format: str | None = None,
    indent: int | None = None,
    verbose: bool = False,
) -> Runtime:
    """
    Builds and returns a Runtime. Explicit arguments win over the
    DOTDATA_OUTPUT_FORMAT environment variable, which wins over the
    settings file.
    """
    # 1. Settings
    if settings_dir is None:
        settings_dir = paths.default_settings_dir()
    settings = load_settings(settings_dir)
    overrides = {}
    if output_format is not None:
        overrides["output_format"] = output_format
    elif env := os.getenv(ENV_OUTPUT_FORMAT):
        overrides["output_format"] = env.strip().lower()
    if indent is not None:
        overrides["indent"] = indent
    if verbose:
        overrides["verbose"] = True
    settings = replace(settings, **overrides)
    # 2. Logging
    logger = logging.getLogger("dotdata")
    if not logging.getLogger().hasHandlers():
        logging.basicConfig(
            level=logging.DEBUG if settings.verbose else logging.WARNING,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
    logger.setLevel(logging.DEBUG if settings.verbose else logging.INFO)
    return Runtime(settings_dir=settings_dir, settings=settings, logger=logger)
