"""
User settings for the dotdata command line.
"""
from dataclasses import asdict, dataclass, fields
from pathlib import Path
import json
import logging
from typing import Any

logger = logging.getLogger("dotdata.settings")

SETTINGS_FILE = "settings.json"
OUTPUT_FORMATS = ("json", "yaml")

@dataclass
class Settings:
    """Configuration settings for the dotdata CLI."""
    output_format: str = "json"
    indent: int = 2
    verbose: bool = False

    def __post_init__(self):
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"Unknown output format '{self.output_format}'. Valid options: {', '.join(OUTPUT_FORMATS)}"
            )
        if self.indent < 0:
            raise ValueError("Indent must be a non-negative integer.")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'Settings':
        """Hydrate Settings from a dictionary, ignoring unknown keys."""
        valid_keys = {f.name for f in fields(cls)}
        filtered_data = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered_data)

    def to_dict(self) -> dict[str, Any]:
        """Serialize Settings to a dictionary."""
        return asdict(self)

# --- Persistence functions ---

def load_settings(settings_dir: Path) -> Settings:
    """
    Load settings from settings.json. A missing file gives the defaults; an
    unreadable or invalid one is logged and also gives the defaults.
    """
    path = settings_dir / SETTINGS_FILE
    if not path.exists():
        return Settings()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise TypeError(f"expected an object, got {type(data).__name__}")
        return Settings.from_dict(data)
    except (TypeError, ValueError) as e:  # JSONDecodeError is a ValueError
        logger.warning("Ignoring invalid settings file %s: %s", path, e)
        return Settings()

def save_settings(settings_dir: Path, settings: Settings) -> Path:
    """Atomic write of settings.json (temp file then move). Returns its path."""
    settings_dir.mkdir(parents=True, exist_ok=True)
    path = settings_dir / SETTINGS_FILE
    temp_path = path.with_suffix(".tmp")
    try:
        temp_path.write_text(json.dumps(settings.to_dict(), indent=2), encoding="utf-8")
        temp_path.replace(path)
    except OSError as e:
        raise IOError(f"Failed to save settings to {path}: {e}") from e
    return path
