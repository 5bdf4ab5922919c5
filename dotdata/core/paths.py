"""
Default locations for dotdata configuration.
"""
from pathlib import Path
from platformdirs import user_data_dir

APP_NAME = 'dotdata'

def default_settings_dir() -> Path:
    """Get the default settings directory for dotdata."""
    return Path(user_data_dir(APP_NAME)).expanduser().resolve()
