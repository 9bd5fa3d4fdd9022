"""Config file discovery.

Walk-up finder locates commonkit.toml, similar to how git finds .git/.
The COMMONKIT_CONFIG env var overrides the walk; --config is handled by
CommonKitSettings.from_cli.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "commonkit.toml"
CONFIG_ENV_VAR = "COMMONKIT_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the commonkit.toml governing *start* (default: cwd), if any.

    A set COMMONKIT_CONFIG wins outright, even when it names a missing file.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        explicit = Path(env_path)
        return explicit if explicit.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
