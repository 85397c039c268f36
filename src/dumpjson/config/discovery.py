"""Locate the dumpjson.toml holding serializer and deserializer options.

The nearest file in the working directory or its parents wins, unless
DUMPJSON_CONFIG names one explicitly. A --config flag skips the search.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "dumpjson.toml"
CONFIG_ENV_VAR = "DUMPJSON_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the dumpjson.toml governing *start* (default: cwd), or None.

    A DUMPJSON_CONFIG value that is not an existing file yields None
    instead of falling back to the directory search.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        explicit = Path(env_path)
        return explicit if explicit.is_file() else None

    directory = (start or Path.cwd()).resolve()
    for candidate_dir in (directory, *directory.parents):
        candidate = candidate_dir / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
