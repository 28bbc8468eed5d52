from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources
from pathlib import Path
from typing import Final

CODES_PATH_ENV: Final[str] = "STATUSES_CODES_PATH"
BUNDLED_CODES_RESOURCE: Final[str] = "data/codes.json"


def bundled_codes_path() -> Path:
    return Path(str(resources.files("statuses").joinpath(BUNDLED_CODES_RESOURCE)))


def resolve_codes_path(environ: Mapping[str, str] | None = None) -> Path:
    """Definition file for the default cache.

    ``STATUSES_CODES_PATH`` wins when set to a non-blank value; otherwise the
    data set shipped with the package is used.
    """
    env = os.environ if environ is None else environ
    override = env.get(CODES_PATH_ENV, "").strip()
    if override:
        return Path(override).expanduser()
    return bundled_codes_path()
