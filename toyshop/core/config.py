"""Runtime settings.

Reads ``.env`` (if present) and then the process environment:

* ``TOYSHOP_DATA_FILE`` - path of the toy JSON file (default ``toys.json``)
* ``TOYSHOP_SEED`` - optional integer seed for the draw RNG
* ``TOYSHOP_LOG_LEVEL`` - logging level name for the console runner (default ``INFO``)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv  # type: ignore

DEFAULT_DATA_FILE = "toys.json"


@dataclass
class Settings:
    data_file: Path = Path(DEFAULT_DATA_FILE)
    seed: Optional[int] = None
    log_level: str = "INFO"


def load_settings() -> Settings:
    load_dotenv()
    raw_seed = os.getenv("TOYSHOP_SEED")
    seed: Optional[int] = None
    if raw_seed:
        try:
            seed = int(raw_seed)
        except ValueError as exc:
            raise ValueError(f"TOYSHOP_SEED must be an integer, got {raw_seed!r}") from exc
    return Settings(
        data_file=Path(os.getenv("TOYSHOP_DATA_FILE") or DEFAULT_DATA_FILE),
        seed=seed,
        log_level=(os.getenv("TOYSHOP_LOG_LEVEL") or "INFO").upper(),
    )
