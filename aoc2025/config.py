from __future__ import annotations

import os
import sys
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Mapping

from loguru import logger

DEFAULT_DATA_DIR = Path("data")
DEFAULT_END_MARKER = "END"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the puzzle runner.

    Attributes:
        data_dir: Directory holding the `day<N>.txt` input files.
        end_marker: Line that terminates input read from stdin.
        log_level: Minimum level for the loguru stderr sink.
    """

    data_dir: Path = DEFAULT_DATA_DIR
    end_marker: str = DEFAULT_END_MARKER
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from `AOC_DATA_DIR`, `AOC_END_MARKER` and `AOC_LOG_LEVEL`."""
        env = os.environ if environ is None else environ
        return cls(
            data_dir=Path(env.get("AOC_DATA_DIR", DEFAULT_DATA_DIR)),
            end_marker=env.get("AOC_END_MARKER", DEFAULT_END_MARKER),
            log_level=env.get("AOC_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        )

    def override(self, **changes: object) -> Settings:
        """Return a copy with the given fields replaced, ignoring `None` values."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


def configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level)
