from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import AsyncIterator, TextIO

from loguru import logger

from .stream import Stream, stream
from .stream_utils import take_until


def data_path(day: int, data_dir: Path | str = Path("data")) -> Path:
    """Path of the input file for `day`, e.g. `data/day5.txt`."""
    return Path(data_dir) / f"day{day}.txt"


@stream
def from_text(text: str) -> list[str]:
    """Stream the lines of `text`, without line terminators."""
    return text.splitlines()


@stream
async def from_file(path: Path | str) -> AsyncIterator[str]:
    """Stream the lines of a UTF-8 text file, without line terminators.

    Other whitespace is preserved, since some puzzles care about column alignment.
    """
    path = Path(path)
    logger.debug("Reading input from {}", path)
    text = await asyncio.to_thread(path.read_text, encoding="utf-8")
    for line in text.splitlines():
        yield line


@stream
async def _from_stdin_raw(stdin: TextIO) -> AsyncIterator[str]:
    while line := await asyncio.to_thread(stdin.readline):
        yield line.rstrip("\r\n")


def from_stdin(end_marker: str = "END", stdin: TextIO | None = None) -> Stream[str]:
    """Stream lines from standard input until end of file or the `end_marker` line.

    Surrounding whitespace is ignored when looking for the marker.
    """
    logger.debug("Reading input from stdin until {!r}", end_marker)
    return _from_stdin_raw(sys.stdin if stdin is None else stdin) / take_until(end_marker.strip(), key=str.strip)


async def read_lines(day: int, data_dir: Path | str = Path("data")) -> list[str]:
    """Read the whole input file of `day` into memory."""
    return await from_file(data_path(day, data_dir)).to_list()


__all__ = ("data_path", "from_text", "from_file", "from_stdin", "read_lines")
