from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest
from loguru import logger

from example_inputs import EXAMPLES


@pytest.fixture
def example_data_dir(tmp_path: Path) -> Path:
    """A data directory holding the worked example of every day as `day<N>.txt`."""
    for day, text in EXAMPLES.items():
        (tmp_path / f"day{day}.txt").write_text(text, encoding="utf-8")
    return tmp_path


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """Collect loguru messages (loguru doesn't go through the `caplog` machinery)."""
    messages: list[str] = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
