"""Fixtures for the test suite."""

from __future__ import annotations

import logging
import pathlib
from typing import TYPE_CHECKING

import pytest

from makedoc.settings import settings

if TYPE_CHECKING:
    from collections.abc import Callable, Generator

logging.basicConfig(
    force=True,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=logging.INFO,
)

DATA_DIR = pathlib.Path(__file__).parent / "makedoc" / "tests" / "data"


@pytest.fixture
def data_dir() -> pathlib.Path:
    """Directory holding the sample Makefiles."""
    return DATA_DIR


@pytest.fixture
def write_makefile(tmp_path: pathlib.Path) -> Callable[..., pathlib.Path]:
    """Fixture returning a helper that writes Makefile text to a temporary file."""
    counter = iter(range(1_000))

    def _write(content: str, name: str | None = None) -> pathlib.Path:
        path = tmp_path / (name or f"Makefile.{next(counter)}")
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def restore_settings() -> Generator[None]:
    """Fixture to restore the global settings after a test changes them."""
    original = (settings.log_level, settings.column_width, settings.pretty)
    yield
    settings.log_level, settings.column_width, settings.pretty = original
