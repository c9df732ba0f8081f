from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from tests.fixtures.memory_fs import MemoryFileSystem  # noqa: E402


@pytest.fixture()
def memory_fs() -> MemoryFileSystem:
    return MemoryFileSystem()
