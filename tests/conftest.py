from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from tests.fixtures.fake_runner import FakeRunner  # noqa: E402


@pytest.fixture()
def fake_runner() -> FakeRunner:
    """Runner that records commands instead of spawning ``npx``/``npm``."""

    return FakeRunner()


@pytest.fixture()
def answer():
    """Prompt replacement that always answers ``wc-123``."""

    def ask(prompt: str) -> str:
        return "wc-123"

    return ask
