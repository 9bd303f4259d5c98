# tests/conftest.py
from pathlib import Path
from typing import Callable

import pytest

# local imports
from ContextEngine import EngineConfig

ENV_NAMES = ("CONTEXT_FORCE_MARKERS", "CONTEXT_TARGETED", "CONTEXT_PLACEHOLDER", "CONTEXT_LOG_LEVEL")


@pytest.fixture
def write_source(tmp_path: Path) -> Callable[[str, str], Path]:
    """Factory writing `content` to tmp_path/<name> and returning the path."""
    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def config() -> EngineConfig:
    return EngineConfig()


@pytest.fixture
def clean_env(monkeypatch):
    """Strip every CONTEXT_* variable so load_config() sees defaults."""
    # setenv first so teardown also removes values later injected by load_dotenv()
    for name in ENV_NAMES:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch
