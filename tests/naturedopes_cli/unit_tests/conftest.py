import os.path
import tempfile
from typing import Generator

import pytest


@pytest.fixture(scope="function")
def home_directory(monkeypatch: pytest.MonkeyPatch) -> Generator[str, None, None]:
    with tempfile.TemporaryDirectory() as tmp_dir:
        monkeypatch.setenv("HOME", tmp_dir)
        monkeypatch.delenv("API_URL", raising=False)
        monkeypatch.delenv("API_KEY", raising=False)
        yield tmp_dir


@pytest.fixture(scope="function")
def config_file_path(home_directory: str) -> str:
    return os.path.join(home_directory, ".naturedopes-cli", "config.json")
