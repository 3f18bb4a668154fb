# tests/conftest.py
from __future__ import annotations

import pytest

from rude_word_finder.matching.general.utils import clear_config_cache, reload_topics


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    """Reset data-dir overrides, debug topics and config cache between tests."""
    for var in ("RUDE_WORD_DATA_DIR", "DATA_DIR", "RUDE_WORD_DEBUG_TOPICS"):
        monkeypatch.delenv(var, raising=False)
    reload_topics()
    clear_config_cache()
    yield
    clear_config_cache()


@pytest.fixture
def tmp_data_dir(tmp_path, monkeypatch):
    """Provide an isolated data/ dir and point the loader at it via RUDE_WORD_DATA_DIR."""
    data = tmp_path / "data"
    data.mkdir()
    monkeypatch.setenv("RUDE_WORD_DATA_DIR", str(data))
    clear_config_cache()
    return data
