from __future__ import annotations

import pytest

from app.config import reset_sound_config_cache
from shared import logging_config


@pytest.fixture(autouse=True)
def _isolated_sound_logging(monkeypatch: pytest.MonkeyPatch, tmp_path_factory: pytest.TempPathFactory):
    """Keep log files out of the real home directory."""

    log_dir = tmp_path_factory.mktemp("logs")
    monkeypatch.delenv("SKETCH_SOUND_LOG_FILE", raising=False)
    monkeypatch.setenv("SKETCH_SOUND_LOG_DIR", str(log_dir))
    logging_config._reset_for_tests()
    reset_sound_config_cache()

    yield

    logging_config._reset_for_tests()
    reset_sound_config_cache()
