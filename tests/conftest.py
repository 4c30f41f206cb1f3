import json

import pytest

from calculator import config_manager, MathEngine


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point config_manager at a throwaway config.json holding the defaults."""
    path = tmp_path / "config.json"
    path.write_text(json.dumps(config_manager.DEFAULT_SETTINGS), encoding="utf-8")
    monkeypatch.setattr(config_manager, "config_json", path)
    monkeypatch.setattr(MathEngine, "debug", False)
    return path
