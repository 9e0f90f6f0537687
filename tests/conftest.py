import importlib

import pytest

import permchain.config as config


@pytest.fixture
def load_config_module(monkeypatch):
    def _loader(**env):
        for key, value in env.items():
            monkeypatch.setenv(f"PERMCHAIN_{key.upper()}", str(value))
        return importlib.reload(config)

    yield _loader
    monkeypatch.undo()
    importlib.reload(config)
