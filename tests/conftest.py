import pytest

from tempconv.config.settings import CONFIG_ENV_VAR, LOG_LEVEL_ENV_VAR


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep a developer's own tempconv settings out of the tests."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
