import pytest

from coordshift.config.settings import get_settings


@pytest.fixture
def fresh_settings(monkeypatch):
    """Clear the cached Settings before and after a test that tweaks env vars."""
    for name in (
        "COORDSHIFT_CONFIG_PATH",
        "COORDSHIFT_LOG_LEVEL",
        "COORDSHIFT_SOLVER_MAX_ITERATIONS",
        "COORDSHIFT_SOLVER_TOLERANCE",
        "COORDSHIFT_NON_FINITE",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield get_settings
    get_settings.cache_clear()
