import pytest

from mielelink.config import get_settings
from mielelink.diagnostics import clear_events


@pytest.fixture(autouse=True)
def _fresh_diagnostics():
    get_settings.cache_clear()
    clear_events()
    yield
    get_settings.cache_clear()
