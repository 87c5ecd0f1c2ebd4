import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from tzmoment.settings import get_settings

SETTINGS_ENV = ("TZMOMENT_LOCALE", "TZMOMENT_TZ", "TZMOMENT_PATTERN", "TZMOMENT_LOG_LEVEL")


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch):
    for key in SETTINGS_ENV:
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def spring_forward() -> str:
    """New York switches to EDT at this instant."""
    return "2024-03-10T07:00:00Z"
