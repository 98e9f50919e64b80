import pytest

from swappable.config import settings


@pytest.fixture(autouse=True)
def test_settings(monkeypatch):
    monkeypatch.setattr(settings, "env", "test")
    monkeypatch.setattr(settings, "debug", True)
    monkeypatch.setattr(settings, "testing", True)
    return settings
