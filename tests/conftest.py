import pytest

from gifts.config import settings
from gifts.models import ChristmasGift, Gift


@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
    monkeypatch.setattr(settings, "locale", "de_DE")
    monkeypatch.setattr(settings, "currency", "EUR")
    monkeypatch.setattr(settings, "due_month", 12)
    monkeypatch.setattr(settings, "due_day", 23)
    return settings


@pytest.fixture
def drill():
    return Gift("Drill", 40, "drills.com")


@pytest.fixture
def marble_track():
    return ChristmasGift("Marble Track", 42, "marbel.com", "Grandma")
