from __future__ import annotations

from pathlib import Path

import pytest

from config import settings


def test_settings_defaults(monkeypatch):
    for name in ("SITE_URL", "ROADMAPS_DIR", "BEST_PRACTICES_DIR", "PORT", "LOG_DIR"):
        monkeypatch.delenv(name, raising=False)
    settings.reload()

    assert settings.SITE_URL == "https://roadmap.sh"
    assert settings.ROADMAPS_DIR == Path.cwd() / "src/data/roadmaps"
    assert settings.BEST_PRACTICES_DIR == Path.cwd() / "src/data/best-practices"
    assert settings.HOST == "0.0.0.0"
    assert settings.PORT == 3000
    assert settings.LOG_LEVEL == "INFO"


def test_site_url_trailing_slash_stripped(monkeypatch):
    monkeypatch.setenv("SITE_URL", "https://staging.roadmap.sh/")
    settings.reload()

    assert settings.SITE_URL == "https://staging.roadmap.sh"


@pytest.mark.parametrize(
    ("name", "value", "message"),
    [
        ("PORT", "http", "PORT must be an integer"),
        ("PORT", "0", "PORT must be between 1 and 65535"),
        ("PORT", "70000", "PORT must be between 1 and 65535"),
        ("SITE_URL", "roadmap.sh", "SITE_URL must be an absolute"),
        ("LOG_LEVEL", "LOUD", "LOG_LEVEL has unknown level"),
    ],
)
def test_invalid_values_rejected(monkeypatch, name, value, message):
    monkeypatch.setenv(name, value)

    with pytest.raises(ValueError, match=message):
        settings.reload()
