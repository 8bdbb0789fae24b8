"""Pytest configuration and fixtures."""
from __future__ import annotations

from pathlib import Path

import pytest

from config import settings


@pytest.fixture(autouse=True)
def mock_env_vars(monkeypatch, tmp_path) -> None:
    """Set up test environment variables"""
    monkeypatch.setenv('SITE_URL', 'https://roadmap.sh')
    monkeypatch.setenv('ROADMAPS_DIR', str(tmp_path / 'roadmaps'))
    monkeypatch.setenv('BEST_PRACTICES_DIR', str(tmp_path / 'best-practices'))
    monkeypatch.setenv('PORT', '3000')
    monkeypatch.setenv('LOG_DIR', str(tmp_path / 'logs'))
    monkeypatch.delenv('LOG_LEVEL', raising=False)
    monkeypatch.delenv('HOST', raising=False)
    settings.reload()


@pytest.fixture
def content_dirs(tmp_path) -> tuple[Path, Path]:
    """Roadmap and best-practice directories laid out like the site content"""
    roadmaps = tmp_path / 'roadmaps'
    best_practices = tmp_path / 'best-practices'
    for roadmap_id in ('frontend', 'backend'):
        (roadmaps / roadmap_id).mkdir(parents=True)
        (roadmaps / roadmap_id / f'{roadmap_id}.json').write_text('{}', encoding='utf-8')
    (best_practices / 'api-security').mkdir(parents=True)
    return roadmaps, best_practices
