"""
Tests for SitemapEntry model
"""
import dataclasses

import pytest

from models import ChangeFrequency, SitemapEntry


class TestSitemapEntry:
    """Test SitemapEntry model functionality"""

    def test_entry_creation(self):
        """Test creating a bare entry"""
        entry = SitemapEntry(url="https://roadmap.sh/about")

        assert entry.url == "https://roadmap.sh/about"
        assert entry.changefreq is None
        assert entry.priority is None

    def test_annotate_returns_new_entry(self):
        """Test annotation leaves the original entry untouched"""
        entry = SitemapEntry(url="https://roadmap.sh/about")
        annotated = entry.annotate(ChangeFrequency.MONTHLY, 1)

        assert annotated.changefreq is ChangeFrequency.MONTHLY
        assert annotated.priority == 1.0
        assert isinstance(annotated.priority, float)
        assert entry.priority is None

    def test_changefreq_coerced_from_string(self):
        """Test plain strings are accepted for change frequency"""
        entry = SitemapEntry(url="https://roadmap.sh", changefreq="weekly")

        assert entry.changefreq is ChangeFrequency.WEEKLY

    def test_invalid_values_rejected(self):
        """Test unknown frequencies and out-of-range priorities"""
        with pytest.raises(ValueError):
            SitemapEntry(url="https://roadmap.sh", changefreq="sometimes")
        with pytest.raises(ValueError):
            SitemapEntry(url="https://roadmap.sh", priority=1.5)

    def test_entry_is_immutable(self):
        """Test entries cannot be modified after construction"""
        entry = SitemapEntry(url="https://roadmap.sh")

        with pytest.raises(dataclasses.FrozenInstanceError):
            entry.url = "https://roadmap.sh/about"
