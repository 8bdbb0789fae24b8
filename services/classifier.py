"""Sitemap classification: which pages are indexed and with what priority."""
from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from config import normalize_site_url, settings
from models import ChangeFrequency, SitemapEntry
from services.identifiers import IdentifierSource

logger = logging.getLogger(__name__)

EXCLUDED_PATHS = ("/404", "/terms", "/privacy", "/pdfs", "/g")
TOP_LEVEL_PATHS = ("", "/about", "/roadmaps", "/best-practices", "/guides", "/videos")
SECONDARY_PREFIXES = ("/guides", "/videos")

HIGH_PRIORITY = 1.0
SECONDARY_PRIORITY = 0.9


def _site(site_url: str | None) -> str:
    return settings.SITE_URL if site_url is None else normalize_site_url(site_url)


def excluded_urls(site_url: str | None = None) -> List[str]:
    site = _site(site_url)
    return [f"{site}{path}" for path in EXCLUDED_PATHS]


def should_be_indexed(url: str, site_url: str | None = None) -> bool:
    """Return False when ``url`` is one of the never-indexed pages.

    Matching is exact string equality, no trailing slash or case handling.
    """
    return url not in excluded_urls(site_url)


def high_priority_urls(
    roadmap_ids: Sequence[str],
    best_practice_ids: Sequence[str],
    site_url: str | None = None,
) -> List[str]:
    site = _site(site_url)
    urls = [f"{site}{path}" for path in TOP_LEVEL_PATHS]
    for roadmap_id in roadmap_ids:
        urls.append(f"{site}/{roadmap_id}")
        urls.append(f"{site}/{roadmap_id}/topics")
    urls.extend(f"{site}/best-practices/{practice_id}" for practice_id in best_practice_ids)
    return urls


def classify(
    entry: SitemapEntry,
    roadmap_ids: Sequence[str],
    best_practice_ids: Sequence[str],
    site_url: str | None = None,
) -> Optional[SitemapEntry]:
    """Annotate ``entry`` for the sitemap, or return None to leave it out.

    Rules are checked in order and the first match wins:

    1. exact match with a high-priority page (top-level pages, every roadmap
       and its topics page, every best-practice page): monthly, 1.0
    2. URL under the guides or videos sections: monthly, 0.9
    3. anything else is omitted
    """
    site = _site(site_url)

    if entry.url in high_priority_urls(roadmap_ids, best_practice_ids, site):
        return entry.annotate(ChangeFrequency.MONTHLY, HIGH_PRIORITY)

    if entry.url.startswith(tuple(f"{site}{prefix}" for prefix in SECONDARY_PREFIXES)):
        return entry.annotate(ChangeFrequency.MONTHLY, SECONDARY_PRIORITY)

    return None


class SitemapClassifier:
    """Classifies entries against identifiers read from ``source`` on every call."""

    def __init__(self, source: IdentifierSource, site_url: str | None = None) -> None:
        self.source = source
        self.site_url = _site(site_url)

    def should_be_indexed(self, url: str) -> bool:
        return should_be_indexed(url, self.site_url)

    async def classify(self, entry: SitemapEntry) -> Optional[SitemapEntry]:
        roadmap_ids = await self.source.list_roadmap_identifiers()
        best_practice_ids = await self.source.list_best_practice_identifiers()
        result = classify(entry, roadmap_ids, best_practice_ids, self.site_url)
        if result is None:
            logger.debug("Omitting %s from sitemap", entry.url)
        return result


__all__ = [
    "EXCLUDED_PATHS",
    "SitemapClassifier",
    "classify",
    "excluded_urls",
    "high_priority_urls",
    "should_be_indexed",
]
