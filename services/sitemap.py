"""Batch sitemap generation on top of the classifier."""
from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Iterable, List

from models import SitemapEntry
from services.classifier import SitemapClassifier
from services.identifiers import StaticIdentifierSource

logger = logging.getLogger(__name__)

SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"
_NS = {"sm": SITEMAP_NAMESPACE}


def load_urls(path: Path | str) -> List[str]:
    """Read candidate URLs from a sitemap XML file or a plain list, one per line."""
    path = Path(path)
    if path.suffix.lower() == ".xml":
        root = ET.parse(path).getroot()
        return [
            loc.text.strip()
            for loc in root.findall("sm:url/sm:loc", _NS)
            if loc.text and loc.text.strip()
        ]

    urls = []
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            line = line.strip()
            if line and not line.startswith("#"):
                urls.append(line)
    return urls


class SitemapBuilder:
    """Turns a list of site URLs into classified sitemap entries."""

    def __init__(self, classifier: SitemapClassifier) -> None:
        self.classifier = classifier

    async def build(self, urls: Iterable[str]) -> List[SitemapEntry]:
        # identifier listings are read once and reused for every entry
        snapshot = await StaticIdentifierSource.snapshot(self.classifier.source)
        classifier = SitemapClassifier(snapshot, site_url=self.classifier.site_url)

        entries: List[SitemapEntry] = []
        seen: set[str] = set()
        total = 0
        for url in urls:
            total += 1
            if url in seen:
                continue
            seen.add(url)
            if not classifier.should_be_indexed(url):
                logger.debug("Skipping excluded page %s", url)
                continue
            entry = await classifier.classify(SitemapEntry(url=url))
            if entry is not None:
                entries.append(entry)

        logger.info("Sitemap keeps %s of %s URLs", len(entries), total)
        return entries

    @staticmethod
    def render(entries: Iterable[SitemapEntry]) -> bytes:
        urlset = ET.Element("urlset", xmlns=SITEMAP_NAMESPACE)
        for entry in entries:
            node = ET.SubElement(urlset, "url")
            ET.SubElement(node, "loc").text = entry.url
            if entry.changefreq is not None:
                ET.SubElement(node, "changefreq").text = entry.changefreq.value
            if entry.priority is not None:
                ET.SubElement(node, "priority").text = str(entry.priority)
        ET.indent(urlset)
        return ET.tostring(urlset, encoding="utf-8", xml_declaration=True)


__all__ = ["SITEMAP_NAMESPACE", "SitemapBuilder", "load_urls"]
