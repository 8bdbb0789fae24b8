"""Services package initialization"""
from .classifier import SitemapClassifier, classify, should_be_indexed
from .errors import IdentifierSourceUnavailable
from .identifiers import DirectoryIdentifierSource, IdentifierSource, StaticIdentifierSource
from .sitemap import SitemapBuilder, load_urls

__all__ = [
    "DirectoryIdentifierSource",
    "IdentifierSource",
    "IdentifierSourceUnavailable",
    "SitemapBuilder",
    "SitemapClassifier",
    "StaticIdentifierSource",
    "classify",
    "load_urls",
    "should_be_indexed",
]
