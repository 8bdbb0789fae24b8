"""Models package initialization"""
from .sitemap_entry import ChangeFrequency, SitemapEntry

__all__ = ['ChangeFrequency', 'SitemapEntry']
