"""
Data models for sitemap entries
"""
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional


class ChangeFrequency(str, Enum):
    """Crawl hint values allowed by the sitemap protocol"""
    ALWAYS = "always"
    HOURLY = "hourly"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"
    NEVER = "never"


@dataclass(frozen=True, slots=True)
class SitemapEntry:
    """A single sitemap URL with optional crawl metadata"""
    url: str
    changefreq: Optional[ChangeFrequency] = None
    priority: Optional[float] = None

    def __post_init__(self) -> None:
        if self.changefreq is not None and not isinstance(self.changefreq, ChangeFrequency):
            object.__setattr__(self, "changefreq", ChangeFrequency(self.changefreq))
        if self.priority is not None:
            priority = float(self.priority)
            if not 0.0 <= priority <= 1.0:
                raise ValueError("priority must be between 0.0 and 1.0")
            object.__setattr__(self, "priority", priority)

    def annotate(self, changefreq: ChangeFrequency, priority: float) -> "SitemapEntry":
        """Return a copy carrying the given crawl metadata"""
        return replace(self, changefreq=changefreq, priority=priority)
