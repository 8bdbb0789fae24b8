"""Configuration package initialization"""
from .settings import Settings, normalize_site_url, settings

__all__ = ["Settings", "normalize_site_url", "settings"]
