"""Importer configuration."""

from .import_settings import ImportSettings

__all__ = ["ImportSettings"]
