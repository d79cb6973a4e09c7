"""Data models for packstack.

This module exports the core data structures used throughout the application.
"""

from packstack.models.catalog import CatalogEntry, CatalogFile, DiscoveredRecord
from packstack.models.package import CuratedPackage, DiscoveredPackage, InstallableItem
from packstack.models.platform import Category, InstallMethod, Platform, parse_platform
from packstack.models.script import GeneratedScript

__all__ = [
    "CatalogEntry",
    "CatalogFile",
    "Category",
    "CuratedPackage",
    "DiscoveredPackage",
    "DiscoveredRecord",
    "GeneratedScript",
    "InstallMethod",
    "InstallableItem",
    "Platform",
    "parse_platform",
]
