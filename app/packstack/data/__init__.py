"""Bundled data files (curated catalog, default theme)."""
