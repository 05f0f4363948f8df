"""Configuration package: settings, YAML loader and the static taxonomies."""

from src.config.loader import load_config
from src.config.settings import Settings
from src.config.taxonomy import TAXONOMIES, CategoryEntry, Taxonomy

__all__ = ["CategoryEntry", "Settings", "TAXONOMIES", "Taxonomy", "load_config"]
