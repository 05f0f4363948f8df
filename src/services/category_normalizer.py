"""Category normalization against the static taxonomies.

Maps a raw category or tag string ("deep house", " Music Events ") to a
:class:`CategoryProfile` carrying the canonical primary key, the secondary's
canonical spelling when the value is a sub-category, a display name and a
color.  The record normalizer uses the hierarchy to build TagSets; the API
uses the display/color half for the map legend.

Classification never fails.  A value missing from the table becomes its
own gray primary so that it can still be selected and matched.
"""

from __future__ import annotations

from typing import Any

from src.config.taxonomy import (
    COLOR_HEX_MAP,
    FALLBACK_COLOR,
    TAXONOMIES,
    CategoryEntry,
    Taxonomy,
)
from src.models.category import CategoryProfile
from src.utils.text_normalizer import fold

_BLANK_PROFILE = CategoryProfile(display="", color=FALLBACK_COLOR, primary="")


def _build_lookup(table: dict[str, CategoryEntry]) -> dict[str, CategoryProfile]:
    """Index one taxonomy by folded primary key, display name and secondary."""
    lookup: dict[str, CategoryProfile] = {}

    for primary, entry in table.items():
        for secondary in entry.secondaries:
            lookup[fold(secondary)] = CategoryProfile(
                display=secondary,
                color=entry.color,
                primary=primary,
                secondary=secondary,
            )

    # Primaries are written last so a primary always wins a spelling clash.
    for primary, entry in table.items():
        profile = CategoryProfile(display=entry.display, color=entry.color, primary=primary)
        lookup.setdefault(fold(entry.display), profile)
        lookup[fold(primary)] = profile

    return lookup


_LOOKUPS: dict[Taxonomy, dict[str, CategoryProfile]] = {
    taxonomy: _build_lookup(table) for taxonomy, table in TAXONOMIES.items()
}


def classify(taxonomy: Taxonomy, raw: str | None) -> CategoryProfile:
    """Classify *raw* against one taxonomy.

    Args:
        taxonomy: Which table to consult.
        raw: Category or tag as stored upstream; case and surrounding
            whitespace are ignored.

    Returns:
        The matching profile.  Unknown values come back as their own
        primary (trimmed spelling, gray); blank input yields a gray profile
        with an empty primary.
    """
    if raw is None:
        return _BLANK_PROFILE
    trimmed = raw.strip()
    if not trimmed:
        return _BLANK_PROFILE

    profile = _LOOKUPS[taxonomy].get(fold(trimmed))
    if profile is not None:
        return profile
    return CategoryProfile(display=trimmed, color=FALLBACK_COLOR, primary=trimmed)


def hex_color(color_name: str | None) -> str:
    """Resolve a color name to its hex code, gray when unknown."""
    return COLOR_HEX_MAP.get(fold(color_name), COLOR_HEX_MAP[FALLBACK_COLOR])


def category_legend(taxonomy: Taxonomy) -> list[dict[str, Any]]:
    """List a taxonomy's primaries for the UI legend, in table order."""
    return [
        {
            "key": primary,
            "display": entry.display,
            "color": entry.color,
            "hex": hex_color(entry.color),
            "secondaries": list(entry.secondaries),
        }
        for primary, entry in TAXONOMIES[taxonomy].items()
    ]
