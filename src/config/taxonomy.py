"""Static category taxonomies for venues, music genres and event vibes.

# ─── HOW THE TAXONOMY IS SHAPED (Junior Developer Guide) ──────────────
#
# Every taxonomy is a two-level table:
#
#   category key (primary)  →  CategoryEntry(display, color, secondaries)
#
# The key is the spelling stored upstream ("Music Events"), ``display`` is
# what the UI shows ("Music"), ``color`` is a color *name* resolved to hex
# through COLOR_HEX_MAP, and ``secondaries`` lists the sub-categories that
# belong to that primary.  A secondary belongs to exactly one primary per
# taxonomy; tests/unit/test_category_normalizer.py guards that invariant.
#
# The category normalizer and the facet option calculator both read these
# tables, so adding a genre here is the only change needed to teach the
# filters about it.
# ──────────────────────────────────────────────────────────────────────
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple


class Taxonomy(str, Enum):
    """Which category table a raw string is classified against."""

    VENUE_CATEGORY = "venue_category"
    GENRE = "genre"
    VIBE = "vibe"


class CategoryEntry(NamedTuple):
    """One primary category: display name, color name and its secondaries."""

    display: str
    color: str
    secondaries: tuple[str, ...] = ()


FALLBACK_COLOR = "gray"

COLOR_HEX_MAP: dict[str, str] = {
    "purple": "#9333EA",
    "red": "#EF4444",
    "yellow": "#F59E0B",
    "orange": "#F97316",
    "pink": "#EC4899",
    "indigo": "#6366F1",
    "blue": "#3B82F6",
    "green": "#10B981",
    "teal": "#14B8A6",
    "gray": "#6B7280",
}


# ═════════════════════════════════════════════════════════════════════════
# 1. VENUE CATEGORIES (database primary names as stored upstream)
# ═════════════════════════════════════════════════════════════════════════

VENUE_CATEGORIES: dict[str, CategoryEntry] = {
    "Music Events": CategoryEntry(
        "Music",
        "purple",
        ("Electronic", "Hip-Hop/R&B", "Live Performance", "Arabic", "Mixed"),
    ),
    "Sports & Viewing": CategoryEntry("Sports & Viewing", "red", ("Match Viewing",)),
    "Food & Dining": CategoryEntry("Food & Drink", "yellow", ("Tasting Event",)),
    "Comedy & Entertainment": CategoryEntry("Comedy", "orange", ("Stand-up Comedy",)),
    "Nightlife": CategoryEntry(
        "Nightlife", "pink", ("Nightclub", "Lounge/Bar", "Rooftop Venue")
    ),
}


# ═════════════════════════════════════════════════════════════════════════
# 2. MUSIC GENRES
# ═════════════════════════════════════════════════════════════════════════

GENRES: dict[str, CategoryEntry] = {
    "Electronic": CategoryEntry(
        "Electronic",
        "purple",
        (
            "Techno", "Melodic Techno", "House", "Deep House", "Tech House",
            "Afro House", "Trance", "Drum & Bass", "Disco",
        ),
    ),
    "Hip-Hop/R&B": CategoryEntry(
        "Hip-Hop/R&B", "indigo", ("Hip-Hop", "R&B", "Trap", "Afrobeats", "Dancehall")
    ),
    "Arabic": CategoryEntry("Arabic", "teal", ("Khaleeji", "Arabic Pop", "Oriental")),
    "Latin": CategoryEntry("Latin", "orange", ("Reggaeton", "Salsa", "Bachata")),
    "Live Performance": CategoryEntry(
        "Live Music", "green", ("Live Band", "Acoustic", "Jazz", "Soul")
    ),
    "Commercial": CategoryEntry("Commercial", "pink", ("Pop", "Top 40", "Throwbacks")),
    "Mixed": CategoryEntry("Mixed", "gray", ("Open Format",)),
}


# ═════════════════════════════════════════════════════════════════════════
# 3. EVENT VIBES
# ═════════════════════════════════════════════════════════════════════════

VIBES: dict[str, CategoryEntry] = {
    "Party": CategoryEntry(
        "Party", "pink", ("Clubbing", "Dance", "Rave", "Live DJ", "Ladies Night")
    ),
    "Chill": CategoryEntry("Chill", "teal", ("Lounge", "Laid-back", "Sunset", "Shisha")),
    "Beach & Pool": CategoryEntry(
        "Beach & Pool", "blue", ("Beach Club", "Pool Party", "Waterfront")
    ),
    "Rooftop": CategoryEntry("Rooftop", "indigo", ("Skyline Views", "Open Air")),
    "Upscale": CategoryEntry("Upscale", "purple", ("Fine Dining", "Exclusive", "Dress Code")),
    "Social": CategoryEntry(
        "Social", "yellow", ("Brunch", "After Work", "Sports Viewing", "Quiz Night")
    ),
}


TAXONOMIES: dict[Taxonomy, dict[str, CategoryEntry]] = {
    Taxonomy.VENUE_CATEGORY: VENUE_CATEGORIES,
    Taxonomy.GENRE: GENRES,
    Taxonomy.VIBE: VIBES,
}


# ═════════════════════════════════════════════════════════════════════════
# 4. AREAS
# ═════════════════════════════════════════════════════════════════════════
# Abbreviations users pick in the area facet, mapped (lowercase) to every
# substring that should count as a hit.  The abbreviation itself stays in
# the list because some upstream rows store the short form.

AREA_ALIASES: dict[str, tuple[str, ...]] = {
    "jbr": ("jbr", "jumeirah beach residence"),
    "jlt": ("jlt", "jumeirah lake towers", "jumeirah lakes towers"),
    "jvc": ("jvc", "jumeirah village circle"),
    "difc": ("difc", "dubai international financial centre"),
}

# Area selections that mean "every area" (compared case-insensitively).
ALL_AREAS_SENTINELS: frozenset[str] = frozenset({"all", "all dubai"})
