"""Unit tests for category classification and the static taxonomies."""

from __future__ import annotations

from collections import Counter

import pytest

from src.config.taxonomy import COLOR_HEX_MAP, TAXONOMIES, Taxonomy
from src.services.category_normalizer import category_legend, classify, hex_color


# ======================================================================
# Taxonomy table integrity
# ======================================================================


class TestTaxonomyIntegrity:
    """Every secondary sits under exactly one primary per taxonomy."""

    @pytest.mark.parametrize("taxonomy", list(Taxonomy))
    def test_secondaries_are_unique(self, taxonomy: Taxonomy) -> None:
        counts = Counter(
            secondary.casefold()
            for entry in TAXONOMIES[taxonomy].values()
            for secondary in entry.secondaries
        )
        duplicates = [name for name, count in counts.items() if count > 1]
        assert duplicates == []

    @pytest.mark.parametrize("taxonomy", list(Taxonomy))
    def test_no_secondary_shadows_a_primary(self, taxonomy: Taxonomy) -> None:
        primaries = {key.casefold() for key in TAXONOMIES[taxonomy]}
        secondaries = {
            secondary.casefold()
            for entry in TAXONOMIES[taxonomy].values()
            for secondary in entry.secondaries
        }
        assert primaries.isdisjoint(secondaries)

    @pytest.mark.parametrize("taxonomy", list(Taxonomy))
    def test_every_color_has_a_hex_code(self, taxonomy: Taxonomy) -> None:
        for entry in TAXONOMIES[taxonomy].values():
            assert entry.color in COLOR_HEX_MAP


# ======================================================================
# classify
# ======================================================================


class TestClassify:
    def test_primary_returns_own_profile(self) -> None:
        profile = classify(Taxonomy.GENRE, "Electronic")
        assert profile.primary == "Electronic"
        assert profile.secondary is None
        assert profile.color == "purple"

    def test_secondary_inherits_primary_and_color(self) -> None:
        profile = classify(Taxonomy.GENRE, "Deep House")
        assert profile.primary == "Electronic"
        assert profile.secondary == "Deep House"
        assert profile.display == "Deep House"
        assert profile.color == "purple"
        assert profile.is_secondary

    def test_lookup_is_case_insensitive_and_trimmed(self) -> None:
        profile = classify(Taxonomy.GENRE, "  deep HOUSE ")
        assert profile.secondary == "Deep House"
        assert profile.primary == "Electronic"

    def test_venue_category_display_name(self) -> None:
        profile = classify(Taxonomy.VENUE_CATEGORY, "Music Events")
        assert profile.display == "Music"
        assert profile.primary == "Music Events"

    def test_display_name_resolves_to_primary(self) -> None:
        profile = classify(Taxonomy.GENRE, "Live Music")
        assert profile.primary == "Live Performance"
        assert profile.secondary is None

    def test_vibe_secondary(self) -> None:
        profile = classify(Taxonomy.VIBE, "Beach Club")
        assert (profile.primary, profile.secondary) == ("Beach & Pool", "Beach Club")

    def test_unknown_value_is_its_own_gray_primary(self) -> None:
        profile = classify(Taxonomy.GENRE, " Amapiano ")
        assert profile.primary == "Amapiano"
        assert profile.display == "Amapiano"
        assert profile.secondary is None
        assert profile.color == "gray"

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_blank_input_yields_gray_empty_primary(self, value: str | None) -> None:
        profile = classify(Taxonomy.VIBE, value)
        assert profile.primary == ""
        assert profile.color == "gray"

    def test_same_string_differs_per_taxonomy(self) -> None:
        # "Lounge" is a vibe secondary but unknown as a genre.
        assert classify(Taxonomy.VIBE, "Lounge").primary == "Chill"
        assert classify(Taxonomy.GENRE, "Lounge").primary == "Lounge"


# ======================================================================
# hex_color / category_legend
# ======================================================================


class TestHexColor:
    def test_known_color(self) -> None:
        assert hex_color("purple") == "#9333EA"

    def test_case_insensitive(self) -> None:
        assert hex_color("PURPLE") == "#9333EA"

    @pytest.mark.parametrize("value", [None, "", "chartreuse"])
    def test_unknown_falls_back_to_gray(self, value: str | None) -> None:
        assert hex_color(value) == COLOR_HEX_MAP["gray"]


class TestCategoryLegend:
    def test_lists_every_primary_in_table_order(self) -> None:
        legend = category_legend(Taxonomy.VENUE_CATEGORY)
        assert [entry["key"] for entry in legend] == list(TAXONOMIES[Taxonomy.VENUE_CATEGORY])

    def test_entries_carry_hex_and_secondaries(self) -> None:
        music = category_legend(Taxonomy.VENUE_CATEGORY)[0]
        assert music["display"] == "Music"
        assert music["hex"] == "#9333EA"
        assert "Electronic" in music["secondaries"]
