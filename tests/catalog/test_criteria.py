"""
Unit tests for criteria search construction.
"""

import re

import pytest

from catalog.criteria import FieldKind, FieldMatch, SEARCHABLE_FIELDS


class TestFieldMatchBuild:
    """Test cases for FieldMatch.build."""

    def test_known_field(self):
        """Test building a match for a text field."""
        match = FieldMatch.build("title", "dune")

        assert match == FieldMatch(field="title", term="dune", kind=FieldKind.TEXT)

    def test_field_name_normalized(self):
        """Test that field names are trimmed and lower-cased."""
        match = FieldMatch.build("  Author ", "herbert")

        assert match.field == "author"

    @pytest.mark.parametrize("field", ["shelf", "_id", "id", "$where", "title.0", ""])
    def test_unknown_field(self, field):
        """Test that fields outside the schema are rejected."""
        assert FieldMatch.build(field, "x") is None

    def test_integer_field_kind(self):
        """Test that the publication year is searched as an integer field."""
        assert FieldMatch.build("published_year", "19").kind == FieldKind.INTEGER

    def test_every_schema_field_is_buildable(self):
        """Test that every searchable field can be matched."""
        for field in SEARCHABLE_FIELDS:
            assert FieldMatch.build(field, "a") is not None


class TestToFilter:
    """Test cases for FieldMatch.to_filter."""

    def test_text_filter(self):
        """Test the MongoDB filter of a text field."""
        match = FieldMatch.build("title", "Dune")

        assert match.to_filter() == {"title": {"$regex": "Dune", "$options": "i"}}

    def test_term_is_escaped(self):
        """Test that regex metacharacters are escaped in the filter."""
        match = FieldMatch.build("title", ".*(a|b)+")
        pattern = match.to_filter()["title"]["$regex"]

        assert pattern == re.escape(".*(a|b)+")
        assert re.search(pattern, "x.*(a|b)+y")
        assert not re.search(pattern, "ab")

    def test_integer_filter(self):
        """Test the MongoDB filter of an integer field."""
        match = FieldMatch.build("published_year", "196")

        assert match.to_filter() == {
            "published_year": {"$type": ["int", "long"]},
            "$expr": {
                "$regexMatch": {
                    "input": {"$toString": "$published_year"},
                    "regex": "196",
                    "options": "i",
                }
            },
        }


class TestMatches:
    """Test cases for FieldMatch.matches."""

    def test_case_insensitive_containment(self):
        """Test that matching ignores case."""
        match = FieldMatch.build("author", "HERB")

        assert match.matches({"author": "Frank Herbert"})
        assert not match.matches({"author": "Jane Austen"})

    def test_missing_field(self):
        """Test that documents without the field never match."""
        match = FieldMatch.build("publisher", "")

        assert not match.matches({"title": "Dune"})
        assert not match.matches({"publisher": None})

    def test_empty_term_matches_present_field(self):
        """Test that an empty term matches any value of the field."""
        assert FieldMatch.build("title", "").matches({"title": "Dune"})

    def test_non_string_value_on_text_field(self):
        """Test that a text field holding a number does not match."""
        assert not FieldMatch.build("isbn", "97").matches({"isbn": 9780441172719})

    def test_integer_field(self):
        """Test matching the digits of an integer field."""
        match = FieldMatch.build("published_year", "96")

        assert match.matches({"published_year": 1965})
        assert not match.matches({"published_year": 1815})
        assert not match.matches({"published_year": "1965"})
        assert not match.matches({"published_year": True})

    def test_metacharacters_are_literal(self):
        """Test that regex syntax in the term is matched as text."""
        match = FieldMatch.build("title", "a.c")

        assert match.matches({"title": "xA.Cx"})
        assert not match.matches({"title": "abc"})

    def test_case_folding_follows_regex_semantics(self):
        """Test that matching ignores case per character, without expanding letters."""
        assert not FieldMatch.build("title", "SS").matches({"title": "Straße"})
        assert FieldMatch.build("title", "STRASSE").matches({"title": "Strasse"})
        assert FieldMatch.build("author", "émile").matches({"author": "ÉMILE ZOLA"})

    def test_same_pattern_as_store_filter(self):
        """Test that the in-memory predicate uses the filter's pattern."""
        match = FieldMatch.build("title", "(c++)")
        pattern = match.to_filter()["title"]["$regex"]

        for title in ["Learning (C++) Fast", "C++ Primer", "c"]:
            assert match.matches({"title": title}) == bool(re.search(pattern, title, re.IGNORECASE))
