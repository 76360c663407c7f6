"""
Criteria search construction.

A criteria search matches one named field of every book against a search
term: case-insensitive substring containment. Only fields listed in
``SEARCHABLE_FIELDS`` can be searched; extra attributes kept on a book
are not searchable. The term is always matched literally, and the
in-memory predicate applies the same escaped pattern as the store filter.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional


class FieldKind(str, Enum):
    """How a searchable field's value is read before matching."""
    TEXT = "text"
    INTEGER = "integer"


SEARCHABLE_FIELDS: Dict[str, FieldKind] = {
    "title": FieldKind.TEXT,
    "author": FieldKind.TEXT,
    "publisher": FieldKind.TEXT,
    "genre": FieldKind.TEXT,
    "isbn": FieldKind.TEXT,
    "language": FieldKind.TEXT,
    "description": FieldKind.TEXT,
    "published_year": FieldKind.INTEGER,
}


def normalize_field(field: str) -> str:
    """Normalize a field name as received on the wire."""
    return field.strip().lower()


@dataclass(frozen=True)
class FieldMatch:
    """Case-insensitive containment of ``term`` within ``field``."""
    field: str
    term: str
    kind: FieldKind = FieldKind.TEXT

    @classmethod
    def build(cls, field: str, term: str) -> Optional["FieldMatch"]:
        """
        Build a match for a searchable field.

        Args:
            field: Field name, compared case-insensitively
            term: Search term, matched literally

        Returns:
            FieldMatch, or None when the field is not searchable
        """
        name = normalize_field(field)
        kind = SEARCHABLE_FIELDS.get(name)
        if kind is None:
            return None
        return cls(field=name, term=term, kind=kind)

    @property
    def pattern(self) -> str:
        """Escaped regular expression for the term."""
        return re.escape(self.term)

    def to_filter(self) -> Dict[str, Any]:
        """MongoDB filter document for this match."""
        if self.kind == FieldKind.INTEGER:
            return {
                self.field: {"$type": ["int", "long"]},
                "$expr": {
                    "$regexMatch": {
                        "input": {"$toString": f"${self.field}"},
                        "regex": self.pattern,
                        "options": "i",
                    }
                },
            }
        return {self.field: {"$regex": self.pattern, "$options": "i"}}

    def matches(self, document: Mapping[str, Any]) -> bool:
        """Evaluate the match against a plain document."""
        value = document.get(self.field)
        if value is None:
            return False
        if self.kind == FieldKind.INTEGER:
            if isinstance(value, bool) or not isinstance(value, int):
                return False
            value = str(value)
        elif not isinstance(value, str):
            return False
        return re.search(self.pattern, value, re.IGNORECASE) is not None
