"""Keyword tables used to dispatch free-text catalog labels."""

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class KeywordTable:
    """Ordered table of catalog labels and their keywords.

    A label is "named" by a piece of text when it occurs in that text as a
    case-insensitive substring. Keywords are kept exactly as written and are
    looked up in the lowercased candidate, so "engineer" matches "Senior
    Software Engineer" while an upper-case keyword such as "IT" never matches.
    """

    entries: tuple[tuple[str, tuple[str, ...]], ...]

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Iterable[str]]) -> "KeywordTable":
        """Build a table preserving the mapping's order."""
        return cls(
            tuple((label, tuple(keywords)) for label, keywords in mapping.items())
        )

    def keywords_named_by(self, text: str) -> Iterator[str]:
        """Yield keywords of every label that occurs in the text."""
        lowered = text.lower()
        for label, keywords in self.entries:
            if label.lower() in lowered:
                yield from keywords

    def any_keyword_in(self, text: str, candidate: str) -> bool:
        """Return True when a keyword of a named label occurs in the candidate."""
        candidate_lower = candidate.lower()
        return any(
            keyword in candidate_lower for keyword in self.keywords_named_by(text)
        )

    def lists_value(self, text: str, value: str) -> bool:
        """Return True when a named label lists the value as a keyword."""
        return value in set(self.keywords_named_by(text))
