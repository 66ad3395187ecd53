"""Vocabulary table for PyZorkParser - surface words to parts of speech."""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

logger = logging.getLogger(__name__)


class PartOfSpeech(Enum):
    """Word classes known to the parser."""

    VERB = auto()
    NOUN = auto()
    ADJECTIVE = auto()
    PREPOSITION = auto()
    DIRECTION = auto()
    ARTICLE = auto()  # Ignored words
    ALL = auto()  # "all", "everything"
    UNKNOWN = auto()  # Only ever on tokens


# When a word has several readings, the first in this order is its primary one
READING_ORDER = (
    PartOfSpeech.VERB,
    PartOfSpeech.DIRECTION,
    PartOfSpeech.PREPOSITION,
    PartOfSpeech.ALL,
    PartOfSpeech.ARTICLE,
    PartOfSpeech.NOUN,
    PartOfSpeech.ADJECTIVE,
)


@dataclass(frozen=True)
class VocabularyEntry:
    """One reading of a surface word."""

    surface_form: str
    part_of_speech: PartOfSpeech
    canonical_id: str


class Vocabulary:
    """Immutable mapping from surface words to their readings.

    Many surface forms may share a canonical ID (synonyms), and one surface
    form may have several readings ("glass" is both a noun and an adjective).
    """

    def __init__(self, entries: Iterable[VocabularyEntry]) -> None:
        table: dict[str, list[VocabularyEntry]] = {}
        for entry in entries:
            if entry.part_of_speech is PartOfSpeech.UNKNOWN:
                raise ValueError(f"Cannot register {entry.surface_form!r} as UNKNOWN")
            word = entry.surface_form.lower()
            readings = table.setdefault(word, [])
            # Re-registering the same part of speech replaces the old reading
            readings[:] = [r for r in readings if r.part_of_speech is not entry.part_of_speech]
            readings.append(VocabularyEntry(word, entry.part_of_speech, entry.canonical_id.lower()))

        self._words: Mapping[str, tuple[VocabularyEntry, ...]] = MappingProxyType({
            word: tuple(sorted(readings, key=lambda r: READING_ORDER.index(r.part_of_speech)))
            for word, readings in table.items()
        })
        logger.debug(f"Vocabulary loaded with {len(self._words)} words")

    @classmethod
    def from_tables(
        cls,
        verbs: Mapping[str, str] | None = None,
        nouns: Mapping[str, str] | None = None,
        adjectives: Mapping[str, str] | None = None,
        prepositions: Mapping[str, str] | None = None,
        directions: Mapping[str, str] | None = None,
        articles: Iterable[str] = ("a", "an", "the"),
        all_words: Iterable[str] = ("all", "everything"),
    ) -> "Vocabulary":
        """Build a vocabulary from surface -> canonical dictionaries."""
        entries: list[VocabularyEntry] = []
        for table, pos in (
            (verbs, PartOfSpeech.VERB),
            (nouns, PartOfSpeech.NOUN),
            (adjectives, PartOfSpeech.ADJECTIVE),
            (prepositions, PartOfSpeech.PREPOSITION),
            (directions, PartOfSpeech.DIRECTION),
        ):
            for surface, canonical in (table or {}).items():
                entries.append(VocabularyEntry(surface, pos, canonical))
        entries.extend(VocabularyEntry(w, PartOfSpeech.ARTICLE, w) for w in articles)
        entries.extend(VocabularyEntry(w, PartOfSpeech.ALL, "all") for w in all_words)
        return cls(entries)

    def lookup(self, word: str) -> tuple[VocabularyEntry, ...]:
        """Get every reading of a word, primary reading first."""
        return self._words.get(word.lower(), ())

    def canonical(self, word: str, part_of_speech: PartOfSpeech | None = None) -> str | None:
        """Get the canonical ID of a word, optionally for one part of speech."""
        for entry in self.lookup(word):
            if part_of_speech is None or entry.part_of_speech is part_of_speech:
                return entry.canonical_id
        return None

    def has_reading(self, word: str, part_of_speech: PartOfSpeech) -> bool:
        """Check if a word can be used as a given part of speech."""
        return any(e.part_of_speech is part_of_speech for e in self.lookup(word))

    def canonical_ids(self, part_of_speech: PartOfSpeech) -> frozenset[str]:
        """Get all canonical IDs registered for a part of speech."""
        return frozenset(
            entry.canonical_id
            for readings in self._words.values()
            for entry in readings
            if entry.part_of_speech is part_of_speech
        )

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.lower() in self._words

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)
