"""Lexer for PyZorkParser - raw input to vocabulary tokens."""

import logging
import re
from dataclasses import dataclass

from pyzorkparser.engine.errors import ParserError
from pyzorkparser.engine.vocabulary import PartOfSpeech, Vocabulary, VocabularyEntry

logger = logging.getLogger(__name__)

DEFAULT_MAX_LENGTH = 200
DEFAULT_MAX_REPEAT = 3

# Letters, digits and the few symbols that appear inside Zork words
# ("air-pump", "fcd#3", "owner's")
WORD_PATTERN = re.compile(r"[a-z0-9'#-]+")
CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")


@dataclass(frozen=True)
class Token:
    """A single input word after vocabulary lookup."""

    raw: str
    canonical: str | None  # None if the word is not in the vocabulary
    part_of_speech: PartOfSpeech
    readings: tuple[VocabularyEntry, ...] = ()
    position: int = 0  # Index of the word in the input

    @property
    def is_unknown(self) -> bool:
        return self.canonical is None

    def has(self, part_of_speech: PartOfSpeech) -> bool:
        """Check if this token can be read as a given part of speech."""
        return any(r.part_of_speech is part_of_speech for r in self.readings)

    def canonical_as(self, part_of_speech: PartOfSpeech) -> str | None:
        """Get the canonical ID for one reading of this token."""
        for reading in self.readings:
            if reading.part_of_speech is part_of_speech:
                return reading.canonical_id
        return None


def make_token(word: str, vocabulary: Vocabulary, position: int = 0) -> Token:
    """Look up one word and build its token."""
    readings = vocabulary.lookup(word)
    if not readings:
        return Token(word, None, PartOfSpeech.UNKNOWN, (), position)
    primary = readings[0]
    return Token(word, primary.canonical_id, primary.part_of_speech, readings, position)


def check_malformed(
    text: str,
    max_length: int = DEFAULT_MAX_LENGTH,
) -> ParserError | None:
    """Reject input that cannot be tokenized sensibly."""
    if len(text) > max_length:
        return ParserError.malformed_input()
    if CONTROL_CHARS.search(text):
        return ParserError.malformed_input()
    if text.count('"') % 2:
        return ParserError.malformed_input('"')
    return None


def split_words(text: str) -> list[str]:
    """Lowercase and split input on whitespace and punctuation."""
    words = []
    for match in WORD_PATTERN.finditer(text.lower()):
        word = match.group().strip("'-")
        if word:
            words.append(word)
    return words


def tokenize(
    text: str,
    vocabulary: Vocabulary,
    max_length: int = DEFAULT_MAX_LENGTH,
    max_repeat: int = DEFAULT_MAX_REPEAT,
) -> list[Token] | ParserError:
    """Break input into tokens.

    Returns EMPTY_INPUT for blank input and MALFORMED_INPUT for input that
    fails the pre-tokenization checks. Unknown words do not stop
    tokenization; they become tokens with no canonical ID.
    """
    if not text.strip():
        return ParserError.empty_input()

    malformed = check_malformed(text, max_length)
    if malformed is not None:
        logger.debug(f"Malformed input rejected: {text!r}")
        return malformed

    words = split_words(text)
    if not words:
        return ParserError.empty_input()

    run = 1
    for previous, word in zip(words, words[1:]):
        run = run + 1 if word == previous else 1
        if run > max_repeat:
            logger.debug(f"Word {word!r} repeated more than {max_repeat} times")
            return ParserError.malformed_input(word)

    tokens = [make_token(word, vocabulary, i) for i, word in enumerate(words)]
    logger.debug(
        "Tokens: " + " ".join(f"{t.raw}/{t.part_of_speech.name}" for t in tokens)
    )
    return tokens
