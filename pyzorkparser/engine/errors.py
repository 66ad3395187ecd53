"""Parse results for PyZorkParser - commands, parser errors, and exceptions."""

from dataclasses import dataclass
from enum import Enum


class PyZorkParserError(Exception):
    """Base class for configuration and programming errors."""


class GrammarError(PyZorkParserError):
    """A vocabulary or syntax table is inconsistent."""


class ConfigError(PyZorkParserError):
    """A configuration value is invalid."""


class ErrorKind(Enum):
    """Kinds of parser error, valued by priority rank (higher wins)."""

    EMPTY_INPUT = 90
    MALFORMED_INPUT = 80
    UNKNOWN_WORD = 70
    NO_SYNTAX_MATCH = 60
    AMBIGUOUS = 50
    OBJECT_NOT_VISIBLE = 40
    NOTHING_APPLICABLE = 30
    NOT_IN_POSSESSION = 20
    DARK_ROOM_BLOCKED = 10

    @property
    def priority(self) -> int:
        return self.value


@dataclass(frozen=True)
class ParserError:
    """Terminal result of a failed parse.

    Carries only structured context; turning it into text is the job of
    ``pyzorkparser.engine.messages``.
    """

    kind: ErrorKind
    word: str | None = None  # Offending word (or noun for AMBIGUOUS)
    candidates: tuple[str, ...] = ()  # Object IDs for AMBIGUOUS
    candidate_names: tuple[str, ...] = ()  # Display names, same order
    verb: str | None = None  # Raw verb as typed
    position: int | None = None  # Word index in the input
    needs_object: bool = False  # Verb given alone but requires an object

    @classmethod
    def empty_input(cls) -> "ParserError":
        return cls(ErrorKind.EMPTY_INPUT)

    @classmethod
    def malformed_input(cls, word: str | None = None) -> "ParserError":
        return cls(ErrorKind.MALFORMED_INPUT, word=word)

    @classmethod
    def unknown_word(cls, word: str, position: int | None = None) -> "ParserError":
        return cls(ErrorKind.UNKNOWN_WORD, word=word, position=position)

    @classmethod
    def no_syntax_match(cls, verb: str, needs_object: bool = False) -> "ParserError":
        return cls(ErrorKind.NO_SYNTAX_MATCH, verb=verb, needs_object=needs_object)

    @classmethod
    def object_not_visible(cls, word: str) -> "ParserError":
        return cls(ErrorKind.OBJECT_NOT_VISIBLE, word=word)

    @classmethod
    def ambiguous(
        cls,
        word: str,
        candidates: tuple[str, ...],
        candidate_names: tuple[str, ...],
    ) -> "ParserError":
        return cls(
            ErrorKind.AMBIGUOUS,
            word=word,
            candidates=candidates,
            candidate_names=candidate_names,
        )

    @classmethod
    def nothing_applicable(cls, verb: str | None = None) -> "ParserError":
        return cls(ErrorKind.NOTHING_APPLICABLE, verb=verb)

    @classmethod
    def not_in_possession(cls, word: str, verb: str | None = None) -> "ParserError":
        return cls(ErrorKind.NOT_IN_POSSESSION, word=word, verb=verb)

    @classmethod
    def dark_room_blocked(cls, verb: str) -> "ParserError":
        return cls(ErrorKind.DARK_ROOM_BLOCKED, verb=verb)

    def outranks(self, other: "ParserError") -> bool:
        """Check if this error takes precedence over another."""
        return self.kind.priority > other.kind.priority


@dataclass(frozen=True)
class ParsedCommand:
    """A fully resolved command, ready for an action handler."""

    action_id: str
    verb_id: str
    raw_verb: str
    direct_object: str | tuple[str, ...] | None = None  # tuple for ALL
    indirect_object: str | None = None
    direction: str | None = None
    preposition: str | None = None

    @property
    def is_all(self) -> bool:
        """Check if the direct object was expanded from ALL."""
        return isinstance(self.direct_object, tuple)

    @property
    def direct_objects(self) -> tuple[str, ...]:
        """Direct object IDs as a tuple, whether single or ALL."""
        if self.direct_object is None:
            return ()
        if isinstance(self.direct_object, tuple):
            return self.direct_object
        return (self.direct_object,)


ParseResult = ParsedCommand | ParserError
