"""Syntax matcher for PyZorkParser - sentence shape to verb pattern."""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType
from typing import Iterable, Sequence

from pyzorkparser.engine.errors import GrammarError, ParserError
from pyzorkparser.engine.lexer import Token
from pyzorkparser.engine.vocabulary import PartOfSpeech, Vocabulary

logger = logging.getLogger(__name__)


class SlotKind(Enum):
    """Kinds of slot in a syntax pattern."""

    DIRECT_OBJECT = auto()
    INDIRECT_OBJECT = auto()
    PREPOSITION = auto()
    DIRECTION = auto()


class AllScope(Enum):
    """Which objects ALL expands to for a pattern."""

    NONE = auto()  # ALL not accepted
    TAKEABLE = auto()  # Takeable, non-scenery objects lying in the room
    HELD = auto()  # The player's inventory
    VISIBLE = auto()  # Every non-scenery object in scope


@dataclass(frozen=True)
class Slot:
    """One position in a syntax pattern."""

    kind: SlotKind
    word: str | None = None  # Canonical preposition for PREPOSITION slots

    def __str__(self) -> str:
        if self.kind is SlotKind.PREPOSITION:
            return self.word or "?"
        if self.kind is SlotKind.DIRECTION:
            return "DIR"
        return "OBJ" if self.kind is SlotKind.DIRECT_OBJECT else "IOBJ"


DIRECT = Slot(SlotKind.DIRECT_OBJECT)
INDIRECT = Slot(SlotKind.INDIRECT_OBJECT)
DIRECTION = Slot(SlotKind.DIRECTION)


def prep(word: str) -> Slot:
    """Build a preposition slot."""
    return Slot(SlotKind.PREPOSITION, word)


@dataclass(frozen=True)
class SyntaxPattern:
    """A verb's registered sentence shape and the action it invokes."""

    verb_id: str
    slots: tuple[Slot, ...]
    action_id: str
    all_scope: AllScope = AllScope.NONE
    requires_held: bool = False  # Direct object must be carried

    def __post_init__(self) -> None:
        kinds = [slot.kind for slot in self.slots]
        if kinds.count(SlotKind.DIRECT_OBJECT) > 1 or kinds.count(SlotKind.INDIRECT_OBJECT) > 1:
            raise GrammarError(f"Pattern {self} has a repeated object slot")
        if SlotKind.INDIRECT_OBJECT in kinds and SlotKind.DIRECT_OBJECT not in kinds:
            raise GrammarError(f"Pattern {self} has an indirect object but no direct object")
        for slot in self.slots:
            if (slot.kind is SlotKind.PREPOSITION) != (slot.word is not None):
                raise GrammarError(f"Pattern {self} has a malformed slot {slot!r}")
        if self.requires_held and SlotKind.DIRECT_OBJECT not in kinds:
            raise GrammarError(f"Pattern {self} requires a held object but takes none")

    def __str__(self) -> str:
        return " ".join([self.verb_id.upper(), *(str(s) for s in self.slots)])

    @property
    def has_direct_object(self) -> bool:
        return DIRECT in self.slots

    @property
    def has_indirect_object(self) -> bool:
        return INDIRECT in self.slots

    @property
    def preposition(self) -> str | None:
        """The last preposition in the pattern, if any."""
        words = [s.word for s in self.slots if s.kind is SlotKind.PREPOSITION]
        return words[-1] if words else None


@dataclass(frozen=True)
class SyntaxMatch:
    """A sentence aligned to one syntax pattern, with noun phrases unresolved."""

    verb_id: str
    raw_verb: str
    pattern: SyntaxPattern
    direct_tokens: tuple[Token, ...] = ()
    indirect_tokens: tuple[Token, ...] = ()
    direction: str | None = None

    @property
    def action_id(self) -> str:
        return self.pattern.action_id

    @property
    def preposition(self) -> str | None:
        return self.pattern.preposition


def is_noun_phrase(tokens: Sequence[Token], allow_all: bool) -> bool:
    """Check the shape ADJECTIVE* (NOUN | ADJECTIVE), or a lone ALL.

    Unknown words are accepted anywhere in a phrase so that the resolver can
    report them.
    """
    if not tokens:
        return False
    if any(t.has(PartOfSpeech.ALL) for t in tokens):
        return allow_all and len(tokens) == 1
    *modifiers, head = tokens
    if not (head.is_unknown or head.has(PartOfSpeech.NOUN) or head.has(PartOfSpeech.ADJECTIVE)):
        return False
    return all(t.is_unknown or t.has(PartOfSpeech.ADJECTIVE) for t in modifiers)


class SyntaxTable:
    """Registered syntax patterns, grouped by canonical verb."""

    def __init__(
        self,
        patterns: Iterable[SyntaxPattern],
        vocabulary: Vocabulary,
        implicit_verb: str = "walk",
    ) -> None:
        """Initialize and validate the table against a vocabulary."""
        verbs = vocabulary.canonical_ids(PartOfSpeech.VERB)
        prepositions = vocabulary.canonical_ids(PartOfSpeech.PREPOSITION)

        grouped: dict[str, list[SyntaxPattern]] = {}
        for pattern in patterns:
            if pattern.verb_id not in verbs and pattern.verb_id != implicit_verb:
                raise GrammarError(f"Pattern {pattern} uses unknown verb {pattern.verb_id!r}")
            for slot in pattern.slots:
                if slot.kind is SlotKind.PREPOSITION and slot.word not in prepositions:
                    raise GrammarError(f"Pattern {pattern} uses unknown preposition {slot.word!r}")
            grouped.setdefault(pattern.verb_id, []).append(pattern)

        self.implicit_verb = implicit_verb
        self._patterns = MappingProxyType({k: tuple(v) for k, v in grouped.items()})

    def patterns_for(self, verb_id: str) -> tuple[SyntaxPattern, ...]:
        """Get the patterns registered for a verb, in table order."""
        return self._patterns.get(verb_id, ())

    def __contains__(self, verb_id: object) -> bool:
        return verb_id in self._patterns

    def __len__(self) -> int:
        return sum(len(p) for p in self._patterns.values())

    def match(self, tokens: Sequence[Token]) -> SyntaxMatch | ParserError:
        """Select the syntax pattern that fits a tokenized sentence."""
        if not tokens:
            return ParserError.empty_input()

        words = [t for t in tokens if not t.has(PartOfSpeech.ARTICLE)]
        if not words:
            return ParserError.no_syntax_match(tokens[0].raw)

        first = words[0]
        if first.has(PartOfSpeech.VERB):
            verb_id = first.canonical_as(PartOfSpeech.VERB)
            rest = words[1:]
        elif first.has(PartOfSpeech.DIRECTION):
            # Bare direction: "north" means "walk north"
            verb_id = self.implicit_verb
            rest = words
        else:
            logger.debug(f"No verb at start of sentence: {first.raw!r}")
            return ParserError.no_syntax_match(first.raw)

        patterns = self.patterns_for(verb_id)
        matches = []
        for pattern in patterns:
            bindings = self._align(pattern, rest)
            if bindings is not None:
                matches.append((pattern, bindings))

        if not matches:
            needs_object = bool(patterns) and not rest and all(p.slots for p in patterns)
            logger.debug(f"No pattern for {verb_id!r} fits {[t.raw for t in rest]}")
            return ParserError.no_syntax_match(first.raw, needs_object=needs_object)

        # Most filled slots wins; max() keeps table order on ties
        pattern, bindings = max(matches, key=lambda m: len(m[0].slots))
        logger.debug(f"Matched pattern {pattern} -> {pattern.action_id}")
        return SyntaxMatch(
            verb_id=verb_id,
            raw_verb=first.raw,
            pattern=pattern,
            direct_tokens=bindings.get("direct", ()),
            indirect_tokens=bindings.get("indirect", ()),
            direction=bindings.get("direction"),
        )

    def _align(self, pattern: SyntaxPattern, tokens: Sequence[Token]) -> dict | None:
        """Align tokens to a pattern exactly, or return None."""
        slots = pattern.slots
        allow_all = pattern.all_scope is not AllScope.NONE

        def step(si: int, ti: int, bound: dict) -> dict | None:
            if si == len(slots):
                return bound if ti == len(tokens) else None
            slot = slots[si]

            if slot.kind is SlotKind.PREPOSITION:
                if ti < len(tokens) and tokens[ti].canonical_as(PartOfSpeech.PREPOSITION) == slot.word:
                    return step(si + 1, ti + 1, bound)
                return None

            if slot.kind is SlotKind.DIRECTION:
                if ti < len(tokens) and tokens[ti].has(PartOfSpeech.DIRECTION):
                    direction = tokens[ti].canonical_as(PartOfSpeech.DIRECTION)
                    return step(si + 1, ti + 1, {**bound, "direction": direction})
                return None

            key = "direct" if slot.kind is SlotKind.DIRECT_OBJECT else "indirect"
            # Longest noun phrase first, backing off one word at a time
            for end in range(len(tokens), ti, -1):
                phrase = tuple(tokens[ti:end])
                if not is_noun_phrase(phrase, allow_all and key == "direct"):
                    continue
                result = step(si + 1, end, {**bound, key: phrase})
                if result is not None:
                    return result
            return None

        return step(0, 0, {})
