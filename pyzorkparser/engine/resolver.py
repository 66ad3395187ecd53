"""Object resolver for PyZorkParser - noun phrases to in-scope objects."""

import logging
from enum import Enum
from typing import Sequence

from pyzorkparser.engine.errors import ParserError
from pyzorkparser.engine.lexer import Token
from pyzorkparser.engine.models import GameObject, Scope
from pyzorkparser.engine.syntax import AllScope
from pyzorkparser.engine.vocabulary import PartOfSpeech

logger = logging.getLogger(__name__)


class InventoryOrder(Enum):
    """Order in which ALL walks the inventory ("drop all")."""

    FORWARD = "forward"  # Order items were listed by the game state
    REVERSE = "reverse"  # Most recently listed first


# An object ID, the IDs ALL expanded to, or an error
Resolution = str | tuple[str, ...] | ParserError


class ObjectResolver:
    """Finds the objects a noun phrase refers to within a scope.

    The resolver only reads the scope. Every ID it returns is a member of
    ``scope.object_ids``.
    """

    def __init__(self, inventory_order: InventoryOrder = InventoryOrder.FORWARD) -> None:
        self.inventory_order = inventory_order

    def resolve(
        self,
        tokens: Sequence[Token],
        scope: Scope,
        all_scope: AllScope = AllScope.NONE,
        verb: str | None = None,
    ) -> Resolution:
        """Resolve a noun phrase (ADJECTIVE* NOUN, or ALL) against a scope."""
        if not tokens:
            return ParserError.malformed_input()

        # Unknown words outrank every other outcome
        for token in tokens:
            if token.is_unknown:
                return ParserError.unknown_word(token.raw, token.position)

        if tokens[0].has(PartOfSpeech.ALL):
            return self.expand_all(scope, all_scope, verb)

        *modifiers, head = tokens
        if head.has(PartOfSpeech.NOUN):
            noun = head.canonical_as(PartOfSpeech.NOUN)
            candidates = [
                obj for obj in scope
                if obj.is_visible() and (noun in obj.synonyms or head.raw in obj.synonyms)
            ]
            adjectives = list(modifiers)
        else:
            # Adjective-only reference, e.g. "take brass"
            candidates = [obj for obj in scope if obj.is_visible()]
            adjectives = list(tokens)
            candidates = self._filter_adjectives(candidates, adjectives)
            adjectives = []

        if not candidates:
            logger.debug(f"Nothing in scope matches {head.raw!r}")
            return ParserError.object_not_visible(head.raw)
        if len(candidates) == 1:
            return candidates[0].id

        if adjectives:
            candidates = self._filter_adjectives(candidates, adjectives)
            if not candidates:
                return ParserError.object_not_visible(head.raw)
            if len(candidates) == 1:
                return candidates[0].id

        logger.debug(f"{head.raw!r} is ambiguous: {[c.id for c in candidates]}")
        return ParserError.ambiguous(
            head.raw,
            tuple(c.id for c in candidates),
            tuple(c.name for c in candidates),
        )

    def expand_all(
        self,
        scope: Scope,
        all_scope: AllScope,
        verb: str | None = None,
    ) -> tuple[str, ...] | ParserError:
        """Expand ALL to the objects the verb applies to."""
        if all_scope is AllScope.TAKEABLE:
            ids = tuple(
                obj.id for obj in scope
                if obj.is_visible()
                and obj.is_takeable()
                and not obj.is_scenery()
                and obj.location == scope.location
                and not scope.holds(obj.id)
            )
        elif all_scope is AllScope.HELD:
            held = [obj_id for obj_id in scope.inventory if obj_id in scope]
            if self.inventory_order is InventoryOrder.REVERSE:
                held.reverse()
            ids = tuple(held)
        elif all_scope is AllScope.VISIBLE:
            ids = tuple(
                obj.id for obj in scope
                if obj.is_visible() and not obj.is_scenery()
            )
        else:
            ids = ()

        if not ids:
            return ParserError.nothing_applicable(verb)
        logger.debug(f"ALL ({all_scope.name}) expanded to {list(ids)}")
        return ids

    @staticmethod
    def _filter_adjectives(
        candidates: list[GameObject],
        adjectives: list[Token],
    ) -> list[GameObject]:
        """Keep objects described by every supplied adjective."""
        result = []
        for obj in candidates:
            if all(
                adj.canonical_as(PartOfSpeech.ADJECTIVE) in obj.adjectives
                or adj.raw in obj.adjectives
                for adj in adjectives
            ):
                result.append(obj)
        return result
