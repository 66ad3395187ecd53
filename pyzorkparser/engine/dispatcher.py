"""Command dispatcher for PyZorkParser - resolution plus preconditions."""

import logging
from typing import Iterable

from pyzorkparser.engine.errors import ParsedCommand, ParserError
from pyzorkparser.engine.models import Scope
from pyzorkparser.engine.resolver import ObjectResolver, Resolution
from pyzorkparser.engine.syntax import AllScope, SyntaxMatch

logger = logging.getLogger(__name__)


class Dispatcher:
    """Turns a syntax match into a ParsedCommand or a single ParserError.

    Stateless between calls: everything it needs arrives in the match and
    the scope snapshot.
    """

    def __init__(
        self,
        resolver: ObjectResolver | None = None,
        dark_allowed_actions: Iterable[str] = (),
    ) -> None:
        self.resolver = resolver or ObjectResolver()
        self.dark_allowed_actions = frozenset(dark_allowed_actions)

    def dispatch(self, match: SyntaxMatch, scope: Scope) -> ParsedCommand | ParserError:
        """Resolve object slots, check preconditions, and build the command."""
        pattern = match.pattern

        direct: Resolution | None = None
        indirect: Resolution | None = None
        if match.direct_tokens:
            direct = self.resolver.resolve(
                match.direct_tokens, scope, pattern.all_scope, match.raw_verb,
            )
        if match.indirect_tokens:
            indirect = self.resolver.resolve(
                match.indirect_tokens, scope, AllScope.NONE, match.raw_verb,
            )

        # Direct object wins ties; otherwise the higher-priority error wins
        error = None
        for result in (direct, indirect):
            if isinstance(result, ParserError) and (error is None or result.outranks(error)):
                error = result
        if error is not None:
            logger.debug(f"Resolution failed: {error.kind.name}")
            return error

        command = ParsedCommand(
            action_id=pattern.action_id,
            verb_id=match.verb_id,
            raw_verb=match.raw_verb,
            direct_object=direct,
            indirect_object=indirect,
            direction=match.direction,
            preposition=match.preposition,
        )

        error = self._check_possession(match, command, scope)
        if error is None:
            error = self._check_light(match, command, scope)
        if error is not None:
            logger.debug(f"Precondition failed: {error.kind.name}")
            return error

        logger.debug(f"Dispatching {command}")
        return command

    def _check_possession(
        self,
        match: SyntaxMatch,
        command: ParsedCommand,
        scope: Scope,
    ) -> ParserError | None:
        """The direct object must be carried for verbs like DROP and PUT."""
        if not match.pattern.requires_held:
            return None
        for obj_id in command.direct_objects:
            if not scope.holds(obj_id):
                word = match.direct_tokens[-1].raw if match.direct_tokens else obj_id
                return ParserError.not_in_possession(word, match.raw_verb)
        return None

    def _check_light(
        self,
        match: SyntaxMatch,
        command: ParsedCommand,
        scope: Scope,
    ) -> ParserError | None:
        """In the dark, only allow-listed actions can name objects."""
        if scope.lit or command.action_id in self.dark_allowed_actions:
            return None
        if command.direct_objects or command.indirect_object is not None:
            return ParserError.dark_room_blocked(match.raw_verb)
        return None
