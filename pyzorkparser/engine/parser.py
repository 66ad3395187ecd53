"""Text parser for PyZorkParser - natural language command processing."""

import logging
from typing import TYPE_CHECKING, Iterable

from pyzorkparser.engine import grammar
from pyzorkparser.engine.dispatcher import Dispatcher
from pyzorkparser.engine.errors import ParseResult, ParserError
from pyzorkparser.engine.lexer import DEFAULT_MAX_LENGTH, DEFAULT_MAX_REPEAT, Token, tokenize
from pyzorkparser.engine.models import Scope
from pyzorkparser.engine.resolver import InventoryOrder, ObjectResolver
from pyzorkparser.engine.syntax import SyntaxTable
from pyzorkparser.engine.vocabulary import Vocabulary

if TYPE_CHECKING:
    from pyzorkparser.config import ParserConfig

logger = logging.getLogger(__name__)


class Parser:
    """Natural language parser for adventure game commands.

    ``parse`` is a pure function of the input string and the scope snapshot:
    the parser holds only immutable tables and settings, so one instance can
    serve any number of games or threads.
    """

    def __init__(
        self,
        vocabulary: Vocabulary | None = None,
        syntax: SyntaxTable | None = None,
        inventory_order: InventoryOrder = InventoryOrder.FORWARD,
        dark_allowed_actions: Iterable[str] | None = None,
        max_input_length: int = DEFAULT_MAX_LENGTH,
        max_word_repeat: int = DEFAULT_MAX_REPEAT,
    ) -> None:
        """Initialize the parser, defaulting to the built-in Zork I grammar."""
        self.vocabulary = vocabulary or grammar.build_vocabulary()
        self.syntax = syntax or grammar.build_syntax_table(self.vocabulary)
        if dark_allowed_actions is None:
            dark_allowed_actions = grammar.DARK_ALLOWED_ACTIONS
        self.resolver = ObjectResolver(inventory_order)
        self.dispatcher = Dispatcher(self.resolver, dark_allowed_actions)
        self.max_input_length = max_input_length
        self.max_word_repeat = max_word_repeat

    @classmethod
    def from_config(cls, config: "ParserConfig") -> "Parser":
        """Create a parser with the built-in grammar and configured policies."""
        return cls(
            inventory_order=InventoryOrder(config.inventory_order),
            dark_allowed_actions=config.dark_allowed_actions,
            max_input_length=config.max_input_length,
            max_word_repeat=config.max_word_repeat,
        )

    def tokenize(self, input_text: str) -> list[Token] | ParserError:
        """Break input into tokens."""
        return tokenize(
            input_text,
            self.vocabulary,
            max_length=self.max_input_length,
            max_repeat=self.max_word_repeat,
        )

    def parse(self, input_text: str, scope: Scope) -> ParseResult:
        """Parse a command string into a ParsedCommand or a ParserError."""
        tokens = self.tokenize(input_text)
        if isinstance(tokens, ParserError):
            return tokens

        # The first unknown word is reported before anything else
        for token in tokens:
            if token.is_unknown:
                logger.debug(f"Unknown word {token.raw!r} at position {token.position}")
                return ParserError.unknown_word(token.raw, token.position)

        match = self.syntax.match(tokens)
        if isinstance(match, ParserError):
            return match

        return self.dispatcher.dispatch(match, scope)
