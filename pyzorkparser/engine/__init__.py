"""Parser and game engine components for PyZorkParser."""

__version__ = "0.1.0"

from pyzorkparser.engine.errors import ErrorKind, ParsedCommand, ParseResult, ParserError
from pyzorkparser.engine.lexer import Token, tokenize
from pyzorkparser.engine.models import GameObject, Object, ObjectFlag, Room, Scope
from pyzorkparser.engine.parser import Parser
from pyzorkparser.engine.resolver import InventoryOrder, ObjectResolver
from pyzorkparser.engine.state import GameState, ObjectState, RoomState
from pyzorkparser.engine.syntax import AllScope, SyntaxPattern, SyntaxTable
from pyzorkparser.engine.vocabulary import PartOfSpeech, Vocabulary, VocabularyEntry

__all__ = [
    "AllScope",
    "ErrorKind",
    "GameObject",
    "GameState",
    "InventoryOrder",
    "Object",
    "ObjectFlag",
    "ObjectResolver",
    "ObjectState",
    "ParseResult",
    "ParsedCommand",
    "Parser",
    "ParserError",
    "PartOfSpeech",
    "Room",
    "RoomState",
    "Scope",
    "SyntaxPattern",
    "SyntaxTable",
    "Token",
    "Vocabulary",
    "VocabularyEntry",
    "tokenize",
]
