"""Tests for the PyZorkParser command parser pipeline."""

import pytest

from pyzorkparser.engine.dispatcher import Dispatcher
from pyzorkparser.engine.errors import (
    ErrorKind,
    GrammarError,
    ParsedCommand,
    ParserError,
)
from pyzorkparser.engine.grammar import build_syntax_table, build_vocabulary
from pyzorkparser.engine.lexer import tokenize
from pyzorkparser.engine.messages import ambiguity_prompt, render_error
from pyzorkparser.engine.models import GameObject, ObjectFlag, Scope
from pyzorkparser.engine.parser import Parser
from pyzorkparser.engine.resolver import InventoryOrder, ObjectResolver
from pyzorkparser.engine.syntax import (
    DIRECT,
    INDIRECT,
    AllScope,
    SyntaxPattern,
    SyntaxTable,
    prep,
)
from pyzorkparser.engine.vocabulary import PartOfSpeech, Vocabulary, VocabularyEntry

VOCABULARY = build_vocabulary()


def obj(obj_id, synonyms, adjectives=(), flags=(ObjectFlag.TAKEABLE,), location="room", name=None):
    """Build an object snapshot for a test scope."""
    return GameObject(
        id=obj_id,
        name=name or obj_id.replace("_", " "),
        synonyms=frozenset(synonyms),
        adjectives=frozenset(adjectives),
        flags=frozenset(flags),
        location=location,
    )


def scope_of(*objects, inventory=(), lit=True):
    """Build a scope in the given object order."""
    return Scope.from_objects("room", list(objects), list(inventory), lit)


def words(text):
    return tokenize(text, VOCABULARY)


class TestVocabulary:
    """Tests for the vocabulary table."""

    def test_synonyms_share_canonical_id(self):
        """Test that synonym surface forms map to one canonical ID."""
        assert VOCABULARY.canonical("lantern") == "lamp"
        assert VOCABULARY.canonical("lamp") == "lamp"
        assert VOCABULARY.canonical("x") == "examine"
        assert VOCABULARY.canonical("n") == "north"

    def test_multiple_parts_of_speech(self):
        """Test that a word can carry several readings."""
        readings = VOCABULARY.lookup("glass")
        kinds = {r.part_of_speech for r in readings}

        assert kinds == {PartOfSpeech.NOUN, PartOfSpeech.ADJECTIVE}
        assert readings[0].part_of_speech is PartOfSpeech.NOUN
        assert VOCABULARY.has_reading("up", PartOfSpeech.DIRECTION)
        assert VOCABULARY.has_reading("up", PartOfSpeech.PREPOSITION)

    def test_lookup_is_case_insensitive(self):
        """Test that lookups ignore case."""
        assert VOCABULARY.lookup("LAMP") == VOCABULARY.lookup("lamp")
        assert "Lamp" in VOCABULARY

    def test_unknown_word(self):
        """Test that unknown words have no readings."""
        assert VOCABULARY.lookup("xyzzy") == ()
        assert VOCABULARY.canonical("xyzzy") is None
        assert "xyzzy" not in VOCABULARY

    def test_reregistration_replaces_reading(self):
        """Test that registering a word twice keeps the later reading."""
        vocab = Vocabulary([
            VocabularyEntry("Get", PartOfSpeech.VERB, "take"),
            VocabularyEntry("get", PartOfSpeech.VERB, "obtain"),
        ])

        assert vocab.canonical("get") == "obtain"
        assert len(vocab.lookup("get")) == 1

    def test_unknown_part_of_speech_rejected(self):
        """Test that UNKNOWN cannot be registered."""
        with pytest.raises(ValueError):
            Vocabulary([VocabularyEntry("blorb", PartOfSpeech.UNKNOWN, "blorb")])

    def test_canonical_ids(self):
        """Test listing canonical IDs for a part of speech."""
        verbs = VOCABULARY.canonical_ids(PartOfSpeech.VERB)

        assert "take" in verbs
        assert "get" not in verbs


class TestLexer:
    """Tests for tokenization."""

    def test_basic_tokens(self):
        """Test tokenizing a simple command."""
        tokens = words("Take the LAMP.")

        assert [t.raw for t in tokens] == ["take", "the", "lamp"]
        assert [t.position for t in tokens] == [0, 1, 2]
        assert tokens[0].part_of_speech is PartOfSpeech.VERB
        assert tokens[1].part_of_speech is PartOfSpeech.ARTICLE
        assert tokens[2].canonical == "lamp"

    def test_synonym_canonicalized(self):
        """Test that tokens carry canonical IDs."""
        tokens = words("get lantern")

        assert tokens[0].canonical == "take"
        assert tokens[1].canonical == "lamp"
        assert tokens[1].raw == "lantern"

    def test_unknown_word_token(self):
        """Test that unknown words become UNKNOWN tokens."""
        tokens = words("take xyzzy")

        assert tokens[1].is_unknown
        assert tokens[1].canonical is None
        assert tokens[1].part_of_speech is PartOfSpeech.UNKNOWN
        assert tokens[1].readings == ()

    def test_empty_input(self):
        """Test blank input."""
        assert words("").kind is ErrorKind.EMPTY_INPUT
        assert words("   \t ").kind is ErrorKind.EMPTY_INPUT
        assert words("?!").kind is ErrorKind.EMPTY_INPUT

    def test_unbalanced_quote(self):
        """Test that an unbalanced quote is malformed."""
        result = words('say "hello')

        assert isinstance(result, ParserError)
        assert result.kind is ErrorKind.MALFORMED_INPUT
        assert result.word == '"'

    def test_control_characters(self):
        """Test that control characters are malformed."""
        assert words("take\x07 lamp").kind is ErrorKind.MALFORMED_INPUT

    def test_overlong_input(self):
        """Test that input past the length limit is malformed."""
        assert words("take " + "a" * 300).kind is ErrorKind.MALFORMED_INPUT
        assert isinstance(tokenize("take lamp", VOCABULARY, max_length=9), list)
        assert tokenize("take lamp", VOCABULARY, max_length=8).kind is ErrorKind.MALFORMED_INPUT

    def test_repeated_word(self):
        """Test that a word repeated too many times is malformed."""
        result = words("take take take take lamp")

        assert result.kind is ErrorKind.MALFORMED_INPUT
        assert result.word == "take"
        assert isinstance(words("wait wait wait"), list)

    def test_multiple_readings_kept(self):
        """Test that tokens keep every reading of a word."""
        token = words("up")[0]

        assert token.part_of_speech is PartOfSpeech.DIRECTION
        assert token.has(PartOfSpeech.PREPOSITION)
        assert token.canonical_as(PartOfSpeech.PREPOSITION) == "up"


class TestSyntaxMatcher:
    """Tests for syntax pattern matching."""

    def setup_method(self):
        self.syntax = build_syntax_table(VOCABULARY)

    def test_verb_only(self):
        """Test matching a verb with no objects."""
        match = self.syntax.match(words("look"))

        assert match.action_id == "look"
        assert match.direct_tokens == ()

    def test_bare_direction(self):
        """Test that a bare direction means walk."""
        match = self.syntax.match(words("north"))

        assert match.verb_id == "walk"
        assert match.action_id == "walk"
        assert match.direction == "north"

    def test_abbreviated_direction(self):
        """Test direction abbreviations and IN as a direction."""
        assert self.syntax.match(words("ne")).direction == "northeast"
        assert self.syntax.match(words("in")).direction == "in"
        assert self.syntax.match(words("go up")).direction == "up"

    def test_articles_dropped(self):
        """Test that articles do not take part in matching."""
        match = self.syntax.match(words("take the brass lamp"))

        assert [t.raw for t in match.direct_tokens] == ["brass", "lamp"]

    def test_preposition_selects_pattern(self):
        """Test that a preposition picks the right action."""
        assert self.syntax.match(words("turn on lamp")).action_id == "light"
        assert self.syntax.match(words("turn lamp off")).action_id == "extinguish"
        assert self.syntax.match(words("look at mailbox")).action_id == "examine"

    def test_put_in_preferred_over_put(self):
        """Test choosing the IN pattern when both objects are present."""
        vocab = Vocabulary.from_tables(
            verbs={"put": "put"},
            nouns={"sword": "sword", "case": "case"},
            prepositions={"in": "in", "on": "on"},
        )
        table = SyntaxTable([
            SyntaxPattern("put", (DIRECT,), "put"),
            SyntaxPattern("put", (DIRECT, prep("in"), INDIRECT), "put_in"),
            SyntaxPattern("put", (DIRECT, prep("on"), INDIRECT), "put_on"),
        ], vocab)

        match = table.match(tokenize("put sword in case", vocab))

        assert match.pattern.slots == (DIRECT, prep("in"), INDIRECT)
        assert match.action_id == "put_in"
        assert match.preposition == "in"
        assert [t.raw for t in match.direct_tokens] == ["sword"]
        assert [t.raw for t in match.indirect_tokens] == ["case"]

    def test_indirect_before_direct(self):
        """Test GIVE IOBJ OBJ word order."""
        match = self.syntax.match(words("give troll sword"))

        assert match.action_id == "give"
        assert [t.raw for t in match.indirect_tokens] == ["troll"]
        assert [t.raw for t in match.direct_tokens] == ["sword"]

    def test_verb_needs_object(self):
        """Test a verb given alone when every pattern takes an object."""
        result = self.syntax.match(words("take"))

        assert result.kind is ErrorKind.NO_SYNTAX_MATCH
        assert result.needs_object
        assert result.verb == "take"

    def test_no_verb(self):
        """Test a sentence that does not start with a verb."""
        result = self.syntax.match(words("lamp take"))

        assert result.kind is ErrorKind.NO_SYNTAX_MATCH
        assert not result.needs_object
        assert result.verb == "lamp"

    def test_all_only_where_allowed(self):
        """Test that ALL is rejected by patterns that do not accept it."""
        assert self.syntax.match(words("take all")).direct_tokens[0].has(PartOfSpeech.ALL)
        assert self.syntax.match(words("open all")).kind is ErrorKind.NO_SYNTAX_MATCH

    def test_unknown_verb_in_table(self):
        """Test that a pattern for an unknown verb is rejected."""
        with pytest.raises(GrammarError):
            SyntaxTable([SyntaxPattern("frobnicate", (DIRECT,), "frob")], VOCABULARY)

    def test_unknown_preposition_in_table(self):
        """Test that a pattern with an unknown preposition is rejected."""
        with pytest.raises(GrammarError):
            SyntaxTable([SyntaxPattern("take", (DIRECT, prep("beside"), INDIRECT), "x")], VOCABULARY)

    def test_malformed_pattern(self):
        """Test that slot lists are validated."""
        with pytest.raises(GrammarError):
            SyntaxPattern("give", (INDIRECT,), "give")
        with pytest.raises(GrammarError):
            SyntaxPattern("take", (DIRECT, DIRECT), "take")
        with pytest.raises(GrammarError):
            SyntaxPattern("wait", (), "wait", requires_held=True)


class TestObjectResolver:
    """Tests for noun phrase resolution."""

    def setup_method(self):
        self.resolver = ObjectResolver()

    def test_single_candidate(self):
        """Test resolving a noun with one match."""
        scope = scope_of(obj("lamp", ["lamp"]), obj("sword", ["sword"]))

        assert self.resolver.resolve(words("lantern"), scope) == "lamp"

    def test_not_visible(self):
        """Test a noun with no match in scope."""
        scope = scope_of(obj("sword", ["sword"]))
        result = self.resolver.resolve(words("lamp"), scope)

        assert result.kind is ErrorKind.OBJECT_NOT_VISIBLE
        assert result.word == "lamp"

    def test_adjective_disambiguates(self):
        """Test adjectives narrowing several candidates."""
        scope = scope_of(
            obj("brass_lamp", ["lamp"], ["brass"]),
            obj("broken_lamp", ["lamp"], ["broken"]),
        )

        assert self.resolver.resolve(words("broken lamp"), scope) == "broken_lamp"

    def test_ambiguous(self):
        """Test several candidates left after filtering."""
        scope = scope_of(
            obj("brass_lamp", ["lamp"], ["brass"]),
            obj("broken_lamp", ["lamp"], ["broken"]),
        )
        result = self.resolver.resolve(words("lamp"), scope)

        assert result.kind is ErrorKind.AMBIGUOUS
        assert result.candidates == ("brass_lamp", "broken_lamp")
        assert result.candidate_names == ("brass lamp", "broken lamp")

    def test_adjective_filters_to_nothing(self):
        """Test adjectives that match none of the candidates."""
        scope = scope_of(
            obj("brass_lamp", ["lamp"], ["brass"]),
            obj("broken_lamp", ["lamp"], ["broken"]),
        )
        result = self.resolver.resolve(words("rusty lamp"), scope)

        assert result.kind is ErrorKind.OBJECT_NOT_VISIBLE

    def test_adjective_only(self):
        """Test a phrase with no noun."""
        scope = scope_of(obj("lamp", ["lamp"], ["brass"]), obj("sword", ["sword"], ["elvish"]))

        assert self.resolver.resolve(words("brass"), scope) == "lamp"

    def test_invisible_objects_skipped(self):
        """Test that invisible objects are never resolved."""
        scope = scope_of(obj("ghost", ["ghosts"], flags=(ObjectFlag.INVISIBLE,)))

        assert self.resolver.resolve(words("ghosts"), scope).kind is ErrorKind.OBJECT_NOT_VISIBLE

    def test_unknown_word_in_phrase(self):
        """Test that an unknown word outranks other outcomes."""
        scope = scope_of(obj("lamp", ["lamp"]))
        result = self.resolver.resolve(words("shimmering lamp"), scope)

        assert result.kind is ErrorKind.UNKNOWN_WORD
        assert result.word == "shimmering"

    def test_all_takeable(self):
        """Test ALL for TAKE skips scenery, held, and contained objects."""
        scope = scope_of(
            obj("sword", ["sword"]),
            obj("rug", ["rug"], flags=(ObjectFlag.SCENERY,)),
            obj("leaflet", ["leaflet"], location="mailbox"),
            obj("lamp", ["lamp"], location="player"),
            obj("rope", ["rope"]),
            inventory=["lamp"],
        )
        result = self.resolver.resolve(words("all"), scope, AllScope.TAKEABLE, "take")

        assert result == ("sword", "rope")

    def test_all_held_order(self):
        """Test ALL for DROP walks the inventory in the configured order."""
        scope = scope_of(
            obj("lamp", ["lamp"], location="player"),
            obj("sword", ["sword"], location="player"),
            inventory=["lamp", "sword"],
        )

        assert self.resolver.resolve(words("all"), scope, AllScope.HELD) == ("lamp", "sword")
        reverse = ObjectResolver(InventoryOrder.REVERSE)
        assert reverse.resolve(words("all"), scope, AllScope.HELD) == ("sword", "lamp")

    def test_all_nothing_applicable(self):
        """Test ALL with nothing to apply to."""
        scope = scope_of(obj("rug", ["rug"], flags=(ObjectFlag.SCENERY,)))
        result = self.resolver.resolve(words("all"), scope, AllScope.TAKEABLE, "take")

        assert result.kind is ErrorKind.NOTHING_APPLICABLE
        assert result.verb == "take"

    def test_results_are_in_scope(self):
        """Test that every resolved ID belongs to the scope."""
        scope = scope_of(obj("sword", ["sword"]), obj("rope", ["rope"]))
        for phrase in ("sword", "rope", "all"):
            result = self.resolver.resolve(words(phrase), scope, AllScope.VISIBLE)
            ids = result if isinstance(result, tuple) else (result,)
            assert all(i in scope for i in ids)


class TestDispatcher:
    """Tests for dispatch preconditions and error priority."""

    def setup_method(self):
        self.parser = Parser()

    def test_not_in_possession(self):
        """Test dropping something not carried."""
        scope = scope_of(obj("sword", ["sword"]))
        result = self.parser.parse("drop sword", scope)

        assert result.kind is ErrorKind.NOT_IN_POSSESSION
        assert result.word == "sword"

    def test_dark_room_blocks_unheld(self):
        """Test that darkness blocks acting on things not carried."""
        scope = scope_of(obj("sword", ["sword"]), lit=False)
        result = self.parser.parse("take sword", scope)

        assert result.kind is ErrorKind.DARK_ROOM_BLOCKED
        assert result.verb == "take"

    def test_dark_room_blocks_held(self):
        """Test that darkness blocks acting even on carried objects."""
        scope = scope_of(
            obj("lamp", ["lamp"], flags=(ObjectFlag.LIGHT_SOURCE,), location="player"),
            inventory=["lamp"],
            lit=False,
        )

        result = self.parser.parse("examine lamp", scope)
        assert result.kind is ErrorKind.DARK_ROOM_BLOCKED
        assert result.verb == "examine"

        assert self.parser.parse("drop lamp", scope).kind is ErrorKind.DARK_ROOM_BLOCKED

    def test_dark_room_allows_lighting(self):
        """Test that a carried lamp can be turned on in the dark."""
        scope = scope_of(
            obj("lamp", ["lamp"], flags=(ObjectFlag.LIGHT_SOURCE,), location="player"),
            inventory=["lamp"],
            lit=False,
        )
        result = self.parser.parse("turn on lamp", scope)

        assert isinstance(result, ParsedCommand)
        assert result.action_id == "light"

    def test_dark_room_allowed_actions(self):
        """Test actions that need no light."""
        scope = scope_of(lit=False)

        assert self.parser.parse("inventory", scope).action_id == "inventory"
        assert self.parser.parse("south", scope).action_id == "walk"

    def test_custom_dark_allowed_actions(self):
        """Test overriding the dark-allowed list."""
        parser = Parser(dark_allowed_actions=["examine"])
        scope = scope_of(obj("sword", ["sword"]), lit=False)

        assert parser.parse("examine sword", scope).action_id == "examine"

    def test_direct_error_wins_tie(self):
        """Test both slots failing with the same kind."""
        result = self.parser.parse("put sword in case", scope_of())

        assert result.kind is ErrorKind.OBJECT_NOT_VISIBLE
        assert result.word == "sword"

    def test_higher_priority_error_wins(self):
        """Test both slots failing with different kinds."""
        scope = scope_of(
            obj("trophy_case", ["case"], ["trophy"], flags=(ObjectFlag.CONTAINER,)),
            obj("glass_case", ["case"], ["glass"], flags=(ObjectFlag.CONTAINER,)),
        )
        result = self.parser.parse("put sword in case", scope)

        assert result.kind is ErrorKind.AMBIGUOUS
        assert result.candidates == ("trophy_case", "glass_case")

    def test_resolution_error_before_preconditions(self):
        """Test that resolution errors outrank possession and light."""
        result = self.parser.parse("drop sword", scope_of(lit=False))

        assert result.kind is ErrorKind.OBJECT_NOT_VISIBLE

    def test_dispatcher_standalone(self):
        """Test dispatching a match directly."""
        syntax = build_syntax_table(VOCABULARY)
        dispatcher = Dispatcher(ObjectResolver())
        match = syntax.match(words("take sword"))
        result = dispatcher.dispatch(match, scope_of(obj("sword", ["sword"])))

        assert result == ParsedCommand("take", "take", "take", direct_object="sword")


class TestParser:
    """End-to-end parser tests."""

    def setup_method(self):
        self.parser = Parser()

    def test_take_from_open_container(self):
        """Test taking an object inside an open container."""
        scope = scope_of(
            obj("mailbox", ["mailbox"], ["small"], flags=(ObjectFlag.CONTAINER, ObjectFlag.OPEN)),
            obj("leaflet", ["leaflet"], location="mailbox"),
        )
        result = self.parser.parse("take leaflet", scope)

        assert isinstance(result, ParsedCommand)
        assert result.action_id == "take"
        assert result.direct_object == "leaflet"

    def test_object_not_in_scope(self):
        """Test naming an object that is not here."""
        scope = scope_of(obj("mailbox", ["mailbox"], flags=(ObjectFlag.CONTAINER,)))
        result = self.parser.parse("take lamp", scope)

        assert result == ParserError.object_not_visible("lamp")

    def test_first_unknown_word_reported(self):
        """Test that the leftmost unknown word is reported."""
        result = self.parser.parse("xyzzy quux", scope_of())

        assert result.kind is ErrorKind.UNKNOWN_WORD
        assert result.word == "xyzzy"
        assert result.position == 0

    def test_unknown_word_beats_syntax(self):
        """Test that unknown words are reported before syntax errors."""
        result = self.parser.parse("lamp frotz", scope_of())

        assert result.kind is ErrorKind.UNKNOWN_WORD
        assert result.word == "frotz"

    def test_unknown_word_beats_ambiguity(self):
        """Test that an unknown word wins over an ambiguous reference."""
        scope = scope_of(
            obj("wooden_door", ["door"], ["wooden"], flags=(ObjectFlag.DOOR,)),
            obj("glass_door", ["door"], ["glass"], flags=(ObjectFlag.DOOR,)),
        )
        assert self.parser.parse("open door", scope).kind is ErrorKind.AMBIGUOUS

        result = self.parser.parse("open door with frobozz", scope)

        assert result.kind is ErrorKind.UNKNOWN_WORD
        assert result.word == "frobozz"

    def test_ambiguous_doors(self):
        """Test two doors told apart by adjective."""
        scope = scope_of(
            obj("wooden_door", ["door"], ["wooden"], flags=(ObjectFlag.DOOR,)),
            obj("glass_door", ["door"], ["glass"], flags=(ObjectFlag.DOOR,)),
        )

        result = self.parser.parse("open door", scope)
        assert result.kind is ErrorKind.AMBIGUOUS
        assert result.candidates == ("wooden_door", "glass_door")

        assert self.parser.parse("open wooden door", scope).direct_object == "wooden_door"
        assert self.parser.parse("open glass door", scope).direct_object == "glass_door"

    def test_take_all(self):
        """Test TAKE ALL returning takeable objects in scope order."""
        scope = scope_of(
            obj("sword", ["sword"]),
            obj("lamp", ["lamp"]),
            obj("rug", ["rug"], flags=(ObjectFlag.SCENERY,)),
            obj("rope", ["rope"]),
        )
        result = self.parser.parse("take all", scope)

        assert result.is_all
        assert result.direct_object == ("sword", "lamp", "rope")

    def test_drop_all_order(self):
        """Test DROP ALL with forward and reverse inventory order."""
        scope = scope_of(
            obj("lamp", ["lamp"], location="player"),
            obj("sword", ["sword"], location="player"),
            inventory=["lamp", "sword"],
        )

        assert self.parser.parse("drop all", scope).direct_object == ("lamp", "sword")
        reverse = Parser(inventory_order=InventoryOrder.REVERSE)
        assert reverse.parse("drop all", scope).direct_object == ("sword", "lamp")

    def test_put_in(self):
        """Test a full verb-object-preposition-object command."""
        scope = scope_of(
            obj("sword", ["sword"], location="player"),
            obj("trophy_case", ["case"], ["trophy"], flags=(ObjectFlag.CONTAINER, ObjectFlag.OPEN)),
            inventory=["sword"],
        )
        result = self.parser.parse("put the sword in the trophy case", scope)

        assert result == ParsedCommand(
            action_id="put_in",
            verb_id="put",
            raw_verb="put",
            direct_object="sword",
            indirect_object="trophy_case",
            preposition="in",
        )

    def test_idempotent(self):
        """Test that parsing twice gives equal results."""
        scope = scope_of(obj("sword", ["sword"]), obj("lamp", ["lamp"]))
        for text in ("take sword", "take all", "drop lamp", "xyzzy", "", "open"):
            assert self.parser.parse(text, scope) == self.parser.parse(text, scope)

    def test_exactly_one_result(self):
        """Test that every parse yields a command or a single error."""
        scope = scope_of(obj("sword", ["sword"]))
        for text in ("take sword", "take", "sword", '"', "take take take take", "north"):
            result = self.parser.parse(text, scope)
            assert isinstance(result, (ParsedCommand, ParserError))

    def test_scope_not_mutated(self):
        """Test that parsing leaves the scope unchanged."""
        scope = scope_of(obj("sword", ["sword"]), obj("rope", ["rope"]))
        before = (scope.object_ids, dict(scope.objects), scope.inventory)

        self.parser.parse("take all", scope)

        assert (scope.object_ids, dict(scope.objects), scope.inventory) == before


class TestMessages:
    """Tests for error message rendering."""

    def test_basic_messages(self):
        """Test messages for errors without context."""
        assert render_error(ParserError.empty_input()) == "I beg your pardon?"
        assert render_error(ParserError.malformed_input()) == "I don't understand that sentence."
        assert render_error(ParserError.not_in_possession("sword")) == "You don't have that!"
        assert render_error(ParserError.dark_room_blocked("take")) == "It's too dark to see!"

    def test_unknown_word(self):
        """Test the unknown word message."""
        assert render_error(ParserError.unknown_word("xyzzy")) == 'I don\'t know the word "xyzzy".'

    def test_not_visible(self):
        """Test the not-visible message."""
        assert render_error(ParserError.object_not_visible("lamp")) == "You can't see any lamp here!"

    def test_no_syntax_match(self):
        """Test prompting for a missing object."""
        assert render_error(ParserError.no_syntax_match("take", True)) == "What do you want to take?"
        assert render_error(ParserError.no_syntax_match("go", True)) == "Where do you want to go?"
        assert render_error(ParserError.no_syntax_match("lamp")) == "That sentence isn't one I recognize."

    def test_ambiguity_prompt(self):
        """Test two-way and many-way ambiguity prompts."""
        assert (
            ambiguity_prompt("door", ("wooden door", "glass door"))
            == "Which door do you mean, the wooden door or the glass door?"
        )
        assert ambiguity_prompt("coin", ("a", "b", "c")) == "Which coin do you mean?"

    def test_nothing_applicable(self):
        """Test messages for ALL with nothing to apply to."""
        assert render_error(ParserError.nothing_applicable("take")) == "There's nothing here you can take."
        assert render_error(ParserError.nothing_applicable("drop")) == "You are empty-handed."
        assert render_error(ParserError.nothing_applicable("examine")) == "There's nothing here."
