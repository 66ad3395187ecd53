"""Main game engine for PyZorkParser."""

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pyzorkparser.engine.errors import ParsedCommand, ParseResult, ParserError
from pyzorkparser.engine.messages import render_error
from pyzorkparser.engine.parser import Parser
from pyzorkparser.engine.state import GameState
from pyzorkparser.engine.verbs import VerbHandler
from pyzorkparser.engine.world import World

if TYPE_CHECKING:
    from pyzorkparser.config import Config

logger = logging.getLogger(__name__)


@dataclass
class GameResult:
    """Result of processing a turn."""

    messages: list[str] = field(default_factory=list)
    quit_requested: bool = False
    parse_result: ParseResult | None = None


class Game:
    """Main game engine - coordinates world, state, parser, and verbs."""

    def __init__(
        self,
        world: World | None = None,
        state: GameState | None = None,
        parser: Parser | None = None,
        config: "Config | None" = None,
    ) -> None:
        """Initialize game with world and state."""
        self.world = world or World()
        self.state = state or GameState()
        if parser is None:
            parser = Parser.from_config(config.parser) if config else Parser()
        self.parser = parser
        if config is not None:
            self.state.brief = config.game.brief_mode
        self.verbs = VerbHandler(self)

        # Last command that parsed, for AGAIN
        self._last_input: str | None = None

    def start(self) -> str:
        """Start a new game. Returns opening text."""
        self.world.initialize_object_states(self.state)

        room = self.world.get_room(self.state.current_room)
        if not room:
            return "Error: Starting room not found!"

        lines = [
            "ZORK I: The Great Underground Empire",
            "PyZorkParser demo world",
            "Copyright (c) 1981, 1982, 1983 Infocom, Inc.",
            "",
            self.world.describe_room(self.state, room),
        ]
        return "\n".join(lines)

    def parse(self, input_text: str) -> ParseResult:
        """Parse input against the current scope without executing it."""
        return self.parser.parse(input_text, self.world.build_scope(self.state))

    def process_input(self, input_text: str) -> GameResult:
        """Process player input and return result."""
        result = GameResult()

        parsed = self.parse(input_text)
        if isinstance(parsed, ParsedCommand) and parsed.action_id == "again":
            if self._last_input is None:
                result.messages.append("I can't repeat a command I haven't heard.")
                return result
            input_text = self._last_input
            parsed = self.parse(input_text)
        result.parse_result = parsed

        if isinstance(parsed, ParserError):
            logger.debug(f"Parse failed for {input_text!r}: {parsed.kind.name}")
            result.messages.append(render_error(parsed))
            return result

        self._last_input = input_text
        self._execute(parsed, result)
        return result

    def _execute(self, command: ParsedCommand, result: GameResult) -> None:
        verb_result = self.verbs.execute(command)

        if verb_result.message == "QUIT":
            result.quit_requested = True
            result.messages.append("Goodbye!")
        elif verb_result.message:
            result.messages.append(verb_result.message)

        if verb_result.end_turn:
            self.state.increment_moves()

    def get_prompt(self) -> str:
        """Get the input prompt."""
        return ">"


def create_demo_world() -> World:
    """Create a minimal demo world around the white house."""
    from pyzorkparser.engine.models import (
        Exit,
        ExitType,
        Object,
        ObjectFlag,
        Room,
        RoomFlag,
    )

    world = World()

    # West of House
    world.add_room(Room(
        id="whous",
        name="West of House",
        description_first=(
            "You are standing in an open field west of a white house, "
            "with a boarded front door."
        ),
        description_short="West of House",
        flags=RoomFlag.RLIGHT | RoomFlag.RLAND,
        exits=[
            Exit("north", "nhous"),
            Exit("south", "shous"),
            Exit("east", "whous", ExitType.NO_EXIT,
                 message="The door is boarded and you can't remove the boards."),
        ],
    ))

    # North of House
    world.add_room(Room(
        id="nhous",
        name="North of House",
        description_first=(
            "You are facing the north side of a white house. There is no door here, "
            "and all the windows are boarded up."
        ),
        description_short="North of House",
        flags=RoomFlag.RLIGHT | RoomFlag.RLAND,
        exits=[
            Exit("south", "whous"),
            Exit("east", "ehous"),
        ],
    ))

    # South of House
    world.add_room(Room(
        id="shous",
        name="South of House",
        description_first=(
            "You are facing the south side of a white house. There is no door here, "
            "and all the windows are boarded."
        ),
        description_short="South of House",
        flags=RoomFlag.RLIGHT | RoomFlag.RLAND,
        exits=[
            Exit("north", "whous"),
            Exit("east", "ehous"),
        ],
    ))

    # Behind House
    world.add_room(Room(
        id="ehous",
        name="Behind House",
        description_first=(
            "You are behind the white house. In one corner of the house there "
            "is a small window which is slightly ajar."
        ),
        description_short="Behind House",
        flags=RoomFlag.RLIGHT | RoomFlag.RLAND,
        exits=[
            Exit("north", "nhous"),
            Exit("south", "shous"),
            Exit("west", "kitchen", ExitType.DOOR, door_id="window",
                 message="The window is closed."),
            Exit("in", "kitchen", ExitType.DOOR, door_id="window",
                 message="The window is closed."),
        ],
    ))

    # Kitchen
    world.add_room(Room(
        id="kitchen",
        name="Kitchen",
        description_first=(
            "You are in the kitchen of the white house. A table seems to have been "
            "used recently for the preparation of food. A passage leads to the west "
            "and a dark staircase can be seen leading downward."
        ),
        description_short="Kitchen",
        flags=RoomFlag.RLIGHT | RoomFlag.RLAND | RoomFlag.RHOUSE,
        exits=[
            Exit("east", "ehous", ExitType.DOOR, door_id="window",
                 message="The window is closed."),
            Exit("out", "ehous", ExitType.DOOR, door_id="window",
                 message="The window is closed."),
            Exit("west", "lroom"),
            Exit("down", "cella"),
        ],
    ))

    # Living Room
    world.add_room(Room(
        id="lroom",
        name="Living Room",
        description_first=(
            "You are in the living room. There is a doorway to the east, a wooden "
            "door with strange gothic lettering to the west, which appears to be "
            "nailed shut, a trophy case, and a large oriental rug in the center of "
            "the room."
        ),
        description_short="Living Room",
        flags=RoomFlag.RLIGHT | RoomFlag.RLAND | RoomFlag.RHOUSE,
        exits=[
            Exit("east", "kitchen"),
            Exit("west", "lroom", ExitType.NO_EXIT,
                 message="The door is nailed shut."),
        ],
    ))

    # Cellar
    world.add_room(Room(
        id="cella",
        name="Cellar",
        description_first=(
            "You are in a dark and damp cellar with a narrow passageway leading "
            "north. On the west is the bottom of a steep metal ramp which is "
            "unclimbable."
        ),
        description_short="Cellar",
        flags=RoomFlag.RLAND,  # No light!
        exits=[
            Exit("up", "kitchen"),
        ],
    ))

    # ============ Objects ============

    world.add_object(Object(
        id="mailbox",
        name="small mailbox",
        synonyms=["mailbox", "box"],
        adjectives=["small"],
        description="There is a small mailbox here.",
        flags={ObjectFlag.CONTAINER, ObjectFlag.SCENERY},
        initial_room="whous",
        capacity=10,
    ))

    world.add_object(Object(
        id="leaflet",
        name="leaflet",
        synonyms=["leaflet"],
        read_text=(
            "WELCOME TO ZORK!\n\n"
            "ZORK is a game of adventure, danger, and low cunning. In it you will "
            "explore some of the most amazing territory ever seen by mortals. No "
            "computer should be without one!"
        ),
        flags={ObjectFlag.TAKEABLE, ObjectFlag.READABLE},
        initial_container="mailbox",
    ))

    world.add_object(Object(
        id="door",
        name="front door",
        synonyms=["door"],
        adjectives=["front", "boarded"],
        examine="The door is boarded and you can't remove the boards.",
        flags={ObjectFlag.DOOR, ObjectFlag.SCENERY},
        initial_room="whous",
    ))

    world.add_object(Object(
        id="window",
        name="small window",
        synonyms=["window"],
        adjectives=["small"],
        examine="The window is slightly ajar, but not enough to allow entry.",
        flags={ObjectFlag.DOOR, ObjectFlag.SCENERY},
        initial_room="ehous",
    ))

    world.add_object(Object(
        id="table",
        name="kitchen table",
        synonyms=["table"],
        adjectives=["kitchen"],
        flags={ObjectFlag.SCENERY},
        initial_room="kitchen",
    ))

    world.add_object(Object(
        id="bottle",
        name="glass bottle",
        synonyms=["bottle"],
        adjectives=["clear", "glass"],
        description="A bottle is sitting on the table.",
        flags={ObjectFlag.TAKEABLE, ObjectFlag.CONTAINER, ObjectFlag.TRANSPARENT},
        initial_room="kitchen",
        capacity=4,
    ))

    world.add_object(Object(
        id="water",
        name="quantity of water",
        synonyms=["water"],
        flags={ObjectFlag.TAKEABLE},
        initial_container="bottle",
    ))

    world.add_object(Object(
        id="sack",
        name="brown sack",
        synonyms=["bag"],
        adjectives=["brown", "elongated"],
        description="On the table is an elongated brown sack, smelling of hot peppers.",
        flags={ObjectFlag.TAKEABLE, ObjectFlag.CONTAINER},
        initial_room="kitchen",
        capacity=9,
    ))

    world.add_object(Object(
        id="garlic",
        name="clove of garlic",
        synonyms=["garlic"],
        flags={ObjectFlag.TAKEABLE},
        initial_container="sack",
    ))

    world.add_object(Object(
        id="lunch",
        name="lunch",
        synonyms=["food"],
        adjectives=["hot", "pepper"],
        flags={ObjectFlag.TAKEABLE},
        initial_container="sack",
    ))

    world.add_object(Object(
        id="sword",
        name="elvish sword",
        synonyms=["sword", "blade"],
        adjectives=["elvish", "antique"],
        description="Above the trophy case hangs an elvish sword of great antiquity.",
        examine=(
            "The sword is of exquisite craftsmanship. It is inscribed with "
            "ancient elvish runes."
        ),
        flags={ObjectFlag.TAKEABLE, ObjectFlag.WEAPON},
        initial_room="lroom",
    ))

    world.add_object(Object(
        id="lamp",
        name="brass lantern",
        synonyms=["lamp"],
        adjectives=["brass"],
        description="A battery-powered brass lantern is on the trophy case.",
        examine="The lamp is a battery-powered brass lantern.",
        flags={ObjectFlag.TAKEABLE, ObjectFlag.LIGHT_SOURCE},
        initial_room="lroom",
    ))

    world.add_object(Object(
        id="tcase",
        name="trophy case",
        synonyms=["case"],
        adjectives=["trophy"],
        flags={ObjectFlag.CONTAINER, ObjectFlag.TRANSPARENT, ObjectFlag.SCENERY},
        initial_room="lroom",
        capacity=100,
    ))

    world.add_object(Object(
        id="rug",
        name="oriental rug",
        synonyms=["rug"],
        adjectives=["oriental", "large"],
        examine="The rug is a beautiful oriental carpet.",
        flags={ObjectFlag.SCENERY},
        initial_room="lroom",
    ))

    world.add_object(Object(
        id="wooden_door",
        name="wooden door",
        synonyms=["door"],
        adjectives=["wooden", "gothic", "strange"],
        examine="The engravings translate to \"This space intentionally left blank.\"",
        flags={ObjectFlag.DOOR, ObjectFlag.SCENERY},
        initial_room="lroom",
    ))

    world.add_object(Object(
        id="trapdoor",
        name="trap door",
        synonyms=["trapdoor", "door"],
        adjectives=["trap"],
        flags={ObjectFlag.DOOR, ObjectFlag.SCENERY},
        initial_room="cella",
    ))

    world.add_object(Object(
        id="ramp",
        name="metal ramp",
        synonyms=["slide"],
        adjectives=["steep", "metal"],
        flags={ObjectFlag.SCENERY},
        initial_room="cella",
    ))

    world.add_object(Object(
        id="house",
        name="white house",
        synonyms=["house"],
        adjectives=["white"],
        examine="The house is a beautiful colonial house which is painted white.",
        flags={ObjectFlag.SCENERY, ObjectFlag.GLOBAL},
    ))

    return world


def create_game(config: "Config | None" = None) -> Game:
    """Create a new game with demo world."""
    world = create_demo_world()
    state = GameState()
    return Game(world=world, state=state, config=config)
