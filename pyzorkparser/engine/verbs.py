"""Verb handlers for PyZorkParser - command execution."""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from pyzorkparser.engine.errors import ParsedCommand
from pyzorkparser.engine.models import Object, ObjectFlag
from pyzorkparser.engine.state import PLAYER

if TYPE_CHECKING:
    from pyzorkparser.engine.game import Game

logger = logging.getLogger(__name__)


@dataclass
class VerbResult:
    """Result of executing a verb."""

    success: bool
    message: str
    end_turn: bool = True  # Whether this action uses a turn


class VerbHandler:
    """Executes parsed commands against the game world.

    The parser has already resolved every object and checked possession and
    light, so handlers only apply game rules.
    """

    def __init__(self, game: "Game") -> None:
        """Initialize verb handler with game reference."""
        self.game = game

        # Map action IDs to handler methods
        self.handlers: dict[str, Callable[[ParsedCommand], VerbResult]] = {
            # Movement
            "walk": self.do_walk,

            # Looking
            "look": self.do_look,
            "examine": self.do_examine,
            "read": self.do_read,
            "look_in": self.do_look_in,

            # Object manipulation
            "take": self.do_take,
            "take_from": self.do_take,
            "drop": self.do_drop,
            "put": self.do_put,
            "put_in": self.do_put_in,
            "put_on": self.do_put_on,
            "give": self.do_give,

            # Container operations
            "open": self.do_open,
            "close": self.do_close,

            # Light
            "light": self.do_light,
            "extinguish": self.do_extinguish,

            # Inventory
            "inventory": self.do_inventory,

            # Meta commands
            "wait": self.do_wait,
            "score": self.do_score,
            "quit": self.do_quit,
            "brief": self.do_brief,
            "verbose": self.do_verbose,
            "superbrief": self.do_brief,
            "version": self.do_version,
            "diagnose": self.do_diagnose,

            # Communication
            "hello": self.do_hello,
            "pray": self.do_pray,
            "jump": self.do_jump,
        }

    def execute(self, command: ParsedCommand) -> VerbResult:
        """Execute a parsed command."""
        handler = self.handlers.get(command.action_id)
        if handler:
            return handler(command)
        logger.debug(f"No handler for action {command.action_id!r}")
        return self.do_default(command)

    def _object(self, obj_id: str | None) -> Object | None:
        return self.game.world.get_object(obj_id) if obj_id else None

    def _flags(self, obj_id: str) -> set[ObjectFlag]:
        return self.game.state.get_object_state(obj_id).flags

    # ============ Movement ============

    def do_walk(self, cmd: ParsedCommand) -> VerbResult:
        """Handle movement commands."""
        if not cmd.direction:
            return VerbResult(
                success=False,
                message="Where do you want to go?",
                end_turn=False,
            )

        success, message = self.game.world.move_player(self.game.state, cmd.direction)
        return VerbResult(success=success, message=message)

    # ============ Looking ============

    def do_look(self, cmd: ParsedCommand) -> VerbResult:
        """Handle LOOK command."""
        room = self.game.world.get_room(self.game.state.current_room)
        if not room:
            return VerbResult(success=False, message="You are nowhere!")

        description = self.game.world.describe_room(
            self.game.state, room, force_long=True
        )
        return VerbResult(success=True, message=description, end_turn=False)

    def do_examine(self, cmd: ParsedCommand) -> VerbResult:
        """Handle EXAMINE command."""
        obj = self._object(cmd.direct_objects[0])
        if obj.examine:
            return VerbResult(success=True, message=obj.examine, end_turn=False)
        if ObjectFlag.CONTAINER in self._flags(obj.id):
            return self.do_look_in(cmd)
        return VerbResult(
            success=True,
            message=f"There's nothing special about the {obj.name}.",
            end_turn=False,
        )

    def do_read(self, cmd: ParsedCommand) -> VerbResult:
        """Handle READ command."""
        obj = self._object(cmd.direct_objects[0])
        if not obj.has(ObjectFlag.READABLE):
            return VerbResult(
                success=False,
                message=f"How does one read a {obj.name}?",
                end_turn=False,
            )
        return VerbResult(
            success=True,
            message=obj.read_text or f"The {obj.name} has nothing written on it.",
            end_turn=False,
        )

    def do_look_in(self, cmd: ParsedCommand) -> VerbResult:
        """Handle LOOK IN / SEARCH."""
        obj = self._object(cmd.direct_objects[0])
        if ObjectFlag.CONTAINER not in self._flags(obj.id):
            return VerbResult(
                success=False,
                message=f"You can't look inside the {obj.name}.",
                end_turn=False,
            )
        if not self.game.world.is_container_see_through(self.game.state, obj.id):
            return VerbResult(
                success=False,
                message=f"The {obj.name} is closed.",
                end_turn=False,
            )
        names = self._names(self.game.state.objects_in_container(obj.id))
        if not names:
            return VerbResult(
                success=True,
                message=f"The {obj.name} is empty.",
                end_turn=False,
            )
        return VerbResult(
            success=True,
            message=f"The {obj.name} contains:\n  " + "\n  ".join(names),
            end_turn=False,
        )

    # ============ Object Manipulation ============

    def do_take(self, cmd: ParsedCommand) -> VerbResult:
        """Handle TAKE command, including TAKE ALL."""
        if cmd.is_all:
            lines = [f"{self._object(i).name}: {self._take_one(i)[1]}" for i in cmd.direct_objects]
            return VerbResult(success=True, message="\n".join(lines))
        success, message = self._take_one(cmd.direct_objects[0])
        return VerbResult(success=success, message=message, end_turn=success)

    def _take_one(self, obj_id: str) -> tuple[bool, str]:
        obj = self._object(obj_id)
        obj_state = self.game.state.get_object_state(obj_id)

        if obj_state.is_held_by(PLAYER):
            return False, "You already have that!"
        if ObjectFlag.TAKEABLE not in obj_state.flags:
            return False, f"You can't take the {obj.name}."

        self.game.state.move_object_to_actor(obj_id, PLAYER)
        return True, "Taken."

    def do_drop(self, cmd: ParsedCommand) -> VerbResult:
        """Handle DROP command, including DROP ALL."""
        room_id = self.game.state.current_room
        for obj_id in cmd.direct_objects:
            self.game.state.move_object_to_room(obj_id, room_id)
        if cmd.is_all:
            lines = [f"{self._object(i).name}: Dropped." for i in cmd.direct_objects]
            return VerbResult(success=True, message="\n".join(lines))
        return VerbResult(success=True, message="Dropped.")

    def do_put(self, cmd: ParsedCommand) -> VerbResult:
        """Handle PUT without a destination."""
        return VerbResult(
            success=False,
            message="Where do you want to put it?",
            end_turn=False,
        )

    def do_put_in(self, cmd: ParsedCommand) -> VerbResult:
        """Handle PUT X IN Y."""
        container = self._object(cmd.indirect_object)
        flags = self._flags(container.id)

        if ObjectFlag.CONTAINER not in flags:
            return VerbResult(
                success=False,
                message=f"You can't put things in the {container.name}.",
                end_turn=False,
            )
        if ObjectFlag.OPEN not in flags:
            return VerbResult(
                success=False,
                message=f"The {container.name} isn't open.",
                end_turn=False,
            )

        lines = []
        for obj_id in cmd.direct_objects:
            if obj_id == container.id:
                lines.append("How can you do that?")
                continue
            contents = self.game.state.objects_in_container(container.id)
            if container.capacity and len(contents) >= container.capacity:
                lines.append(f"The {container.name} is full.")
                continue
            self.game.state.move_object_to_container(obj_id, container.id)
            lines.append(f"{self._object(obj_id).name}: Done." if cmd.is_all else "Done.")
        return VerbResult(success=True, message="\n".join(lines))

    def do_put_on(self, cmd: ParsedCommand) -> VerbResult:
        """Handle PUT X ON Y."""
        target = self._object(cmd.indirect_object)
        return VerbResult(
            success=False,
            message=f"There's no good surface on the {target.name}.",
            end_turn=False,
        )

    def do_give(self, cmd: ParsedCommand) -> VerbResult:
        """Handle GIVE command."""
        recipient = self._object(cmd.indirect_object)
        if ObjectFlag.ACTOR not in self._flags(recipient.id):
            return VerbResult(
                success=False,
                message=f"You can't give anything to the {recipient.name}.",
                end_turn=False,
            )
        return VerbResult(
            success=False,
            message=f"The {recipient.name} politely refuses.",
        )

    # ============ Container Operations ============

    def do_open(self, cmd: ParsedCommand) -> VerbResult:
        """Handle OPEN command."""
        obj = self._object(cmd.direct_objects[0])
        flags = self._flags(obj.id)

        if not flags & {ObjectFlag.CONTAINER, ObjectFlag.DOOR}:
            return VerbResult(
                success=False,
                message=f"You must tell me how to do that to a {obj.name}.",
                end_turn=False,
            )
        if ObjectFlag.OPEN in flags:
            return VerbResult(
                success=False,
                message="It is already open.",
                end_turn=False,
            )

        flags.add(ObjectFlag.OPEN)

        # Describe contents if container
        names = self._names(self.game.state.objects_in_container(obj.id))
        if ObjectFlag.CONTAINER in flags and names:
            return VerbResult(
                success=True,
                message=f"Opening the {obj.name} reveals {self._list(names)}.",
            )
        return VerbResult(success=True, message="Opened.")

    def do_close(self, cmd: ParsedCommand) -> VerbResult:
        """Handle CLOSE command."""
        obj = self._object(cmd.direct_objects[0])
        flags = self._flags(obj.id)

        if not flags & {ObjectFlag.CONTAINER, ObjectFlag.DOOR}:
            return VerbResult(
                success=False,
                message=f"You must tell me how to do that to a {obj.name}.",
                end_turn=False,
            )
        if ObjectFlag.OPEN not in flags:
            return VerbResult(
                success=False,
                message="It is already closed.",
                end_turn=False,
            )

        flags.discard(ObjectFlag.OPEN)
        return VerbResult(success=True, message="Closed.")

    # ============ Light ============

    def do_light(self, cmd: ParsedCommand) -> VerbResult:
        """Handle LIGHT / TURN ON."""
        obj = self._object(cmd.direct_objects[0])
        flags = self._flags(obj.id)

        if ObjectFlag.LIGHT_SOURCE not in flags:
            return VerbResult(
                success=False,
                message="You can't turn that on.",
                end_turn=False,
            )
        if ObjectFlag.LIT in flags:
            return VerbResult(
                success=False,
                message="It is already on.",
                end_turn=False,
            )

        room = self.game.world.get_room(self.game.state.current_room)
        was_dark = room is not None and not self.game.world.is_room_lit(self.game.state, room)
        flags.add(ObjectFlag.LIT)
        message = f"The {obj.name} is now on."
        if was_dark:
            message += "\n" + self.game.world.describe_room(self.game.state, room)
        return VerbResult(success=True, message=message)

    def do_extinguish(self, cmd: ParsedCommand) -> VerbResult:
        """Handle EXTINGUISH / TURN OFF."""
        obj = self._object(cmd.direct_objects[0])
        flags = self._flags(obj.id)

        if ObjectFlag.LIGHT_SOURCE not in flags:
            return VerbResult(
                success=False,
                message="You can't turn that off.",
                end_turn=False,
            )
        if ObjectFlag.LIT not in flags:
            return VerbResult(
                success=False,
                message="It is already off.",
                end_turn=False,
            )

        flags.discard(ObjectFlag.LIT)
        message = f"The {obj.name} is now off."
        room = self.game.world.get_room(self.game.state.current_room)
        if room and not self.game.world.is_room_lit(self.game.state, room):
            message += "\nIt is now pitch black."
        return VerbResult(success=True, message=message)

    # ============ Inventory ============

    def do_inventory(self, cmd: ParsedCommand) -> VerbResult:
        """Handle INVENTORY command."""
        inventory = self.game.world.get_inventory(self.game.state)

        if not inventory:
            return VerbResult(
                success=True,
                message="You are empty-handed.",
                end_turn=False,
            )

        items = [obj.name for obj in inventory]
        return VerbResult(
            success=True,
            message="You are carrying:\n  " + "\n  ".join(items),
            end_turn=False,
        )

    # ============ Meta Commands ============

    def do_wait(self, cmd: ParsedCommand) -> VerbResult:
        """Handle WAIT command."""
        return VerbResult(success=True, message="Time passes...")

    def do_score(self, cmd: ParsedCommand) -> VerbResult:
        """Handle SCORE command."""
        state = self.game.state
        return VerbResult(
            success=True,
            message=(
                f"Your score is {state.score}, "
                f"in {state.moves} move{'s' if state.moves != 1 else ''}."
            ),
            end_turn=False,
        )

    def do_quit(self, cmd: ParsedCommand) -> VerbResult:
        """Handle QUIT command."""
        return VerbResult(
            success=True,
            message="QUIT",  # Special marker for game loop
            end_turn=False,
        )

    def do_brief(self, cmd: ParsedCommand) -> VerbResult:
        """Handle BRIEF and SUPERBRIEF commands."""
        self.game.state.brief = True
        return VerbResult(
            success=True,
            message="Brief descriptions.",
            end_turn=False,
        )

    def do_verbose(self, cmd: ParsedCommand) -> VerbResult:
        """Handle VERBOSE command."""
        self.game.state.brief = False
        return VerbResult(
            success=True,
            message="Maximum verbosity.",
            end_turn=False,
        )

    def do_version(self, cmd: ParsedCommand) -> VerbResult:
        """Handle VERSION command."""
        from pyzorkparser.engine import __version__

        return VerbResult(
            success=True,
            message=f"PyZorkParser {__version__} - Zork I command parser",
            end_turn=False,
        )

    def do_diagnose(self, cmd: ParsedCommand) -> VerbResult:
        """Handle DIAGNOSE command."""
        return VerbResult(
            success=True,
            message="You are in perfect health.",
            end_turn=False,
        )

    def do_hello(self, cmd: ParsedCommand) -> VerbResult:
        """Handle HELLO command."""
        return VerbResult(success=True, message="Hello.", end_turn=False)

    def do_pray(self, cmd: ParsedCommand) -> VerbResult:
        """Handle PRAY command."""
        return VerbResult(success=True, message="If you pray enough, your prayers may be answered.")

    def do_jump(self, cmd: ParsedCommand) -> VerbResult:
        """Handle JUMP command."""
        return VerbResult(success=True, message="Wheeeeeeeeee!!!!!")

    def do_default(self, cmd: ParsedCommand) -> VerbResult:
        """Fallback for actions with no special behavior."""
        if cmd.direct_objects:
            obj = self._object(cmd.direct_objects[0])
            return VerbResult(
                success=False,
                message=f"You can't {cmd.raw_verb} the {obj.name}.",
            )
        return VerbResult(success=False, message="Nothing happens.")

    # ============ Helpers ============

    def _names(self, obj_ids: list[str]) -> list[str]:
        return [obj.name for obj in (self._object(i) for i in obj_ids) if obj]

    @staticmethod
    def _list(names: list[str]) -> str:
        """Join object names into an English list."""
        if len(names) == 1:
            return f"a {names[0]}"
        return ", ".join(f"a {n}" for n in names[:-1]) + f" and a {names[-1]}"
