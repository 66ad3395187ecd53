"""World management for PyZorkParser - rooms, navigation, and parser scope."""

import logging
from dataclasses import dataclass, field

from pyzorkparser.engine.models import (
    Exit,
    ExitType,
    GameObject,
    Object,
    ObjectFlag,
    Room,
    Scope,
)
from pyzorkparser.engine.state import PLAYER, GameState

logger = logging.getLogger(__name__)


@dataclass
class World:
    """Manages the game world - rooms, objects, and navigation."""

    rooms: dict[str, Room] = field(default_factory=dict)
    objects: dict[str, Object] = field(default_factory=dict)

    def add_room(self, room: Room) -> None:
        """Add a room to the world."""
        self.rooms[room.id] = room

    def add_object(self, obj: Object) -> None:
        """Add an object to the world."""
        self.objects[obj.id] = obj

    def get_room(self, room_id: str) -> Room | None:
        """Get a room by ID."""
        return self.rooms.get(room_id)

    def get_object(self, object_id: str) -> Object | None:
        """Get an object by ID."""
        return self.objects.get(object_id)

    def find_exit(self, room: Room, direction: str) -> Exit | None:
        """Find an exit from a room in a given direction."""
        for exit in room.exits:
            if exit.direction == direction:
                return exit
        return None

    def can_move(
        self,
        state: GameState,
        from_room: Room,
        direction: str,
    ) -> tuple[bool, str | None, str | None]:
        """
        Check if movement is possible.

        Returns:
            (can_move, destination_room_id, error_message)
        """
        exit = self.find_exit(from_room, direction)

        if exit is None:
            return False, None, "You can't go that way."

        if exit.exit_type == ExitType.NO_EXIT:
            return False, None, exit.message or "You can't go that way."

        if exit.exit_type == ExitType.DOOR and exit.door_id:
            door_state = state.get_object_state(exit.door_id)
            if ObjectFlag.OPEN not in door_state.flags:
                return False, None, exit.message or "The door is closed."

        return True, exit.destination_id, None

    def move_player(self, state: GameState, direction: str) -> tuple[bool, str]:
        """
        Attempt to move the player in a direction.

        Returns:
            (success, message)
        """
        current_room = self.get_room(state.current_room)
        if not current_room:
            return False, "You are nowhere!"

        can_go, destination_id, error = self.can_move(state, current_room, direction)
        if not can_go or not destination_id:
            return False, error or "You can't go that way."

        destination = self.get_room(destination_id)
        if not destination:
            return False, f"The path leads nowhere. (Missing room: {destination_id})"

        state.current_room = destination_id
        logger.debug(f"Player moved {direction} to {destination_id}")
        return True, self.describe_room(state, destination)

    def describe_room(
        self,
        state: GameState,
        room: Room,
        force_long: bool = False,
    ) -> str:
        """Get the description of a room, marking it visited."""
        room_state = state.get_room_state(room.id)

        if not self.is_room_lit(state, room):
            return "It is pitch black. You are likely to be eaten by a grue."

        parts = [room.name]
        if force_long or not room_state.is_visited() or not state.brief:
            parts.append(room.description_first)
        else:
            parts.append(room.description_short)
        room_state.mark_visited()

        for obj in self.get_visible_objects_in_room(state, room.id):
            if obj.description:
                parts.append(obj.description)

        return "\n".join(parts)

    def is_room_lit(self, state: GameState, room: Room) -> bool:
        """Check if a room is currently lit."""
        if room.is_lit():
            return True

        # A burning light source carried by the player or lying in the room
        for obj_id in state.objects_held_by(PLAYER) + state.objects_in_room(room.id):
            obj_state = state.get_object_state(obj_id)
            if {ObjectFlag.LIGHT_SOURCE, ObjectFlag.LIT} <= obj_state.flags:
                return True

        return False

    def get_visible_objects_in_room(
        self,
        state: GameState,
        room_id: str,
    ) -> list[Object]:
        """Get all visible objects lying in a room."""
        result = []
        for obj_id in state.objects_in_room(room_id):
            obj = self.get_object(obj_id)
            if obj and ObjectFlag.INVISIBLE not in state.get_object_state(obj_id).flags:
                result.append(obj)
        return result

    def get_inventory(self, state: GameState, actor_id: str = PLAYER) -> list[Object]:
        """Get objects held by an actor."""
        result = []
        for obj_id in state.objects_held_by(actor_id):
            obj = self.get_object(obj_id)
            if obj:
                result.append(obj)
        return result

    def is_container_open(self, state: GameState, container_id: str) -> bool:
        """Check if a container's contents can be reached."""
        flags = state.get_object_state(container_id).flags
        return {ObjectFlag.CONTAINER, ObjectFlag.OPEN} <= flags

    def is_container_see_through(self, state: GameState, container_id: str) -> bool:
        """Check if a container's contents can be seen, open or not."""
        flags = state.get_object_state(container_id).flags
        return ObjectFlag.CONTAINER in flags and (
            ObjectFlag.OPEN in flags or ObjectFlag.TRANSPARENT in flags
        )

    def snapshot(self, obj_id: str, state: GameState) -> GameObject | None:
        """Build the parser's read-only view of one object."""
        obj = self.get_object(obj_id)
        if obj is None:
            return None
        obj_state = state.get_object_state(obj_id)
        return GameObject(
            id=obj.id,
            name=obj.name,
            synonyms=frozenset(s.lower() for s in obj.synonyms),
            adjectives=frozenset(a.lower() for a in obj.adjectives),
            flags=frozenset(obj_state.flags),
            location=obj_state.location,
        )

    def build_scope(self, state: GameState) -> Scope:
        """
        Build the scope snapshot the parser resolves against.

        Order: objects in the room, contents of open containers, the
        player's inventory, then global objects.
        """
        ordered: list[str] = []

        def add_with_contents(obj_id: str) -> None:
            if obj_id in ordered:
                return
            ordered.append(obj_id)
            if self.is_container_open(state, obj_id):
                for inner_id in state.objects_in_container(obj_id):
                    add_with_contents(inner_id)

        for obj_id in state.objects_in_room(state.current_room):
            add_with_contents(obj_id)

        inventory = state.objects_held_by(PLAYER)
        for obj_id in inventory:
            add_with_contents(obj_id)

        for obj_id, obj in self.objects.items():
            if obj.has(ObjectFlag.GLOBAL):
                add_with_contents(obj_id)

        views = [view for view in (self.snapshot(i, state) for i in ordered) if view]
        room = self.get_room(state.current_room)
        lit = self.is_room_lit(state, room) if room else False
        return Scope.from_objects(state.current_room, views, inventory, lit)

    def initialize_object_states(self, state: GameState) -> None:
        """Initialize object states from world definitions."""
        for obj_id, obj in self.objects.items():
            obj_state = state.get_object_state(obj_id)
            obj_state.flags = set(obj.flags)
            if obj.initial_container:
                obj_state.container_id = obj.initial_container
            elif obj.initial_room == PLAYER:
                state.move_object_to_actor(obj_id, PLAYER)
            elif obj.initial_room:
                obj_state.room_id = obj.initial_room
