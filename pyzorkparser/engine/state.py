"""Game state management for PyZorkParser."""

from dataclasses import dataclass, field

from pyzorkparser.engine.models import ObjectFlag, RoomFlag

PLAYER = "player"


@dataclass
class RoomState:
    """Runtime state for a room."""

    room_id: str
    flags: RoomFlag = RoomFlag.NONE

    def mark_visited(self) -> None:
        """Mark the room as visited."""
        self.flags |= RoomFlag.RSEEN

    def is_visited(self) -> bool:
        """Check if room has been visited."""
        return bool(self.flags & RoomFlag.RSEEN)


@dataclass
class ObjectState:
    """Runtime state for an object."""

    object_id: str
    room_id: str | None = None  # Current room (None if not in a room)
    actor_id: str | None = None  # Actor holding it (None if not held)
    container_id: str | None = None  # Container it's in (None if not contained)
    flags: set[ObjectFlag] = field(default_factory=set)

    @property
    def location(self) -> str | None:
        """Wherever the object is: actor, container, or room."""
        return self.actor_id or self.container_id or self.room_id

    def is_in_room(self, room_id: str) -> bool:
        """Check if object is in a specific room."""
        return self.room_id == room_id and self.actor_id is None and self.container_id is None

    def is_held_by(self, actor_id: str) -> bool:
        """Check if object is held by a specific actor."""
        return self.actor_id == actor_id

    def is_in_container(self, container_id: str) -> bool:
        """Check if object is in a specific container."""
        return self.container_id == container_id


@dataclass
class GameState:
    """Complete game state for a session."""

    current_room: str = "whous"  # West of House
    moves: int = 0
    score: int = 0
    brief: bool = False

    room_states: dict[str, RoomState] = field(default_factory=dict)
    object_states: dict[str, ObjectState] = field(default_factory=dict)

    # Order in which the player picked things up
    inventory_order: list[str] = field(default_factory=list)

    def get_room_state(self, room_id: str) -> RoomState:
        """Get or create state for a room."""
        if room_id not in self.room_states:
            self.room_states[room_id] = RoomState(room_id=room_id)
        return self.room_states[room_id]

    def get_object_state(self, object_id: str) -> ObjectState:
        """Get or create state for an object."""
        if object_id not in self.object_states:
            self.object_states[object_id] = ObjectState(object_id=object_id)
        return self.object_states[object_id]

    def increment_moves(self) -> None:
        """Increment the move counter."""
        self.moves += 1

    def objects_in_room(self, room_id: str) -> list[str]:
        """Get all objects lying in a room."""
        return [
            obj_id for obj_id, state in self.object_states.items()
            if state.is_in_room(room_id)
        ]

    def objects_held_by(self, actor_id: str = PLAYER) -> list[str]:
        """Get all objects held by an actor, in pick-up order for the player."""
        held = [
            obj_id for obj_id, state in self.object_states.items()
            if state.is_held_by(actor_id)
        ]
        if actor_id != PLAYER:
            return held
        ordered = [obj_id for obj_id in self.inventory_order if obj_id in held]
        return ordered + [obj_id for obj_id in held if obj_id not in ordered]

    def objects_in_container(self, container_id: str) -> list[str]:
        """Get all objects in a container."""
        return [
            obj_id for obj_id, state in self.object_states.items()
            if state.is_in_container(container_id)
        ]

    def move_object_to_room(self, object_id: str, room_id: str) -> None:
        """Move an object to a room."""
        state = self.get_object_state(object_id)
        state.room_id = room_id
        state.actor_id = None
        state.container_id = None
        self._forget_held(object_id)

    def move_object_to_actor(self, object_id: str, actor_id: str = PLAYER) -> None:
        """Give an object to an actor."""
        state = self.get_object_state(object_id)
        state.room_id = None
        state.actor_id = actor_id
        state.container_id = None
        if actor_id == PLAYER:
            self._forget_held(object_id)
            self.inventory_order.append(object_id)

    def move_object_to_container(self, object_id: str, container_id: str) -> None:
        """Put an object in a container."""
        state = self.get_object_state(object_id)
        state.room_id = None
        state.actor_id = None
        state.container_id = container_id
        self._forget_held(object_id)

    def _forget_held(self, object_id: str) -> None:
        if object_id in self.inventory_order:
            self.inventory_order.remove(object_id)
