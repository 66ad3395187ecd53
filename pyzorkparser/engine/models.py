"""Core data models for PyZorkParser game entities."""

from dataclasses import dataclass, field
from enum import Enum, IntFlag, auto
from types import MappingProxyType
from typing import Iterator, Mapping


class RoomFlag(IntFlag):
    """Room property flags."""

    NONE = 0
    RHOUSE = 64  # Part of house
    RLAND = 8192  # Land room
    RLIGHT = 16384  # Room is naturally lit
    RSEEN = 32768  # Room has been visited


class ObjectFlag(Enum):
    """Object capabilities. A closed set; objects carry a frozenset of these."""

    TAKEABLE = auto()
    SCENERY = auto()  # Excluded from ALL
    CONTAINER = auto()
    OPEN = auto()
    TRANSPARENT = auto()  # Contents visible when closed
    LIGHT_SOURCE = auto()
    LIT = auto()  # Light source is on
    DOOR = auto()
    READABLE = auto()
    ACTOR = auto()
    WEAPON = auto()
    GLOBAL = auto()  # Referenceable from every room
    INVISIBLE = auto()


class ExitType(Enum):
    """Exit types for room connections."""

    NORMAL = 1  # Normal unconditional exit
    NO_EXIT = 2  # No exit in this direction
    DOOR = 4  # Door exit (requires door to be open)


@dataclass
class Exit:
    """Represents a room exit/connection."""

    direction: str  # Canonical direction ("north", "up", ...)
    destination_id: str
    exit_type: ExitType = ExitType.NORMAL
    door_id: str | None = None  # Object ID if door type
    message: str | None = None  # Message if blocked


@dataclass
class Room:
    """Represents a room in the game world."""

    id: str
    name: str
    description_first: str  # Long description (first visit)
    description_short: str  # Short description (subsequent visits)
    flags: RoomFlag = RoomFlag.RLAND | RoomFlag.RLIGHT
    exits: list[Exit] = field(default_factory=list)

    def is_lit(self) -> bool:
        """Check if room is naturally lit."""
        return bool(self.flags & RoomFlag.RLIGHT)


@dataclass
class Object:
    """Static definition of an object/item in the game."""

    id: str
    name: str
    adjectives: list[str] = field(default_factory=list)
    synonyms: list[str] = field(default_factory=list)
    description: str = ""  # Description when in room
    examine: str = ""  # Description when examined
    read_text: str = ""  # Text when read
    flags: set[ObjectFlag] = field(default_factory=set)
    initial_room: str | None = None  # Starting room ID
    initial_container: str | None = None  # Starting container ID
    capacity: int = 0  # Container capacity

    def has(self, flag: ObjectFlag) -> bool:
        return flag in self.flags


@dataclass(frozen=True)
class GameObject:
    """Read-only view of an object as the parser sees it for one turn."""

    id: str
    name: str
    synonyms: frozenset[str] = frozenset()
    adjectives: frozenset[str] = frozenset()
    flags: frozenset[ObjectFlag] = frozenset()
    location: str | None = None  # Room ID, container ID, or "player"

    def has(self, flag: ObjectFlag) -> bool:
        return flag in self.flags

    def is_takeable(self) -> bool:
        return ObjectFlag.TAKEABLE in self.flags

    def is_scenery(self) -> bool:
        return ObjectFlag.SCENERY in self.flags

    def is_visible(self) -> bool:
        return ObjectFlag.INVISIBLE not in self.flags


@dataclass(frozen=True)
class Scope:
    """Objects the player can refer to this turn, in resolution order.

    Built by the game-state collaborator and never mutated afterwards.
    """

    location: str
    object_ids: tuple[str, ...] = ()
    objects: Mapping[str, GameObject] = field(default_factory=dict)
    inventory: tuple[str, ...] = ()
    lit: bool = True

    def __post_init__(self) -> None:
        # Freeze the lookup table so a snapshot can be shared safely
        object.__setattr__(self, "objects", MappingProxyType(dict(self.objects)))

    @classmethod
    def from_objects(
        cls,
        location: str,
        objects: list[GameObject],
        inventory: list[str] | None = None,
        lit: bool = True,
    ) -> "Scope":
        """Build a scope from an ordered list of object views."""
        return cls(
            location=location,
            object_ids=tuple(obj.id for obj in objects),
            objects={obj.id: obj for obj in objects},
            inventory=tuple(inventory or ()),
            lit=lit,
        )

    def __contains__(self, object_id: object) -> bool:
        return object_id in self.object_ids

    def __iter__(self) -> Iterator[GameObject]:
        for obj_id in self.object_ids:
            obj = self.objects.get(obj_id)
            if obj is not None:
                yield obj

    def __len__(self) -> int:
        return len(self.object_ids)

    def get(self, object_id: str) -> GameObject | None:
        """Get object metadata, only for IDs in scope."""
        if object_id not in self.object_ids:
            return None
        return self.objects.get(object_id)

    def holds(self, object_id: str) -> bool:
        """Check if the player is carrying an object."""
        return object_id in self.inventory
