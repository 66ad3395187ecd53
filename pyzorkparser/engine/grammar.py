"""Built-in Zork I vocabulary and verb syntax tables."""

from pyzorkparser.engine.syntax import (
    DIRECT,
    DIRECTION,
    INDIRECT,
    AllScope,
    SyntaxPattern,
    SyntaxTable,
    prep,
)
from pyzorkparser.engine.vocabulary import Vocabulary

# Verb vocabulary with synonyms (surface -> canonical)
VERBS = {
    # Movement
    "go": "walk", "walk": "walk", "run": "walk", "proceed": "walk", "step": "walk",
    "climb": "climb",
    "jump": "jump", "leap": "jump",

    # Looking
    "look": "look", "l": "look", "stare": "look", "gaze": "look",
    "examine": "examine", "x": "examine", "describe": "examine",
    "what": "examine", "whats": "examine",
    "read": "read", "skim": "read",
    "search": "search",
    "listen": "listen",
    "smell": "smell", "sniff": "smell",

    # Object manipulation
    "take": "take", "get": "take", "pick": "take", "grab": "take",
    "hold": "take", "carry": "take", "catch": "take",
    "remove": "remove",
    "drop": "drop", "discard": "drop",
    "put": "put", "place": "put", "insert": "put", "stuff": "put", "hide": "put",
    "throw": "throw", "toss": "throw", "hurl": "throw", "chuck": "throw",
    "give": "give", "hand": "give", "offer": "give", "donate": "give", "feed": "give",
    "pour": "pour", "spill": "pour",
    "fill": "fill",
    "wave": "wave", "brandish": "wave",
    "move": "move", "roll": "move",

    # Containers and doors
    "open": "open",
    "close": "close", "shut": "close",
    "lock": "lock",
    "unlock": "unlock",

    # Physical actions
    "push": "push", "press": "push",
    "pull": "pull", "tug": "pull", "yank": "pull",
    "turn": "turn", "set": "turn", "flip": "turn", "rotate": "turn",
    "rub": "rub", "touch": "rub", "feel": "rub", "pat": "rub", "pet": "rub",
    "tie": "tie", "fasten": "tie", "attach": "tie", "secure": "tie",
    "untie": "untie", "unfasten": "untie", "free": "untie", "release": "untie",
    "ring": "ring", "peal": "ring",
    "dig": "dig",

    # Light
    "light": "light", "activate": "light",
    "extinguish": "extinguish", "douse": "extinguish",
    "blow": "blow",

    # Combat
    "attack": "attack", "fight": "attack", "hit": "attack",
    "hurt": "attack", "injure": "attack",
    "kill": "kill", "murder": "kill", "slay": "kill", "dispatch": "kill", "stab": "kill",

    # Food/drink
    "eat": "eat", "consume": "eat", "taste": "eat", "bite": "eat",
    "drink": "drink", "imbibe": "drink", "swallow": "drink",

    # Communication
    "hello": "hello", "hi": "hello",
    "pray": "pray",

    # Special/meta
    "inventory": "inventory", "i": "inventory", "invent": "inventory",
    "wait": "wait", "z": "wait",
    "quit": "quit", "q": "quit",
    "score": "score",
    "brief": "brief",
    "verbose": "verbose",
    "superbrief": "superbrief", "super": "superbrief",
    "version": "version",
    "diagnose": "diagnose",
    "again": "again", "g": "again",
}

PREPOSITIONS = {
    "with": "with", "using": "with",
    "through": "through", "thru": "through",
    "in": "in", "inside": "in", "into": "in",
    "on": "on", "onto": "on", "upon": "on",
    "under": "under", "underneath": "under", "beneath": "under", "below": "under",
    "at": "at",
    "to": "to",
    "from": "from",
    "off": "off",
    "over": "over",
    "behind": "behind",
    "about": "about",
    "for": "for",
    "across": "across",
    "around": "around",
    "against": "against",
    "up": "up",
    "down": "down",
    "out": "out",
}

DIRECTIONS = {
    "n": "north", "north": "north",
    "s": "south", "south": "south",
    "e": "east", "east": "east",
    "w": "west", "west": "west",
    "ne": "northeast", "northeast": "northeast",
    "nw": "northwest", "northwest": "northwest",
    "se": "southeast", "southeast": "southeast",
    "sw": "southwest", "southwest": "southwest",
    "u": "up", "up": "up",
    "d": "down", "down": "down",
    "in": "in", "enter": "in",
    "out": "out", "exit": "out", "leave": "out",
}

# Nouns from Zork I object definitions; synonym groups share a canonical ID
NOUNS = {
    "lamp": "lamp", "lantern": "lamp",
    "leaflet": "leaflet", "booklet": "leaflet", "pamphlet": "leaflet",
    "advertisement": "leaflet", "mail": "leaflet",
    "mailbox": "mailbox", "box": "box",
    "sword": "sword", "blade": "blade", "weapon": "weapon",
    "glamdring": "sword", "orcrist": "sword",
    "knife": "knife", "knives": "knife", "stiletto": "stiletto",
    "axe": "axe", "ax": "axe", "hatchet": "axe",
    "rope": "rope", "hemp": "rope", "coil": "rope",
    "torch": "torch",
    "door": "door", "doors": "door",
    "trapdoor": "trapdoor", "trap-door": "trapdoor", "trap": "trapdoor", "cover": "trapdoor",
    "window": "window", "windows": "window",
    "wall": "wall", "walls": "wall",
    "floor": "ground", "ground": "ground", "dirt": "ground",
    "ceiling": "ceiling", "sky": "sky", "air": "air",
    "house": "house", "building": "house",
    "tree": "tree", "trees": "tree", "branch": "tree",
    "forest": "forest", "hemlocks": "forest", "pines": "forest",
    "water": "water", "h2o": "water", "liquid": "water", "quantity": "water",
    "stream": "stream", "river": "river",
    "mat": "mat", "rug": "rug", "carpet": "rug",
    "grating": "grating", "grate": "grating",
    "leaves": "leaves", "leaf": "leaves", "pile": "pile",
    "nest": "nest", "bird": "bird", "songbird": "bird", "canary": "canary",
    "egg": "egg", "eggs": "egg",
    "jewel": "jewel", "jewels": "jewel", "jewelry": "jewel",
    "coins": "coin", "coin": "coin", "zorkmid": "coin",
    "coffin": "coffin", "casket": "coffin",
    "sceptre": "sceptre", "scepter": "sceptre",
    "bracelet": "bracelet", "necklace": "necklace",
    "painting": "painting", "picture": "painting", "canvas": "painting", "art": "painting",
    "bottle": "bottle", "flask": "bottle",
    "food": "food", "lunch": "food", "dinner": "food", "sandwich": "food",
    "garlic": "garlic", "clove": "garlic",
    "bag": "bag", "sack": "bag",
    "book": "book", "books": "book", "guidebook": "book", "prayer": "book",
    "candles": "candles", "candle": "candles", "pair": "candles",
    "match": "match", "matches": "match", "matchbook": "match",
    "wrench": "wrench", "screwdriver": "screwdriver", "driver": "screwdriver",
    "thief": "thief", "robber": "thief", "burglar": "thief", "footpad": "thief",
    "troll": "troll", "monster": "troll",
    "cyclops": "cyclops", "giant": "cyclops",
    "case": "case", "trophy": "trophy",
    "chest": "chest", "basket": "basket", "cage": "basket",
    "bucket": "bucket", "pail": "bucket", "pot": "pot",
    "shovel": "shovel", "spade": "shovel",
    "bell": "bell", "buoy": "buoy",
    "pump": "pump", "air-pump": "pump",
    "machine": "machine", "dryer": "machine",
    "switch": "switch", "button": "button", "lever": "lever",
    "mirror": "mirror", "glass": "glass",
    "board": "board", "boards": "board", "plank": "board",
    "bolt": "bolt", "nut": "bolt", "bubble": "bubble",
    "coal": "coal", "heap": "coal", "diamond": "diamond",
    "emerald": "emerald", "figurine": "figurine", "trident": "trident", "fork": "trident",
    "chalice": "chalice", "cup": "chalice", "skull": "skull",
    "scarab": "scarab", "beetle": "scarab", "bauble": "bauble",
    "bar": "bar", "gold": "gold", "silver": "silver", "platinum": "platinum",
    "stone": "stone", "rock": "stone", "stones": "stone", "rocks": "stone",
    "sand": "sand",
    "key": "key", "keys": "key",
    "table": "table", "altar": "altar", "pedestal": "pedestal",
    "chimney": "chimney", "fireplace": "chimney",
    "railing": "railing", "rail": "railing",
    "stairs": "stairs", "staircase": "stairs", "stairway": "stairs", "steps": "stairs",
    "slide": "slide", "chute": "slide", "ramp": "slide",
    "boat": "boat", "raft": "boat", "label": "label",
    "map": "map", "parchment": "map",
    "tube": "tube", "paste": "putty", "putty": "putty", "gunk": "gunk",
    "skeleton": "skeleton", "bones": "skeleton", "body": "body", "bodies": "body",
    "ghosts": "ghosts", "spirits": "ghosts", "fiends": "ghosts",
    "grue": "grue", "bat": "bat", "vampire": "bat",
    "ladder": "ladder", "lid": "lid", "panel": "panel", "valve": "valve",
    "hands": "hands", "hand": "hands",
    "me": "me", "myself": "me", "self": "me",
}

ADJECTIVES = {
    word: word for word in (
        "white", "crystal", "silver", "gold", "golden", "brass", "wooden",
        "rusty", "small", "tiny", "little", "large", "big", "huge", "enormous",
        "old", "ancient", "new", "broken", "sharp", "dull", "heavy", "dark",
        "black", "bright", "shiny", "dirty", "clean", "wet", "dry", "hot", "cold",
        "beautiful", "ugly", "strange", "magic", "dead", "locked", "empty",
        "jade", "ivory", "platinum", "jeweled", "engraved", "carved", "painted",
        "leather", "cloth", "steel", "iron", "copper", "bronze", "stone",
        "marble", "granite", "blue", "brown", "green", "red", "tan", "yellow",
        "clear", "glass", "metal", "plastic", "solid", "viscous", "antique",
        "bloody", "boarded", "burned", "burning", "encrusted", "flaming",
        "narrow", "rickety", "steep", "useless", "elvish", "evil", "gothic",
        "hand-held", "nasty", "oriental", "seedy", "shady", "sinister",
        "skeleton", "front", "kitchen", "tool", "trap", "trophy", "vampire",
        "birds", "bird", "control", "match", "sapphire", "screw", "tour",
        "pepper", "mangled", "lowered", "massive", "giant", "hungry",
        "egyptian", "clockwork", "fine", "owners", "zork", "thiefs", "sandwich",
        "battery", "inflatable", "magnificent", "trunk", "pot",
    )
}

ARTICLES = ("a", "an", "the")
ALL_WORDS = ("all", "everything")

# Actions that work in the dark; every other action naming an object is blocked
DARK_ALLOWED_ACTIONS = frozenset({
    "walk", "inventory", "wait", "look", "score", "quit", "verbose", "brief",
    "superbrief", "diagnose", "version", "again", "listen", "pray", "hello",
    "jump", "light",
})

SYNTAX = [
    # Movement
    SyntaxPattern("walk", (DIRECTION,), "walk"),
    SyntaxPattern("walk", (prep("to"), DIRECTION), "walk"),
    SyntaxPattern("climb", (DIRECTION,), "walk"),
    SyntaxPattern("climb", (DIRECT,), "climb"),
    SyntaxPattern("climb", (prep("up"), DIRECT), "climb_up"),
    SyntaxPattern("climb", (prep("down"), DIRECT), "climb_down"),
    SyntaxPattern("climb", (prep("in"), DIRECT), "board"),
    SyntaxPattern("jump", (), "jump"),
    SyntaxPattern("jump", (prep("over"), DIRECT), "jump"),

    # Looking
    SyntaxPattern("look", (), "look"),
    SyntaxPattern("look", (prep("at"), DIRECT), "examine"),
    SyntaxPattern("look", (prep("in"), DIRECT), "look_in"),
    SyntaxPattern("look", (prep("under"), DIRECT), "look_under"),
    SyntaxPattern("look", (prep("behind"), DIRECT), "look_behind"),
    SyntaxPattern("look", (prep("through"), DIRECT), "look_in"),
    SyntaxPattern("examine", (DIRECT,), "examine"),
    SyntaxPattern("read", (DIRECT,), "read"),
    SyntaxPattern("search", (DIRECT,), "look_in"),
    SyntaxPattern("listen", (), "listen"),
    SyntaxPattern("listen", (prep("to"), DIRECT), "listen"),
    SyntaxPattern("smell", (DIRECT,), "smell"),

    # Taking and dropping
    SyntaxPattern("take", (DIRECT,), "take", AllScope.TAKEABLE),
    SyntaxPattern("take", (prep("up"), DIRECT), "take", AllScope.TAKEABLE),
    SyntaxPattern("take", (DIRECT, prep("up")), "take", AllScope.TAKEABLE),
    SyntaxPattern("take", (DIRECT, prep("from"), INDIRECT), "take_from"),
    SyntaxPattern("take", (DIRECT, prep("off"), INDIRECT), "take_from"),
    SyntaxPattern("take", (DIRECT, prep("out"), INDIRECT), "take_from"),
    SyntaxPattern("remove", (DIRECT,), "take", AllScope.TAKEABLE),
    SyntaxPattern("remove", (DIRECT, prep("from"), INDIRECT), "take_from"),
    SyntaxPattern("drop", (DIRECT,), "drop", AllScope.HELD, requires_held=True),
    SyntaxPattern("put", (DIRECT,), "put", AllScope.HELD, requires_held=True),
    SyntaxPattern("put", (DIRECT, prep("in"), INDIRECT), "put_in", AllScope.HELD, requires_held=True),
    SyntaxPattern("put", (DIRECT, prep("on"), INDIRECT), "put_on", AllScope.HELD, requires_held=True),
    SyntaxPattern("put", (DIRECT, prep("under"), INDIRECT), "put_under", requires_held=True),
    SyntaxPattern("put", (prep("down"), DIRECT), "drop", AllScope.HELD, requires_held=True),
    SyntaxPattern("put", (DIRECT, prep("down")), "drop", AllScope.HELD, requires_held=True),
    SyntaxPattern("throw", (DIRECT,), "drop", requires_held=True),
    SyntaxPattern("throw", (DIRECT, prep("at"), INDIRECT), "throw_at", requires_held=True),
    SyntaxPattern("throw", (DIRECT, prep("in"), INDIRECT), "put_in", requires_held=True),
    SyntaxPattern("throw", (DIRECT, prep("to"), INDIRECT), "give", requires_held=True),
    SyntaxPattern("give", (DIRECT, prep("to"), INDIRECT), "give", requires_held=True),
    SyntaxPattern("give", (INDIRECT, DIRECT), "give", requires_held=True),
    SyntaxPattern("pour", (DIRECT,), "pour", requires_held=True),
    SyntaxPattern("pour", (DIRECT, prep("in"), INDIRECT), "pour_in", requires_held=True),
    SyntaxPattern("pour", (DIRECT, prep("on"), INDIRECT), "pour_on", requires_held=True),
    SyntaxPattern("fill", (DIRECT,), "fill"),
    SyntaxPattern("fill", (DIRECT, prep("with"), INDIRECT), "fill"),
    SyntaxPattern("wave", (DIRECT,), "wave", requires_held=True),
    SyntaxPattern("move", (DIRECT,), "move"),

    # Containers and doors
    SyntaxPattern("open", (DIRECT,), "open"),
    SyntaxPattern("open", (DIRECT, prep("with"), INDIRECT), "open_with"),
    SyntaxPattern("open", (prep("up"), DIRECT), "open"),
    SyntaxPattern("close", (DIRECT,), "close"),
    SyntaxPattern("lock", (DIRECT, prep("with"), INDIRECT), "lock"),
    SyntaxPattern("unlock", (DIRECT, prep("with"), INDIRECT), "unlock"),

    # Physical actions
    SyntaxPattern("push", (DIRECT,), "push"),
    SyntaxPattern("pull", (DIRECT,), "pull"),
    SyntaxPattern("turn", (DIRECT,), "turn"),
    SyntaxPattern("turn", (prep("on"), DIRECT), "light"),
    SyntaxPattern("turn", (DIRECT, prep("on")), "light"),
    SyntaxPattern("turn", (prep("off"), DIRECT), "extinguish"),
    SyntaxPattern("turn", (DIRECT, prep("off")), "extinguish"),
    SyntaxPattern("turn", (DIRECT, prep("with"), INDIRECT), "turn_with"),
    SyntaxPattern("rub", (DIRECT,), "rub"),
    SyntaxPattern("tie", (DIRECT, prep("to"), INDIRECT), "tie"),
    SyntaxPattern("untie", (DIRECT,), "untie"),
    SyntaxPattern("ring", (DIRECT,), "ring"),
    SyntaxPattern("dig", (prep("in"), DIRECT), "dig"),
    SyntaxPattern("dig", (DIRECT, prep("with"), INDIRECT), "dig"),

    # Light
    SyntaxPattern("light", (DIRECT,), "light"),
    SyntaxPattern("light", (DIRECT, prep("with"), INDIRECT), "burn_with"),
    SyntaxPattern("extinguish", (DIRECT,), "extinguish"),
    SyntaxPattern("blow", (prep("out"), DIRECT), "extinguish"),
    SyntaxPattern("blow", (DIRECT, prep("out")), "extinguish"),

    # Combat
    SyntaxPattern("attack", (DIRECT,), "attack"),
    SyntaxPattern("attack", (DIRECT, prep("with"), INDIRECT), "attack"),
    SyntaxPattern("kill", (DIRECT,), "attack"),
    SyntaxPattern("kill", (DIRECT, prep("with"), INDIRECT), "attack"),

    # Food/drink
    SyntaxPattern("eat", (DIRECT,), "eat"),
    SyntaxPattern("drink", (DIRECT,), "drink"),

    # Communication
    SyntaxPattern("hello", (), "hello"),
    SyntaxPattern("hello", (DIRECT,), "hello"),
    SyntaxPattern("pray", (), "pray"),

    # Meta
    SyntaxPattern("inventory", (), "inventory"),
    SyntaxPattern("wait", (), "wait"),
    SyntaxPattern("quit", (), "quit"),
    SyntaxPattern("score", (), "score"),
    SyntaxPattern("brief", (), "brief"),
    SyntaxPattern("verbose", (), "verbose"),
    SyntaxPattern("superbrief", (), "superbrief"),
    SyntaxPattern("version", (), "version"),
    SyntaxPattern("diagnose", (), "diagnose"),
    SyntaxPattern("again", (), "again"),
]


def build_vocabulary() -> Vocabulary:
    """Build the built-in Zork I vocabulary."""
    return Vocabulary.from_tables(
        verbs=VERBS,
        nouns=NOUNS,
        adjectives=ADJECTIVES,
        prepositions=PREPOSITIONS,
        directions=DIRECTIONS,
        articles=ARTICLES,
        all_words=ALL_WORDS,
    )


def build_syntax_table(vocabulary: Vocabulary) -> SyntaxTable:
    """Build the built-in syntax table, validated against a vocabulary."""
    return SyntaxTable(SYNTAX, vocabulary, implicit_verb="walk")
