"""Z-Machine style message text for parser errors."""

from pyzorkparser.engine.errors import ErrorKind, ParserError

# Verb-specific "What do you want to [verb]?" phrasing, keyed by raw verb
VERB_OBJECT_MESSAGES = {
    "get": "What do you want to take?",
    "pick": "What do you want to take?",
    "grab": "What do you want to take?",
    "place": "What do you want to put?",
    "insert": "What do you want to put?",
    "x": "What do you want to examine?",
    "look": "What do you want to look at?",
    "l": "What do you want to look at?",
    "kill": "What do you want to attack?",
    "hit": "What do you want to attack?",
    "fight": "What do you want to attack?",
    "blow": "What do you want to blow out?",
    "listen": "What do you want to listen to?",
    "dig": "What do you want to dig in?",
    "go": "Where do you want to go?",
    "walk": "Where do you want to go?",
    "run": "Where do you want to go?",
    "climb": "What do you want to climb?",
}

NOTHING_APPLICABLE_MESSAGES = {
    "take": "There's nothing here you can take.",
    "get": "There's nothing here you can take.",
    "grab": "There's nothing here you can take.",
    "pick": "There's nothing here you can take.",
    "drop": "You are empty-handed.",
    "put": "You are empty-handed.",
}


def clean_object_name(name: str | None) -> str:
    """Strip leading articles and normalize case."""
    if not name:
        return "that"
    cleaned = name.strip().lower()
    for article in ("the ", "a ", "an "):
        if cleaned.startswith(article):
            cleaned = cleaned[len(article):]
            break
    return cleaned.strip() or "that"


def verb_needs_object(verb: str) -> str:
    verb = verb.strip().lower()
    return VERB_OBJECT_MESSAGES.get(verb, f"What do you want to {verb}?")


def ambiguity_prompt(word: str, candidate_names: tuple[str, ...]) -> str:
    """Ask which object was meant.

    Exactly two candidates are named; three or more get the short form.
    """
    word = clean_object_name(word)
    if len(candidate_names) == 2:
        first, second = (clean_object_name(n) for n in candidate_names)
        return f"Which {word} do you mean, the {first} or the {second}?"
    return f"Which {word} do you mean?"


def render_error(error: ParserError) -> str:
    """Render a parser error as the text the player sees."""
    kind = error.kind
    if kind is ErrorKind.EMPTY_INPUT:
        return "I beg your pardon?"
    if kind is ErrorKind.MALFORMED_INPUT:
        return "I don't understand that sentence."
    if kind is ErrorKind.UNKNOWN_WORD:
        return f'I don\'t know the word "{error.word}".'
    if kind is ErrorKind.NO_SYNTAX_MATCH:
        if error.needs_object and error.verb:
            return verb_needs_object(error.verb)
        return "That sentence isn't one I recognize."
    if kind is ErrorKind.OBJECT_NOT_VISIBLE:
        return f"You can't see any {clean_object_name(error.word)} here!"
    if kind is ErrorKind.AMBIGUOUS:
        return ambiguity_prompt(error.word or "one", error.candidate_names)
    if kind is ErrorKind.NOT_IN_POSSESSION:
        return "You don't have that!"
    if kind is ErrorKind.DARK_ROOM_BLOCKED:
        return "It's too dark to see!"
    if kind is ErrorKind.NOTHING_APPLICABLE:
        verb = (error.verb or "").lower()
        return NOTHING_APPLICABLE_MESSAGES.get(verb, "There's nothing here.")
    return "You can't do that."
