"""Command-line interface for PyZorkParser."""

import json
import logging
import sys
from dataclasses import asdict

from pyzorkparser.config import CONFIG_FILE, get_config
from pyzorkparser.engine import __version__
from pyzorkparser.engine.errors import ConfigError, ParseResult, ParserError
from pyzorkparser.engine.game import Game, create_game
from pyzorkparser.engine.messages import render_error
from pyzorkparser.engine.resolver import InventoryOrder


def result_to_dict(result: ParseResult) -> dict:
    """Convert a parse result into a JSON-serializable dictionary."""
    if isinstance(result, ParserError):
        return {
            "error": result.kind.name,
            "word": result.word,
            "candidates": list(result.candidates),
            "verb": result.verb,
            "message": render_error(result),
        }
    data = asdict(result)
    if isinstance(result.direct_object, tuple):
        data["direct_object"] = list(result.direct_object)
    return data


def run_game(game: Game) -> None:
    """Run the main game loop."""
    print(game.start())
    print()

    while True:
        try:
            user_input = input(game.get_prompt() + " ").strip()

            if not user_input:
                print("I beg your pardon?")
                print()
                continue

            result = game.process_input(user_input)

            for message in result.messages:
                print(message)
                print()

            if result.quit_requested:
                break

        except KeyboardInterrupt:
            print("\n")
            break
        except EOFError:
            print("\n\nGoodbye!")
            break


def run_parse_only(game: Game) -> None:
    """Parse each input line and print the result as JSON, without playing."""
    game.start()
    for line in sys.stdin:
        result = game.parse(line.rstrip("\n"))
        print(json.dumps(result_to_dict(result)))


def main() -> int:
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="PyZorkParser - Zork I natural-language command parser",
        prog="pyzorkparser",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"PyZorkParser {__version__}",
    )

    parser.add_argument(
        "--parse-only",
        action="store_true",
        help="Read commands from stdin and print each parse result as JSON",
    )

    parser.add_argument(
        "--drop-order",
        choices=[order.value for order in InventoryOrder],
        help="Order in which DROP ALL walks the inventory",
    )

    parser.add_argument(
        "--brief",
        action="store_true",
        help="Show short descriptions for rooms already visited",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log parser pipeline traces to stderr",
    )

    args = parser.parse_args()

    try:
        config = get_config()
    except ConfigError as e:
        print(f"Error in configuration ({CONFIG_FILE}): {e}", file=sys.stderr)
        return 1

    if args.drop_order:
        config.parser.inventory_order = args.drop_order
    if args.brief:
        config.game.brief_mode = True

    level = logging.DEBUG if args.debug else getattr(logging, config.game.log_level.upper())
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    game = create_game(config)

    if args.parse_only:
        run_parse_only(game)
    else:
        run_game(game)

    return 0


if __name__ == "__main__":
    sys.exit(main())
