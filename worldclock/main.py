"""Main entry point for the application."""

import argparse
import sys

from worldclock.app import WorldClockApp
from worldclock.config import settings
from worldclock.display.renderer import ROWS_START
from worldclock.display.selector import search_labels
from worldclock.display.surface import TerminalSurface
from worldclock.utils.logger import setup_logger

logger = setup_logger(__name__)


def handle_command(app: WorldClockApp, command: str) -> bool:
    """
    Run one interactive command.

    Returns:
        False when the user asked to quit
    """
    name, _, argument = command.strip().partition(" ")
    argument = argument.strip()

    if name == "q":
        return False
    if name == "a":
        app.add_city(argument)
    elif name == "d":
        if argument.isdigit() and app.remove_at(ROWS_START + int(argument) - 1):
            return True
        app.surface.notify(f"No city at row '{argument}'")
    elif name == "r":
        app.refresh()
    elif name == "R":
        app.reload_catalog()
    elif name == "+":
        app.shift(settings.small_shift_seconds)
    elif name == "-":
        app.shift(-settings.small_shift_seconds)
    elif name == ">":
        app.shift(settings.large_shift_seconds)
    elif name == "<":
        app.shift(-settings.large_shift_seconds)
    elif name:
        app.surface.notify(f"Unknown command '{name}'")
    return True


def watch(app: WorldClockApp) -> None:
    """Live display driven by commands read from stdin."""
    app.refresh()
    try:
        for line in sys.stdin:
            if not handle_command(app, line):
                break
    except KeyboardInterrupt:
        pass
    finally:
        app.close()


def main():
    """Main function."""
    parser = argparse.ArgumentParser(description="World clock for a list of cities")
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("watch", help="Live display (default)")
    subparsers.add_parser("show", help="Print the clock once and exit")

    add_parser = subparsers.add_parser("add", help="Add a city to the list")
    add_parser.add_argument("query", nargs="*", help="Words to search for")

    search_parser = subparsers.add_parser("search", help="List matching cities")
    search_parser.add_argument("query", nargs="+", help="Words to search for")

    args = parser.parse_args()
    command = args.command or "watch"

    app = WorldClockApp(surface=TerminalSurface(clear=command == "watch"))

    if command == "watch":
        watch(app)
        return

    try:
        if command == "show":
            app.render_now()
        elif command == "add":
            entry = app.add_city(" ".join(args.query))
            if entry is None:
                logger.info("No city added")
        elif command == "search":
            catalog = app.catalog()
            if catalog is None:
                sys.exit(1)
            for label in search_labels(catalog, " ".join(args.query)):
                print(label)
    finally:
        app.close()


if __name__ == "__main__":
    main()
