# itemboard/client/cli.py
"""
Terminal version of the item page.

Usage:
    python -m itemboard.client [--api-base http://localhost:8000]

Type a name and press enter to add it; an empty line adds an empty name.
Lines starting with ``:`` are commands: ``:list`` reloads from the service
and ``:quit`` exits, as does end of input. To add a name that itself starts
with ``:`` or ``\\``, prefix it with a backslash (``\\:quit`` adds ``:quit``).
"""

import argparse

from itemboard.client.http import ItemsClient
from itemboard.client.view import ItemsView
from itemboard.config import Settings
from itemboard.logging_config import setup_logging

QUIT = ":quit"
RELOAD = ":list"
ESCAPE = "\\"


def render(view: ItemsView) -> None:
    print("Items")
    for item in view.items:
        print(f"  [{item.id}] {item.name}")


def run(view: ItemsView) -> None:
    view.load()
    render(view)

    while True:
        try:
            line = input("Enter a new item: ")
        except EOFError:
            break

        if line == QUIT:
            break
        if line == RELOAD:
            view.load()
            render(view)
            continue
        if line.startswith(":"):
            print(f"Unknown command {line!r}")
            continue
        if line.startswith(ESCAPE):
            line = line[1:]

        view.set_pending(line)
        if view.add() is not None:
            render(view)


def main(argv=None):
    settings = Settings()
    parser = argparse.ArgumentParser(description="List and add items")
    parser.add_argument("--api-base", default=settings.api_base)
    args = parser.parse_args(argv)

    setup_logging(settings.log_level)

    with ItemsClient(args.api_base) as client:
        run(ItemsView(client))
