"""
parley CLI.
"""

import argparse
import logging

from rich.logging import RichHandler

from parley.cli.commands import agents, ask, chat, dictionary


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )


def main():
    parser = argparse.ArgumentParser(prog="parley", description="parley CLI")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command")

    dictionary.add_subparser(subparsers)
    agents.add_subparser(subparsers)
    ask.add_subparser(subparsers)
    chat.add_subparser(subparsers)

    args = parser.parse_args()
    configure_logging(args.verbose)

    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
