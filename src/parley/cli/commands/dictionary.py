"""
Dictionary commands.
"""

import sys

import redis
from rich.console import Console

from parley.config import REDIS_DB, REDIS_HOST, REDIS_PORT
from parley.core.errors import ResourceNotFoundError
from parley.core.ingest import load_dictionary
from parley.core.roster import lexicon_for, register_agent

console = Console()


def add_subparser(subparsers):
    parser = subparsers.add_parser("dict", help="Agent dictionary management")
    dict_sub = parser.add_subparsers(dest="dict_command", required=True)

    # load
    load_p = dict_sub.add_parser("load", help="Load a dictionary file into an agent")
    load_p.add_argument("file", help="word:definition|example1|example2 per line")
    load_p.add_argument("--agent", required=True, help="Agent name")
    load_p.add_argument("--db", type=int, default=REDIS_DB)
    load_p.set_defaults(func=dict_load)

    # define
    define_p = dict_sub.add_parser("define", help="Show a word's definition and examples")
    define_p.add_argument("word", help="Word to look up (exact match)")
    define_p.add_argument("--agent", required=True, help="Agent name")
    define_p.add_argument("--db", type=int, default=REDIS_DB)
    define_p.set_defaults(func=dict_define)


def dict_load(args):
    client = redis.Redis(host=REDIS_HOST, port=REDIS_PORT, db=args.db)

    try:
        lexicon = lexicon_for(client, args.agent)
        count = load_dictionary(args.file, lexicon)
        register_agent(client, args.agent)
    except ValueError as e:
        console.print(f"[red]✗ Error: {e}[/red]")
        sys.exit(1)
    except ResourceNotFoundError as e:
        console.print(f"[red]✗ {e}[/red]")
        sys.exit(1)
    except redis.RedisError as e:
        console.print(f"[red]✗ Redis error: {e}[/red]")
        sys.exit(1)

    console.print(f"✓ Loaded {count} words into {args.agent}")
    console.print(f"  total: {len(lexicon)}")


def dict_define(args):
    client = redis.Redis(host=REDIS_HOST, port=REDIS_PORT, db=args.db)
    try:
        entry = lexicon_for(client, args.agent).get_entry(args.word)
    except ValueError as e:
        console.print(f"[red]✗ Error: {e}[/red]")
        sys.exit(1)

    if entry is None:
        console.print(f"[yellow]{args.word}: not found[/yellow]")
        return

    console.print(f"[bold]{entry.word}[/bold]: {entry.definition or '[dim](no definition)[/dim]'}")
    for i, example in enumerate(entry.examples, 1):
        if example:
            console.print(f"  {i}. {example}")
