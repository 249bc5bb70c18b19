"""
List registered agents.
"""

import sys

import redis
from rich.console import Console
from rich.table import Table

from parley.config import REDIS_DB, REDIS_HOST, REDIS_PORT
from parley.core.roster import lexicon_for, list_agents

console = Console()


def add_subparser(subparsers):
    parser = subparsers.add_parser("agents", help="List registered agents")
    parser.add_argument("--db", type=int, default=REDIS_DB)
    parser.set_defaults(func=run)


def run(args):
    client = redis.Redis(host=REDIS_HOST, port=REDIS_PORT, db=args.db)
    try:
        names = list_agents(client)
    except redis.RedisError as e:
        console.print(f"[red]✗ Redis error: {e}[/red]")
        sys.exit(1)

    if not names:
        console.print("No agents. Load one with: parley dict load FILE --agent NAME")
        return

    table = Table("agent", "words")
    for name in names:
        table.add_row(name, str(len(lexicon_for(client, name))))
    console.print(table)
