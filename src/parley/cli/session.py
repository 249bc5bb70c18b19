"""
Pool setup shared by the ask and chat commands.

With --dict FILE (repeatable) each file becomes an in-memory agent named
after the file. Without it, agents come from the Redis roster.
"""

import sys
from pathlib import Path

import redis
from rich.console import Console

from parley.config import MEMORY_LIMIT, REDIS_DB, REDIS_HOST, REDIS_PORT, STOPWORDS_FILE
from parley.core.agent import Agent
from parley.core.errors import ResourceNotFoundError
from parley.core.lexicon import InMemoryLexicon
from parley.core.pool import AgentPool
from parley.core.roster import build_pool
from parley.core.stopwords import load_stopwords

console = Console()


def add_pool_arguments(parser):
    parser.add_argument("--stopwords", default=STOPWORDS_FILE, help="Stop word file")
    parser.add_argument(
        "--dict", dest="dict_files", action="append", default=[],
        help="Dictionary file for an in-memory agent (repeatable)",
    )
    parser.add_argument("--memory-limit", type=int, default=MEMORY_LIMIT)
    parser.add_argument("--db", type=int, default=REDIS_DB)


def open_pool(args) -> AgentPool:
    try:
        if args.dict_files:
            pool = AgentPool()
            for path in args.dict_files:
                agent = Agent.from_files(
                    Path(path).stem,
                    InMemoryLexicon(),
                    args.stopwords,
                    dictionary_path=path,
                    memory_limit=args.memory_limit,
                )
                pool.add(agent)
            return pool

        stopwords = load_stopwords(args.stopwords)
        client = redis.Redis(host=REDIS_HOST, port=REDIS_PORT, db=args.db)
        return build_pool(client, stopwords, args.memory_limit)
    except ResourceNotFoundError as e:
        console.print(f"[red]✗ {e}[/red]")
        sys.exit(1)
    except ValueError as e:
        console.print(f"[red]✗ Error: {e}[/red]")
        sys.exit(1)
    except redis.RedisError as e:
        console.print(f"[red]✗ Redis error: {e}[/red]")
        sys.exit(1)
