"""
Ask the agent pool a single question.
"""

from rich.console import Console
from rich.markup import escape

from parley.cli.session import add_pool_arguments, open_pool
from parley.core.pool import plurality

console = Console()


def add_subparser(subparsers):
    parser = subparsers.add_parser("ask", help="Get one voted reply")
    parser.add_argument("text", help="User input")
    parser.add_argument("--history", action="store_true", help="Reply from rated history")
    parser.add_argument("--votes", action="store_true", help="Show every agent's candidate")
    add_pool_arguments(parser)
    parser.set_defaults(func=run)


def run(args):
    pool = open_pool(args)

    # History replies are random, so vote on the same candidates that are shown
    replies = pool.candidates(args.text, args.history)

    if args.votes:
        for agent, reply in zip(pool, replies):
            console.print(f"[dim]{escape(agent.name)}:[/dim] {escape(reply)}", soft_wrap=True)

    console.print(plurality(replies), markup=False, soft_wrap=True)
