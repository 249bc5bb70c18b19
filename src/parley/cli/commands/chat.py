"""
Interactive chat loop.

  exit       quit
  /rate N    rate the last reply (integer, higher is better)
"""

from rich.console import Console

from parley.cli.session import add_pool_arguments, open_pool

console = Console()

EXIT_COMMAND = "exit"
RATE_COMMAND = "/rate"


def add_subparser(subparsers):
    parser = subparsers.add_parser("chat", help="Interactive chat with the agent pool")
    parser.add_argument("--history", action="store_true", help="Prefer rated past replies")
    add_pool_arguments(parser)
    parser.set_defaults(func=run)


def run(args):
    pool = open_pool(args)
    if not len(pool):
        console.print("[yellow]No agents loaded; every reply will be a fallback.[/yellow]")

    last = None
    while True:
        try:
            text = console.input("You: ")
        except (EOFError, KeyboardInterrupt):
            console.print()
            break

        if text == EXIT_COMMAND:
            break

        if text.startswith(RATE_COMMAND):
            last = rate_last(pool, last, text[len(RATE_COMMAND):])
            continue

        reply = pool.respond(text, args.history)
        last = (text, reply)
        console.print(f"Bot: {reply}", markup=False, soft_wrap=True)


def rate_last(pool, last, arg: str):
    if last is None:
        console.print("[yellow]Nothing to rate yet.[/yellow]")
        return last
    try:
        rating = int(arg.strip())
    except ValueError:
        console.print(f"[red]✗ Rating must be an integer: {arg.strip()!r}[/red]")
        return last

    pool.rate(*last, rating)
    console.print(f"[dim]Rated {rating}.[/dim]")
    return last
