"""CLI for truncate-n."""

import click

from .filter.config import LINE_MODE, WORD_MODE
from .filter.filter import run

CONTEXT_SETTINGS = {"ignore_unknown_options": True}


def make_command(name: str, mode: str, help_text: str) -> click.Command:
    """Build a single-argument command bound to one unit mode."""

    @click.command(name, context_settings=CONTEXT_SETTINGS, help=help_text)
    @click.version_option(package_name="truncate-n")
    @click.argument("args", nargs=-1, metavar="N")
    @click.pass_context
    def command(ctx, args):
        ctx.exit(run(
            args,
            click.open_file("-", "rb"),
            click.open_file("-", "wb"),
            mode=mode,
        ))

    return command


truncate_lines = make_command(
    "truncate-lines",
    LINE_MODE,
    "Print the first N bytes of each line read from standard input.",
)

truncate_words = make_command(
    "truncate-words",
    WORD_MODE,
    "Print the first N bytes of each whitespace-separated word read from standard input.",
)
