"""Interactive confirmation prompt."""

import sys
from typing import TextIO

import click

YES_ANSWERS = frozenset({"y", "yes"})
NO_ANSWERS = frozenset({"n", "no"})


def confirm(message: str, stream: TextIO | None = None) -> bool:
    """Ask a yes/no question until a valid answer is given.

    Returns True for y/yes and False for n/no (case-insensitive). Any other
    line re-prompts. End of input counts as a decline.
    """
    stream = stream or sys.stdin
    click.echo(f"{message} (y/n): ", nl=False)
    for line in stream:
        answer = line.strip().lower()
        if answer in YES_ANSWERS:
            return True
        if answer in NO_ANSWERS:
            return False
        click.echo("Invalid input. Please enter 'y' or 'n': ", nl=False)
    click.echo()
    return False
