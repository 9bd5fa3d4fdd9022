"""Subcommand modules for commonkit.

Provides register_commands() which uses deferred imports to keep
``commonkit --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups on the root CLI group."""
    from commonkit.commands.dates import date
    from commonkit.commands.inspect_cmd import inspect_group

    cli.add_command(date)
    cli.add_command(inspect_group)
