"""Command group: interface enumeration and field lookup on Python classes."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from commonkit.commands._base import CkGroup

if TYPE_CHECKING:
    from commonkit.commands._context import AppContext


@click.group(
    "inspect",
    cls=CkGroup,
    examples="""\
  commonkit inspect interfaces mypkg.models:Account
  commonkit inspect field mypkg.models:Account balance
  commonkit inspect field mypkg.models:Account __secret --force-access""",
)
def inspect_group() -> None:
    """Inspect the interface hierarchy and fields of a Python class."""


@inspect_group.command(examples="""\
  commonkit inspect interfaces mypkg.models:Account
  commonkit -q inspect interfaces mypkg.models:Account""")
@click.argument("target")
@click.pass_obj
def interfaces(app: AppContext, target: str) -> None:
    """List every protocol implemented by TARGET (module:Class) and its bases."""
    from commonkit.services.inspection import InspectService

    app.emit(InspectService(app.settings).interfaces(target))


@inspect_group.command(examples="""\
  commonkit inspect field mypkg.models:Account owner
  commonkit inspect field mypkg.models:Account _ledger --force-access""")
@click.argument("target")
@click.argument("name")
@click.option(
    "--force-access/--no-force-access",
    default=None,
    help="Match non-public fields (default from [inspect] config).",
)
@click.pass_obj
def field(app: AppContext, target: str, name: str, force_access: bool | None) -> None:
    """Find field NAME on TARGET (module:Class), its bases, then its protocols."""
    from commonkit.services.inspection import InspectService

    app.emit(InspectService(app.settings).field(target, name, force_access=force_access))
