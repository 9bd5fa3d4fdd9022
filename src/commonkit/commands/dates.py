"""Command group: fixed-pattern date parsing and formatting."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from commonkit.commands._base import CkGroup

if TYPE_CHECKING:
    from commonkit.commands._context import AppContext


@click.group(
    cls=CkGroup,
    examples="""\
  commonkit date parse 2024-02-29
  commonkit date parse 2024-02-29T13:45:00 --datetime
  commonkit date format 2024-02-29
  commonkit date format 2024-02-29T13:45:00.250+01:00 --datetime""",
)
def date() -> None:
    """Convert between dates and yyyy-MM-dd / yyyy-MM-dd'T'HH:mm:ss text."""


@date.command(examples="""\
  commonkit date parse 2023-12-31
  commonkit --json date parse 2023-12-31T23:59:59 --datetime""")
@click.argument("text")
@click.option("--datetime", "with_time", is_flag=True, help="Parse yyyy-MM-dd'T'HH:mm:ss.")
@click.pass_obj
def parse(app: AppContext, text: str, with_time: bool) -> None:
    """Parse TEXT strictly against the fixed pattern."""
    from commonkit.services.dates import DateService

    app.emit(DateService(app.settings).parse(text, with_time=with_time))


@date.command(name="format", examples="""\
  commonkit date format 2023-12-31
  commonkit date format 2023-12-31T23:59:59.999 --datetime""")
@click.argument("value")
@click.option("--datetime", "with_time", is_flag=True, help="Format as yyyy-MM-dd'T'HH:mm:ss.")
@click.pass_obj
def format_cmd(app: AppContext, value: str, with_time: bool) -> None:
    """Format an ISO 8601 VALUE with the fixed pattern."""
    from commonkit.services.dates import DateService

    app.emit(DateService(app.settings).format(value, with_time=with_time))
