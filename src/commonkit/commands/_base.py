"""Click base classes with an ``--examples`` flag.

``--help`` stays short; ``--examples`` prints copy-pasteable invocations and
exits.  Groups built with :class:`CkGroup` create :class:`CkCommand`
subcommands, so ``@group.command(examples=...)`` works without ``cls=``.
"""

from __future__ import annotations

from typing import Any

import click


class _ExamplesMixin:
    """Adds an eager ``--examples`` option when *examples* text is given."""

    params: list[click.Parameter]

    def _init_examples(self, examples: str | None) -> None:
        self.examples = examples
        if not examples:
            return

        def show(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
            if value:
                click.echo(f"Examples for '{ctx.command_path}':\n")
                click.echo(examples)
                ctx.exit(0)

        self.params.append(
            click.Option(
                ["--examples"],
                is_flag=True,
                expose_value=False,
                is_eager=True,
                callback=show,
                help="Show usage examples.",
            )
        )


class CkCommand(_ExamplesMixin, click.Command):
    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)


class CkGroup(_ExamplesMixin, click.Group):
    command_class = CkCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)
