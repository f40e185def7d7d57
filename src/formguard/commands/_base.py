"""Click classes adding an on-demand ``--examples`` flag.

``--help`` stays short; ``--examples`` prints the usage samples passed as
``examples=`` to the decorator and exits.
"""

from __future__ import annotations

from typing import Any

import click


class _ExamplesMixin:
    """Adds an eager ``--examples`` option when ``examples`` text is given."""

    params: list[click.Parameter]

    def _init_examples(self, examples: str | None) -> None:
        self.examples = examples
        if not examples:
            return

        def _show(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
            if value and not ctx.resilient_parsing:
                click.echo(f"Examples for '{ctx.command_path}':\n\n{examples}")
                ctx.exit(0)

        self.params.append(
            click.Option(
                ["--examples"],
                is_flag=True,
                is_eager=True,
                expose_value=False,
                callback=_show,
                help="Show usage examples and exit.",
            )
        )


class FormguardCommand(_ExamplesMixin, click.Command):
    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)


class FormguardGroup(_ExamplesMixin, click.Group):
    """Group whose subcommands are FormguardCommand by default."""

    command_class = FormguardCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)
