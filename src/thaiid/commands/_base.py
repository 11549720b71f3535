"""Click base classes with --examples support.

``--examples`` prints usage examples and exits, keeping ``--help`` short.
"""

from __future__ import annotations

from typing import Any

import click


def _add_examples_option(cmd: click.Command | click.Group, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command or group."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class ThaiIdCommand(click.Command):
    """Command that accepts an ``examples`` keyword."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class ThaiIdGroup(click.Group):
    """Group whose subcommands default to :class:`ThaiIdCommand`."""

    command_class = ThaiIdCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


def resolve_seed(seed: int | None, clock: bool) -> int | None:
    """Pick the seed for a generating command.

    ``--clock`` seeds from the current time in milliseconds; combining it
    with ``--seed`` is a usage error.
    """
    if clock and seed is not None:
        raise click.UsageError("--seed and --clock are mutually exclusive.")
    if clock:
        from thaiid.services.base import BaseService

        return BaseService.seed_from_clock()
    return seed
