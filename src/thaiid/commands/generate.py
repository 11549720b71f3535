"""Command: generate valid Thai ID numbers."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from thaiid.commands._base import ThaiIdCommand, resolve_seed

if TYPE_CHECKING:
    from thaiid.commands._context import AppContext


@click.command(
    cls=ThaiIdCommand,
    examples="""\
  thaiid generate
  thaiid generate -n 10
  thaiid generate --seed 42
  thaiid generate --clock -n 5
  thaiid generate --seed 1700000000000 -n 3 --stride 1000
  thaiid -q generate -n 100 > ids.txt""",
)
@click.option("-n", "--count", type=int, default=None, help="Number of IDs (default from config).")
@click.option("--seed", type=int, default=None, help="Derive IDs deterministically from SEED.")
@click.option("--clock", is_flag=True, help="Seed from the current time in milliseconds.")
@click.option("--stride", type=int, default=None, help="Seed distance between batch items.")
@click.pass_obj
def generate(
    app: AppContext,
    count: int | None,
    seed: int | None,
    clock: bool,
    stride: int | None,
) -> None:
    """Generate valid Thai ID numbers, random or seeded."""
    from thaiid.services.identity import IdentityService

    seed = resolve_seed(seed, clock)
    app.emit(IdentityService(app.settings).generate(count, seed=seed, stride=stride))
