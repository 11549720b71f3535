"""Command group: test fixture payloads."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from thaiid.commands._base import ThaiIdGroup, resolve_seed

if TYPE_CHECKING:
    from thaiid.commands._context import AppContext


@click.group(
    cls=ThaiIdGroup,
    examples="""\
  thaiid fixture customer
  thaiid --json fixture customer -n 3 --clock""",
)
def fixture() -> None:
    """Build API request payloads carrying valid Thai IDs."""


@fixture.command(
    examples="""\
  thaiid fixture customer
  thaiid fixture customer -n 5 --seed 42
  thaiid --json fixture customer --clock""",
)
@click.option("-n", "--count", type=int, default=1, help="Number of payloads.")
@click.option("--seed", type=int, default=None, help="Derive idcards from SEED + index.")
@click.option("--clock", is_flag=True, help="Seed from the current time in milliseconds.")
@click.pass_obj
def customer(app: AppContext, count: int, seed: int | None, clock: bool) -> None:
    """Customer payloads for POST /api/customers."""
    from thaiid.services.fixtures import FixtureService

    seed = resolve_seed(seed, clock)
    app.emit(FixtureService(app.settings).customers(count, seed=seed))
