"""Command: validate Thai ID numbers."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from thaiid.commands._base import ThaiIdCommand

if TYPE_CHECKING:
    from thaiid.commands._context import AppContext


@click.command(
    cls=ThaiIdCommand,
    examples="""\
  thaiid validate 1000000000009
  thaiid validate 1000000000009 1234567890121
  thaiid validate --lenient 1-0000-00000-00-9
  thaiid --json validate 1234567890121""",
)
@click.argument("candidates", nargs=-1, required=True)
@click.option("--lenient", is_flag=True, help="Ignore spaces and '-' separators.")
@click.pass_obj
def validate(app: AppContext, candidates: tuple[str, ...], lenient: bool) -> None:
    """Check each CANDIDATE; exit 1 if any is invalid."""
    from thaiid.services.identity import IdentityService

    app.emit(IdentityService(app.settings).validate(candidates, lenient=lenient))
