"""Command: compute the check digit for a 12-digit body."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from thaiid.commands._base import ThaiIdCommand

if TYPE_CHECKING:
    from thaiid.commands._context import AppContext


@click.command(
    cls=ThaiIdCommand,
    examples="""\
  thaiid checksum 123456789012
  thaiid -q checksum 100000000000""",
)
@click.argument("body")
@click.pass_obj
def checksum(app: AppContext, body: str) -> None:
    """Print the check digit and full ID for BODY."""
    from thaiid.services.identity import IdentityService

    app.emit(IdentityService(app.settings).checksum(body))
