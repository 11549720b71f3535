"""Subcommand modules for thaiid.

Provides register_commands(), which imports command modules lazily so
``thaiid --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the fixture group and the standalone commands on *cli*."""
    # --- Groups ---
    from thaiid.commands.fixture import fixture

    cli.add_command(fixture)

    # --- Standalone commands ---
    from thaiid.commands.checksum import checksum
    from thaiid.commands.generate import generate
    from thaiid.commands.validate import validate

    cli.add_command(generate)
    cli.add_command(validate)
    cli.add_command(checksum)
