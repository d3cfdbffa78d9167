"""apk-provenance CLI: signing fingerprints and update checks.

Entry point for the ``apkprov`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    fingerprint  Print the catalog ``sig`` of an APK file.
    inspect      Snapshot an installed package from a package index.
    updates      List apps from catalog rows that have wanted updates.

Usage::

    apkprov fingerprint ./org.example.notes.apk
    apkprov inspect org.example.notes --index installed.yaml
    apkprov updates apps.json --config settings.yaml
"""

from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler

from apkprovenance import __version__
from apkprovenance.cli.fingerprint_cmd import fingerprint_command
from apkprovenance.cli.inspect_cmd import inspect_command
from apkprovenance.cli.updates_cmd import updates_command
from apkprovenance.config import Settings
from apkprovenance.exceptions import ConfigError


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--config", "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    envvar="APKPROV_CONFIG",
    default=None,
    help="YAML settings file (env: APKPROV_CONFIG).",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, verbose: bool) -> None:
    """apk-provenance: match installed packages to catalog releases.

    Computes catalog-compatible signing-certificate fingerprints, snapshots
    installed packages, and decides which apps have updates worth
    announcing.
    """
    _configure_logging(verbose)
    try:
        ctx.obj = Settings.load(config_path)
    except ConfigError as exc:
        raise click.UsageError(str(exc)) from exc


cli.add_command(fingerprint_command)
cli.add_command(inspect_command)
cli.add_command(updates_command)
