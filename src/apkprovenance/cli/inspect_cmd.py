"""``apkprov inspect <package>``: snapshot an installed package.

Reads installed-package metadata from a package index file, fingerprints
the installed artifact and prints the resulting app and release.

Exit Codes:
    0 - Package inspected and the snapshot is valid.
    1 - The artifact or its signature could not be read, or the snapshot
        is not valid.
    2 - The package is unknown or the index is malformed.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from apkprovenance.config import Settings
from apkprovenance.core.policy import is_valid
from apkprovenance.core.rows import apk_to_row, app_to_row
from apkprovenance.exceptions import (
    ArchiveReadError,
    CertificateEncodingError,
    CertificateMissingError,
    PackageIndexError,
    PackageNotFoundError,
)
from apkprovenance.inspector.index_service import IndexPackageService
from apkprovenance.inspector.inspector import InstalledPackageInspector


@click.command("inspect")
@click.argument("package")
@click.option(
    "--index", "index_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    required=True,
    help="YAML or JSON package index describing installed packages.",
)
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)
@click.pass_obj
def inspect_command(
    settings: Settings | None, package: str, index_path: Path, output_format: str
) -> None:
    """Inspect the installed PACKAGE described in the package index."""
    try:
        service = IndexPackageService.from_file(index_path)
        app = InstalledPackageInspector(service, settings=settings).inspect(package)
    except (PackageNotFoundError, PackageIndexError) as exc:
        _fail(output_format, str(exc), 2)
    except (ArchiveReadError, CertificateMissingError, CertificateEncodingError) as exc:
        _fail(output_format, str(exc), 1)

    valid = is_valid(app)
    if output_format == "json":
        payload = {
            "app": app_to_row(app),
            "installed_apk": apk_to_row(app.installed_apk),
            "valid": valid,
        }
        click.echo(json.dumps(payload, indent=2))
    else:
        from apkprovenance.cli.output import print_installed_app
        print_installed_app(app)

    sys.exit(0 if valid else 1)


def _fail(output_format: str, message: str, code: int) -> None:
    if output_format == "json":
        click.echo(json.dumps({"error": message}))
    else:
        click.echo(f"Error: {message}")
    sys.exit(code)
