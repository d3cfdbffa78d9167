"""``apkprov fingerprint <apk>``: print the catalog signature of an APK.

Exit Codes:
    0 - Fingerprint printed.
    1 - The archive is not signed or its certificate does not decode.
    2 - The archive cannot be read.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from apkprovenance.config import Settings
from apkprovenance.exceptions import (
    ArchiveReadError,
    CertificateEncodingError,
    CertificateMissingError,
)
from apkprovenance.inspector.inspector import read_signature


@click.command("fingerprint")
@click.argument("apk_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)
@click.pass_obj
def fingerprint_command(settings: Settings | None, apk_path: Path, output_format: str) -> None:
    """Print the signing-certificate fingerprint of APK_PATH.

    The fingerprint is the MD5 of the hex-encoded signer certificate, the
    value catalogs publish as ``sig``.
    """
    settings = settings if settings is not None else Settings()
    try:
        sig = read_signature(apk_path, manifest_entry=settings.manifest_entry)
    except (CertificateMissingError, CertificateEncodingError) as exc:
        _fail(output_format, str(exc), 1)
    except ArchiveReadError as exc:
        _fail(output_format, str(exc), 2)

    if output_format == "json":
        click.echo(json.dumps({"path": str(apk_path), "sig": sig}, indent=2))
    else:
        click.echo(sig)


def _fail(output_format: str, message: str, code: int) -> None:
    if output_format == "json":
        click.echo(json.dumps({"error": message}))
    else:
        click.echo(f"Error: {message}")
    sys.exit(code)
