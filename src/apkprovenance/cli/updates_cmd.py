"""``apkprov updates <rows.json>``: list apps with updates worth announcing.

``ROWS`` is a JSON array of catalog rows, one object per app, using the
app-table column names (``id``, ``name``, ``suggestedVercode``,
``installedVersionCode``, ``ignoreThisUpdate``...). Rows are hydrated,
passed through the app filter and checked with the update policy.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click

from apkprovenance.config import Settings
from apkprovenance.core.policy import AppFilter, apps_with_updates, has_updates, sort_key
from apkprovenance.core.rows import MappingRow, hydrate_apps

logger = logging.getLogger(__name__)


@click.command("updates")
@click.argument("rows_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--all", "show_all",
    is_flag=True,
    help="Include ignored and filtered updates.",
)
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)
@click.pass_obj
def updates_command(
    settings: Settings | None, rows_path: Path, show_all: bool, output_format: str
) -> None:
    """List apps in ROWS_PATH that have updates available."""
    try:
        data = json.loads(rows_path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise click.BadParameter(f"Invalid JSON: {exc}", param_hint="ROWS_PATH") from exc
    if not isinstance(data, list) or not all(isinstance(r, dict) for r in data):
        raise click.BadParameter("Expected a JSON array of objects", param_hint="ROWS_PATH")

    try:
        apps = list(hydrate_apps(MappingRow(r) for r in data))
    except (TypeError, ValueError) as exc:
        raise click.BadParameter(f"Invalid row value: {exc}", param_hint="ROWS_PATH") from exc
    logger.debug("Hydrated %d apps from %s", len(apps), rows_path)

    if show_all:
        candidates = sorted((a for a in apps if has_updates(a)), key=sort_key)
    else:
        candidates = apps_with_updates(apps, AppFilter(settings))

    if output_format == "json":
        click.echo(json.dumps([
            {
                "id": a.id,
                "name": a.name,
                "installed_version_code": a.installed_version_code,
                "suggested_vercode": a.suggested_vercode,
                "suggested_version": a.suggested_version,
            }
            for a in candidates
        ], indent=2))
    else:
        from apkprovenance.cli.output import print_updates
        print_updates(candidates)
