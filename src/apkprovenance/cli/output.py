"""Rich output formatting helpers for the apk-provenance CLI."""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from apkprovenance.core.entities import App

console = Console()


def _tags(tags: list[str] | None) -> str:
    return ", ".join(tags) if tags else "-"


def print_installed_app(app: App) -> None:
    """Print an inspected package and its installed release."""
    header = Text.assemble(
        ("Package: ", "bold"), (app.id, ""),
        ("  Name: ", "bold"), (app.name, ""),
    )
    console.print(Panel(header, title="Installed Package"))
    console.print(f"  Summary: {app.summary}")

    apk = app.installed_apk
    if apk is None:
        console.print("[dim]No installed release.[/dim]")
        return

    table = Table(title="Installed Release", show_header=True, header_style="bold")
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("Version", f"{apk.version} ({apk.vercode})")
    table.add_row("Signature", Text(apk.sig, style="cyan"))
    table.add_row(f"Hash ({apk.hash_type})", apk.hash)
    table.add_row("Min SDK", str(apk.min_sdk_version))
    table.add_row("Permissions", _tags(apk.permissions))
    table.add_row("Features", _tags(apk.features))
    table.add_row("APK name", apk.apk_name)
    table.add_row("File", str(apk.installed_file))
    console.print(table)


def print_updates(apps: list[App]) -> None:
    """Print a table of apps with available updates."""
    if not apps:
        console.print("[green]All apps are up to date.[/green]")
        return

    table = Table(title="Available Updates", show_header=True, header_style="bold")
    table.add_column("App", style="bold")
    table.add_column("Package", style="dim")
    table.add_column("Installed", justify="right")
    table.add_column("Suggested", justify="right")
    for app in apps:
        suggested = app.suggested_version or "-"
        table.add_row(
            app.name,
            app.id,
            f"{app.installed_version_name or '-'} ({app.installed_version_code})",
            f"{suggested} ({app.suggested_vercode})",
        )
    console.print(table)
    console.print(f"[bold]{len(apps)}[/bold] update(s) available")
