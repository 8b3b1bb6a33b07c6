"""CLI entrypoint for schematic format inspection."""

from __future__ import annotations

from pathlib import Path

import typer
from rich import print

from schematic_formats.config import settings
from schematic_formats.detection import candidates_for_path
from schematic_formats.errors import SchematicLoadError
from schematic_formats.loader import FileSchematicLoader
from schematic_formats.registry import get_registry
from schematic_formats.telemetry import configure_logging

app = typer.Typer(help="Inspect Minecraft schematic files")


@app.callback()
def main(log_level: str = typer.Option(None, help="Override SCHEMATIC_FORMATS_LOG_LEVEL")) -> None:
    try:
        configure_logging(log_level or settings.log_level)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--log-level") from exc


@app.command()
def formats() -> None:
    """List known formats in detection priority order."""
    print(
        [
            {
                "priority": index,
                "display_name": descriptor.display_name,
                "extension": descriptor.extension,
                "has_name": descriptor.has_name,
            }
            for index, descriptor in enumerate(get_registry())
        ]
    )


@app.command()
def detect(path: Path = typer.Argument(..., help="Schematic file to inspect")) -> None:
    """Detect the format of a schematic file and print a summary."""
    report: dict = {"path": str(path), "candidates": [c.display_name for c in candidates_for_path(path)]}
    try:
        report["summary"] = FileSchematicLoader().load(path)
    except (FileNotFoundError, SchematicLoadError) as exc:
        report["error"] = str(exc)
        print(report)
        raise typer.Exit(code=1)

    report["format"] = report["summary"]["format"]
    print(report)


if __name__ == "__main__":
    app()
