"""Weather forecast demo CLI application.

This module provides the command-line interface for the forecast gateway
and viewer, including serving the gateway, rendering a viewer page and
configuration utilities.
"""

from __future__ import annotations

import logging
import sys
import webbrowser
from pathlib import Path
from typing import Final, Optional

import typer
import uvicorn

from metforecast.constants import Language
from metforecast.gateway import create_app
from metforecast.settings import UserSettings
from metforecast.viewer import ForecastViewer

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="Weather forecast gateway and viewer", add_completion=False)
config_app = typer.Typer(help="Config helpers")
app.add_typer(config_app, name="config")

logger: Final = logging.getLogger(__name__)

CONFIG_OPTION = typer.Option(None, "--config", "-c", exists=True, dir_okay=False)
DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _load_settings(config: Optional[Path]) -> UserSettings:
    try:
        return UserSettings.load(config)
    except (RuntimeError, FileNotFoundError) as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


@app.command()
def serve(
    config: Optional[Path] = CONFIG_OPTION,
    host: Optional[str] = typer.Option(None, help="Override the bind address"),
    port: Optional[int] = typer.Option(None, help="Override the listening port"),
    debug: bool = DEBUG_OPTION,
) -> None:
    """Run the forecast gateway."""
    _configure_logging(debug)
    settings = _load_settings(config)
    bind_host = host or settings.host
    bind_port = port or settings.port
    logger.info("Server is running on port %s", bind_port)
    uvicorn.run(create_app(settings), host=bind_host, port=bind_port)


@app.command()
def show(
    config: Optional[Path] = CONFIG_OPTION,
    place: Optional[str] = typer.Option(None, "--place", help="Fetch by place name"),
    lat: Optional[float] = typer.Option(None, "--lat", help="Staged latitude"),
    lon: Optional[float] = typer.Option(None, "--lon", help="Staged longitude"),
    lang: Optional[Language] = typer.Option(None, "--lang", help="Display language"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output HTML file"),
    open_page: bool = typer.Option(False, "--open", help="Open the page in a browser"),
    debug: bool = DEBUG_OPTION,
) -> None:
    """Run one viewer session and write the rendered page."""
    _configure_logging(debug)
    settings = _load_settings(config)
    viewer = ForecastViewer(settings)
    viewer.mount()

    if place is not None:
        viewer.set_search_text(place)
        viewer.fetch_by_place()
    elif lat is not None or lon is not None:
        viewer.stage_coordinates(
            lat if lat is not None else viewer.state.pending.lat,
            lon if lon is not None else viewer.state.pending.lon,
        )
        viewer.fetch_by_coordinates()

    if lang is not None and lang is not viewer.state.language:
        viewer.toggle_language()

    path = viewer.write_page(output)
    coord = viewer.state.coordinate
    typer.echo(f"{len(viewer.state.entries)} forecast entries for {coord.lat}, {coord.lon}")
    typer.echo(f"Page written to {path}")

    if open_page:
        webbrowser.open_new_tab(path.resolve().as_uri())


@app.command()
def docs(config: Optional[Path] = CONFIG_OPTION) -> None:
    """Open the gateway's interactive API documentation."""
    viewer = ForecastViewer(_load_settings(config))
    url = viewer.open_documentation()
    typer.echo(f"Opened {url}")


# ───────────────────────── config sub-commands ───────────────────────────────
@config_app.command("validate")
def validate_config(file: Path):
    """Validate a YAML config file against the schema."""
    try:
        UserSettings.load(file)
        typer.echo("✅ Config valid")
    except RuntimeError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


# ───────────────────────── module entrypoint ────────────────────────────────
if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)
