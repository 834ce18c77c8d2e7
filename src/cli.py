#!/usr/bin/env python3
"""Command Line Interface for the RealtyAnalytics API.

Usage:
    cd src
    python cli.py server       # Start API server
    python cli.py info         # Show configuration
    python cli.py seed-data    # Print the demonstration seed rows
"""
from __future__ import annotations

import json
import sys

import typer
import uvicorn

from core.config import get_settings
from core.logging_config import get_logger, setup_logging

LOGGER = get_logger(__name__)
SETTINGS = get_settings()

app = typer.Typer(help="RealtyAnalytics API CLI")


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
) -> None:
    """RealtyAnalytics - real-estate market intelligence dashboard backend."""
    log_level = "DEBUG" if verbose else SETTINGS.log_level
    # stdout carries command output (seed-data prints JSON)
    setup_logging(level=log_level, json_format=SETTINGS.log_format == "json", stream=sys.stderr)


@app.command("server")
def run_server(
    host: str = typer.Option(SETTINGS.api_host, help="Host to bind to"),
    port: int = typer.Option(SETTINGS.api_port, help="Port to bind to"),
    reload: bool = typer.Option(False, help="Enable auto-reload for development"),
) -> None:
    """Start the API server."""
    typer.echo(f"Starting API server on {host}:{port}...")
    uvicorn.run("api.app:app", host=host, port=port, reload=reload)


@app.command("info")
def show_info() -> None:
    """Show application configuration info."""
    typer.echo("RealtyAnalytics API Configuration:")
    typer.echo(f"  Environment: {SETTINGS.environment}")
    typer.echo(f"  Log Level: {SETTINGS.log_level}")
    typer.echo(f"  Log Format: {SETTINGS.log_format}")
    typer.echo(f"  Bind: {SETTINGS.api_host}:{SETTINGS.api_port}")
    typer.echo(f"  Allowed Origins: {', '.join(SETTINGS.get_allowed_origins())}")
    typer.echo(f"  Seed Demo Data: {SETTINGS.seed_demo_data}")


@app.command("seed-data")
def show_seed_data() -> None:
    """Print the users and market data a fresh store starts with."""
    from core.storage import EntityStore

    store = EntityStore(seed=True)
    typer.echo(json.dumps(
        {
            "users": [u.to_dict() for u in store.users.get_all()],
            "marketData": [m.to_dict() for m in store.market_data.get_all()],
        },
        indent=2,
    ))


if __name__ == "__main__":
    app()
