"""Helpers shared by the CLI commands."""

from __future__ import annotations

import json

import click

from grubdash.application.pipeline import Response
from grubdash.infrastructure.bootstrap import GrubDashApp


def parse_body(raw: str) -> dict:
    """Parse ``--data`` JSON and wrap it as a request body ``{"data": ...}``."""
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"Invalid JSON: {exc.msg}", param_hint="--data")
    if not isinstance(payload, dict):
        raise click.BadParameter("Expected a JSON object", param_hint="--data")
    return {"data": payload}


def emit(app: GrubDashApp, response: Response, mutating: bool = False) -> None:
    """Print a successful response body or fail the command with its message."""
    if not response.is_success:
        message = (response.body or {}).get("message", "Request failed")
        raise click.ClickException(f"{message} (status {response.status_code})")

    if mutating:
        app.save()

    if response.body is not None:
        click.echo(json.dumps(response.body["data"], indent=2))
