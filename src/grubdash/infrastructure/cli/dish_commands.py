"""CLI commands for the dishes resource."""

from __future__ import annotations

import click

from grubdash.infrastructure.bootstrap import GrubDashApp
from grubdash.infrastructure.cli.output import emit, parse_body


@click.command("list")
@click.pass_obj
def dishes_list(app: GrubDashApp) -> None:
    """List every dish."""
    emit(app, app.handle("dishes", "list"))


@click.command("create")
@click.option("--data", "raw", required=True, help="Dish fields as a JSON object.")
@click.pass_obj
def dishes_create(app: GrubDashApp, raw: str) -> None:
    """Create a new dish."""
    emit(app, app.handle("dishes", "create", body=parse_body(raw)), mutating=True)


@click.command("read")
@click.option("--id", "dish_id", required=True, help="Dish ID.")
@click.pass_obj
def dishes_read(app: GrubDashApp, dish_id: str) -> None:
    """Show a single dish."""
    emit(app, app.handle("dishes", "read", route_id=dish_id))


@click.command("update")
@click.option("--id", "dish_id", required=True, help="Dish ID.")
@click.option("--data", "raw", required=True, help="Dish fields as a JSON object.")
@click.pass_obj
def dishes_update(app: GrubDashApp, dish_id: str, raw: str) -> None:
    """Replace the fields of an existing dish."""
    response = app.handle("dishes", "update", route_id=dish_id, body=parse_body(raw))
    emit(app, response, mutating=True)
