"""CLI commands for the orders resource."""

from __future__ import annotations

import click

from grubdash.infrastructure.bootstrap import GrubDashApp
from grubdash.infrastructure.cli.output import emit, parse_body


@click.command("list")
@click.pass_obj
def orders_list(app: GrubDashApp) -> None:
    """List every order."""
    emit(app, app.handle("orders", "list"))


@click.command("create")
@click.option("--data", "raw", required=True, help="Order fields as a JSON object.")
@click.pass_obj
def orders_create(app: GrubDashApp, raw: str) -> None:
    """Place a new order."""
    emit(app, app.handle("orders", "create", body=parse_body(raw)), mutating=True)


@click.command("read")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.pass_obj
def orders_read(app: GrubDashApp, order_id: str) -> None:
    """Show a single order."""
    emit(app, app.handle("orders", "read", route_id=order_id))


@click.command("update")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.option("--data", "raw", required=True, help="Order fields as a JSON object.")
@click.pass_obj
def orders_update(app: GrubDashApp, order_id: str, raw: str) -> None:
    """Replace an order (including its status)."""
    response = app.handle("orders", "update", route_id=order_id, body=parse_body(raw))
    emit(app, response, mutating=True)


@click.command("delete")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.pass_obj
def orders_delete(app: GrubDashApp, order_id: str) -> None:
    """Delete a pending order."""
    emit(app, app.handle("orders", "delete", route_id=order_id), mutating=True)
    click.echo(f"Order #{order_id} deleted.")
