import click

from grubdash.infrastructure.bootstrap import create_app
from grubdash.infrastructure.cli.dish_commands import (
    dishes_create,
    dishes_list,
    dishes_read,
    dishes_update,
)
from grubdash.infrastructure.cli.order_commands import (
    orders_create,
    orders_delete,
    orders_list,
    orders_read,
    orders_update,
)
from grubdash.infrastructure.cli.replay_commands import replay
from grubdash.infrastructure.config import get_settings
from grubdash.infrastructure.observability import setup_logging
from grubdash.infrastructure.persistence.json_snapshot import SnapshotError


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """GrubDash: dishes and orders"""
    if ctx.obj is None:
        settings = get_settings()
        setup_logging(settings.log_level, settings.log_format)
        try:
            ctx.obj = create_app(settings)
        except SnapshotError as exc:
            raise click.ClickException(str(exc))


@cli.group()
def dishes() -> None:
    """Manage dishes."""


@cli.group()
def orders() -> None:
    """Manage orders."""


# Register subcommands
dishes.add_command(dishes_create)
dishes.add_command(dishes_list)
dishes.add_command(dishes_read)
dishes.add_command(dishes_update)
orders.add_command(orders_create)
orders.add_command(orders_delete)
orders.add_command(orders_list)
orders.add_command(orders_read)
orders.add_command(orders_update)
cli.add_command(replay)
