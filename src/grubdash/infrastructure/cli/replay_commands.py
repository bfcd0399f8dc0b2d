"""Replay a batch of requests against one set of stores."""

from __future__ import annotations

import json

import click

from grubdash.infrastructure.bootstrap import GrubDashApp

MUTATING_ACTIONS = frozenset({"create", "update", "delete"})


@click.command("replay")
@click.argument("requests", type=click.File("r"))
@click.pass_obj
def replay(app: GrubDashApp, requests) -> None:
    """Run JSON-lines requests in order, printing one response per line.

    Each line is an object with ``resource``, ``action`` and optionally
    ``id`` and ``body``.
    """
    mutated = False
    for line_no, line in enumerate(requests, start=1):
        line = line.strip()
        if not line:
            continue
        try:
            request = json.loads(line)
        except json.JSONDecodeError:
            request = None
        if not _is_well_formed(request):
            click.echo(json.dumps({
                "status": 400,
                "body": {"message": f"Malformed request on line {line_no}"},
            }))
            continue

        response = app.handle(
            request["resource"],
            request["action"],
            route_id=request.get("id"),
            body=request.get("body"),
        )
        if response.is_success and request["action"] in MUTATING_ACTIONS:
            mutated = True
        click.echo(json.dumps({"status": response.status_code, "body": response.body}))

    if mutated:
        app.save()


def _is_well_formed(request) -> bool:
    return (
        isinstance(request, dict)
        and isinstance(request.get("resource"), str)
        and isinstance(request.get("action"), str)
    )
