"""Request pipeline: an ordered list of steps followed by a terminal handler.

Each step inspects the request (and the per-request context filled in by
earlier steps) and returns either ``PROCEED`` or ``Halt(error)``.  The
runner stops at the first ``Halt`` and renders its error; when every step
proceeds, the terminal handler runs and produces the response.  Steps run
before the handler touches a store, so a halted request never leaves a
partial mutation behind.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Sequence

from grubdash.domain.exceptions import DomainException, InternalError
from grubdash.domain.model.dish import RecordId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Request:
    """An incoming request: the raw body and the route's resource id."""

    body: Any = None
    route_id: RecordId | None = None

    @property
    def data(self) -> dict:
        """The ``data`` object of the body; missing or malformed reads as ``{}``."""
        if not isinstance(self.body, dict):
            return {}
        data = self.body.get("data")
        return data if isinstance(data, dict) else {}


@dataclass
class RequestContext:
    """Per-request transient state passed from steps to the handler."""

    request: Request
    locals: dict[str, Any] = field(default_factory=dict)

    @property
    def data(self) -> dict:
        return self.request.data


@dataclass(frozen=True)
class Response:
    status_code: int
    body: dict | None = None

    @staticmethod
    def ok(data: Any) -> Response:
        return Response(200, {"data": data})

    @staticmethod
    def created(data: Any) -> Response:
        return Response(201, {"data": data})

    @staticmethod
    def no_content() -> Response:
        return Response(204)

    @staticmethod
    def from_error(error: DomainException) -> Response:
        return Response(error.status_code, error.to_body())

    @property
    def is_success(self) -> bool:
        return self.status_code < 400


# --- Step outcomes ------------------------------------------------------------


@dataclass(frozen=True)
class Proceed:
    """Hand control to the next step."""


@dataclass(frozen=True)
class Halt:
    """Stop the chain and answer with ``error``."""

    error: DomainException


Outcome = Proceed | Halt
PROCEED = Proceed()

Step = Callable[[RequestContext], Outcome]
Handler = Callable[[RequestContext], Response]


class Pipeline:

    def __init__(self, name: str, steps: Sequence[Step], handler: Handler) -> None:
        self.name = name
        self._steps = tuple(steps)
        self._handler = handler

    @property
    def steps(self) -> tuple[Step, ...]:
        return self._steps

    def run(self, request: Request) -> Response:
        ctx = RequestContext(request=request)
        try:
            for step in self._steps:
                outcome = step(ctx)
                if isinstance(outcome, Halt):
                    logger.info(
                        "%s halted: %s",
                        self.name,
                        outcome.error.message,
                        extra={"action": self.name, "status_code": outcome.error.status_code},
                    )
                    return Response.from_error(outcome.error)
            return self._handler(ctx)
        except DomainException as exc:
            logger.info("%s failed: %s", self.name, exc.message)
            return Response.from_error(exc)
        except Exception:
            logger.exception("Unhandled error in %s", self.name)
            return Response.from_error(InternalError())
