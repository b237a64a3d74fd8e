"""Dispatching of RTSP requests to a controller."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum

from smolrtsp.context import Context
from smolrtsp.messages import Request
from smolrtsp.protocol import Method, method_eq
from smolrtsp.transport import Writer


class ControlFlow(Enum):
    """Whether request handling goes on after :meth:`Controller.before`."""

    CONTINUE = "continue"
    BREAK = "break"


class Controller(ABC):
    """Handles the requests of one RTSP connection."""

    @abstractmethod
    def options(self, ctx: Context, req: Request) -> None:
        """Handle ``OPTIONS``."""

    @abstractmethod
    def describe(self, ctx: Context, req: Request) -> None:
        """Handle ``DESCRIBE``."""

    @abstractmethod
    def setup(self, ctx: Context, req: Request) -> None:
        """Handle ``SETUP``."""

    @abstractmethod
    def play(self, ctx: Context, req: Request) -> None:
        """Handle ``PLAY``."""

    @abstractmethod
    def teardown(self, ctx: Context, req: Request) -> None:
        """Handle ``TEARDOWN``."""

    @abstractmethod
    def unknown(self, ctx: Context, req: Request) -> None:
        """Handle any other method."""

    @abstractmethod
    def before(self, ctx: Context, req: Request) -> ControlFlow:
        """Run before the method handler; ``BREAK`` skips the handler."""

    @abstractmethod
    def after(self, ret: int, ctx: Context, req: Request) -> None:
        """Run last; ``ret`` is the number of bytes of the response written."""


def dispatch(conn: Writer, controller: Controller, req: Request) -> int:
    """Route ``req`` to the matching handler of ``controller``.

    Returns the number of bytes of the response written, or 0 if none was.
    """
    ctx = Context(conn, req.cseq)

    if controller.before(ctx, req) is not ControlFlow.BREAK:
        handlers = (
            (Method.OPTIONS, controller.options),
            (Method.DESCRIBE, controller.describe),
            (Method.SETUP, controller.setup),
            (Method.PLAY, controller.play),
            (Method.TEARDOWN, controller.teardown),
        )
        method = req.start_line.method
        handler = next(
            (h for m, h in handlers if method_eq(method, m)), controller.unknown
        )
        handler(ctx, req)

    controller.after(ctx.ret, ctx, req)
    return ctx.ret