"""Logging setup and the per-request access log."""
import logging
import time
from typing import Callable

from starlette.types import ASGIApp, Message, Receive, Scope, Send

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

access_logger = logging.getLogger("readsync.access")

# (method, path, status, bytes written, elapsed seconds)
AccessObserver = Callable[[str, str, int, int, float], None]


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


def log_access(method: str, path: str, status: int, size: int, elapsed: float) -> None:
    access_logger.info("%s %s %d %d %.3fms", method, path, status, size, elapsed * 1000)


class AccessLogMiddleware:
    """Record status code and response body size of every HTTP request.

    The numbers are passed to ``observer`` once the response is complete, so
    the route handlers themselves never deal with request logging.
    """

    def __init__(self, app: ASGIApp, observer: AccessObserver = log_access):
        self.app = app
        self.observer = observer

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        start = time.perf_counter()
        status = 200
        size = 0

        async def send_wrapper(message: Message) -> None:
            nonlocal status, size
            if message["type"] == "http.response.start":
                status = message["status"]
            elif message["type"] == "http.response.body":
                size += len(message.get("body", b""))
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        except Exception:
            # rendered as 500 by the outer error middleware
            status = 500
            raise
        finally:
            self.observer(scope["method"], scope["path"], status, size, time.perf_counter() - start)
