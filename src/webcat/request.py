from __future__ import annotations

import datetime
import logging
from dataclasses import dataclass, field, replace
from urllib.parse import urlsplit

from .errors import ConnectionFailed, InvalidConfiguration
from .http.httpx import HTTPX
from .http.types import HttpImplementation, InvalidURL, Request, RequestFailed
from .models import RequestMethod, Response
from .types import Timeout

logger = logging.getLogger(__name__)

SCHEMES = ("http://", "https://")


@dataclass(frozen=True)
class RequestBuilder:
    """
    Sets up and executes single, blocking HTTP requests.

    Targets without an ``http://`` or ``https://`` prefix are sent over plain
    HTTP, so ``example.com`` is requested as ``http://example.com`` and never
    as HTTPS. Pass the scheme explicitly when TLS is required.
    """

    timeout: Timeout | None = None
    http: HttpImplementation = field(default_factory=HTTPX)

    def __post_init__(self) -> None:
        timeout = self.timeout
        if isinstance(timeout, datetime.timedelta):
            timeout = timeout.total_seconds()
            object.__setattr__(self, "timeout", timeout)
        if timeout is None:
            return
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
            raise ValueError(f"timeout must be a number of seconds, got {timeout!r}")
        if timeout < 0:
            raise ValueError("timeout must not be negative")

    def with_timeout(self, duration: Timeout) -> RequestBuilder:
        return replace(self, timeout=duration)

    def send(self, method: RequestMethod, target: str) -> Response:
        url = parse_url(target)
        logger.debug("sending %s %s (timeout=%s)", method.value, url, self.timeout)
        try:
            response = self.http(Request(method.value, url, self.timeout))
        except InvalidURL as exc:
            raise InvalidConfiguration(str(exc.inner)) from exc.inner
        except RequestFailed as exc:
            raise ConnectionFailed(str(exc.inner)) from exc.inner
        logger.debug("received %s for %s %s", response.status, method.value, url)
        return Response.from_http(response)


def parse_url(target: str) -> str:
    if not target.startswith(SCHEMES):
        target = f"http://{target}"
    try:
        parts = urlsplit(target)
        # .port validates the port and raises ValueError when it is invalid
        parts.port
    except ValueError as exc:
        raise InvalidConfiguration(str(exc)) from exc
    if not parts.hostname:
        raise InvalidConfiguration("empty host")
    return target
