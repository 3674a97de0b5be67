import time
from dataclasses import dataclass, field
from typing import Any

import httpx

from webcat.types import Seconds

from .types import InvalidURL, Request, RequestFailed, Response


@dataclass(frozen=True, eq=False)
class HTTPX:
    """
    Blocking transport backed by httpx. A new client is created, used for a
    single request and closed again on every call, so no connection is ever
    shared between two sends.

    A request timeout is a deadline for the whole exchange, from connecting
    until the last body byte. httpx applies it to every connect, write and
    read, and the body is read in chunks so that a server trickling data
    cannot outlive the deadline.

    ``client_options`` are passed on to ``httpx.Client`` as-is.
    """

    client_options: dict[str, Any] = field(default_factory=dict)

    def __call__(self, request: Request) -> Response:
        deadline = None
        if request.timeout is not None:
            deadline = time.monotonic() + request.timeout
        with httpx.Client(**self.client_options) as client:
            try:
                if request.timeout is None:
                    http_request = client.build_request(request.method, request.url)
                else:
                    http_request = client.build_request(
                        request.method, request.url, timeout=request.timeout
                    )
            except (httpx.InvalidURL, UnicodeError) as exc:
                # idna errors subclass UnicodeError
                raise InvalidURL(exc)
            try:
                return self._send(client, http_request, deadline)
            except httpx.InvalidURL as exc:
                raise InvalidURL(exc)
            except (httpx.HTTPError, UnicodeError) as exc:
                # the resolver raises UnicodeError for hosts it cannot encode
                raise RequestFailed(exc)

    def _send(
        self, client: httpx.Client, request: httpx.Request, deadline: Seconds | None
    ) -> Response:
        response = client.send(request, stream=True)
        try:
            if deadline is not None:
                # only seen by reads issued after this point, i.e. the body
                request.extensions["timeout"] = httpx.Timeout(
                    _remaining(request, deadline)
                ).as_dict()
            body = bytearray()
            for chunk in response.iter_bytes():
                body += chunk
                if deadline is not None:
                    _remaining(request, deadline)
            return Response(
                status=response.status_code,
                body=bytes(body),
                encoding=response.charset_encoding,
            )
        finally:
            response.close()


def _remaining(request: httpx.Request, deadline: Seconds) -> Seconds:
    remaining = deadline - time.monotonic()
    if remaining <= 0:
        raise httpx.ReadTimeout("request deadline exceeded", request=request)
    return remaining
