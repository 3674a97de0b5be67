from __future__ import annotations

import codecs
from dataclasses import dataclass
from enum import Enum, unique

from .http.types import Response as HttpResponse


@unique
class RequestMethod(Enum):
    GET = "GET"
    POST = "POST"


@dataclass(frozen=True)
class Response:
    status_code: int
    body: bytes
    encoding: str | None = None

    @classmethod
    def from_http(cls, response: HttpResponse) -> Response:
        return cls(
            status_code=response.status,
            body=response.body,
            encoding=response.encoding,
        )

    @property
    def text(self) -> str:
        """
        Body decoded with the charset the server declared. Bodies without a
        usable charset are read as UTF-8, undecodable bytes are replaced.
        """
        encoding = "utf-8"
        if self.encoding:
            try:
                encoding = codecs.lookup(self.encoding).name
            except LookupError:
                pass
        return self.body.decode(encoding, errors="replace")
