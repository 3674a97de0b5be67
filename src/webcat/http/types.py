from collections.abc import Callable
from dataclasses import dataclass
from typing import Literal

from webcat.types import Seconds


@dataclass(frozen=True)
class Request:
    method: Literal["GET"] | Literal["POST"]
    url: str
    timeout: Seconds | None = None


@dataclass(frozen=True)
class Response:
    status: int
    body: bytes
    encoding: str | None = None


@dataclass
class RequestFailed(Exception):
    inner: Exception


@dataclass
class InvalidURL(Exception):
    inner: Exception


HttpImplementation = Callable[[Request], Response]
