class RequestError(Exception):
    prefix = "request error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.prefix}: {self.message}"


class ConnectionFailed(RequestError):
    """
    The request was well-formed but the network exchange failed: unreachable
    host, refused connection, timeout, TLS handshake failure or reset.
    """

    prefix = "connection error"


class InvalidConfiguration(RequestError):
    """
    The target could not be turned into a request, for example because of
    malformed URL syntax or a port outside of 0-65535. Raised before any
    network activity.
    """

    prefix = "invalid request"
