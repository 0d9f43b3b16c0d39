"""
Failure kinds raised inside the core and handled at the pipeline boundary.
"""
from typing import Optional


class AskboxError(Exception):
    """Base class for every failure the core knows how to recover from."""


class CorruptPersistedState(AskboxError):
    def __init__(self, key: str, raw: Optional[str] = None):
        super().__init__(f"corrupt value stored under {key!r}")
        self.key = key
        self.raw = raw


class TransportFailure(AskboxError):
    """The request never produced an HTTP response."""


class ServerError(AskboxError):
    def __init__(self, status_code: int, body: str):
        super().__init__(f"Server returned {status_code}: {body}")
        self.status_code = status_code
        self.body = body


class DecodeFailure(AskboxError):
    """The response body could not be parsed as JSON."""
