"""
Error taxonomy for a run: every failure is a FetchError tagged with an ErrorKind.
"""

from enum import Enum


class ErrorKind(Enum):
    URL_FORMAT = "UrlFormatError"
    NETWORK = "NetworkError"
    PARSE = "ParseError"


class FetchError(Exception):
    """A failure of one of the run stages (url check, network, parse)."""

    def __init__(self, kind: ErrorKind, message: str):
        self.kind = kind
        self.message = message
        super().__init__(f"{kind.value}: {message}")
