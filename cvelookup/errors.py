"""Exception hierarchy for the lookup pipeline.

Every stage raises one of these at the point of failure.  Only the CLI
catches them, reports the message on stderr, and turns ``exit_code``
into the process exit status.
"""

from typing import Optional


class LookupFailure(Exception):
    """Base exception for all lookup pipeline errors."""

    exit_code = 1

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message


class UsageError(LookupFailure):
    """Wrong command-line usage.  No network call is attempted."""

    exit_code = 2


class TransportError(LookupFailure):
    """DNS, connection, TLS, or body-read failure talking to the API."""

    exit_code = 1


class DecodeError(LookupFailure):
    """Response body is not JSON or does not fit the envelope shape."""

    exit_code = 3


class NotFoundError(LookupFailure):
    """Well-formed response with no items for the requested ID."""

    exit_code = 4
