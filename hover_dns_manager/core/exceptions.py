"""
Exceptions raised by the Hover client.

Every error the client raises derives from HoverError so callers can catch
the whole family in one place.
"""

from typing import Optional


class HoverError(Exception):
    """Base class for all Hover client errors."""


class CredentialsError(HoverError, ValueError):
    """Raised at construction time when credentials are missing or malformed."""


class LoginError(HoverError):
    """Raised when the login exchange fails.

    The same instance is re-raised to every operation waiting on the login.
    """

    def __init__(self, status_code: Optional[int], message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"Log in error: {status_code} - {message}")


class RequestError(HoverError):
    """Raised when a single API call fails. Carries only the error message."""


class InvalidArgumentError(HoverError, ValueError):
    """Raised when a lookup argument is empty or not a string."""


class DomainNotFoundError(HoverError):
    """Raised when the DNS records of a domain cannot be fetched."""


class NoMatchingRecordError(HoverError, LookupError):
    """Raised when no DNS record matches a name and record type."""
