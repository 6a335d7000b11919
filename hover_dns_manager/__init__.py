"""
Hover DNS Manager - Domain and DNS record management for Hover accounts

A client for the Hover control panel API that logs in once per client and
shares the authenticated session across every domain and DNS call.
"""

__version__ = "1.0.0"
__author__ = "Hover DNS Manager Team"
__description__ = "Domain and DNS record management for Hover accounts"

from .core.client import HoverClient
from .core.exceptions import (
    CredentialsError,
    DomainNotFoundError,
    HoverError,
    InvalidArgumentError,
    LoginError,
    NoMatchingRecordError,
    RequestError,
)
from .core.record_manager import RecordManager

__all__ = [
    "HoverClient",
    "RecordManager",
    "HoverError",
    "CredentialsError",
    "LoginError",
    "RequestError",
    "InvalidArgumentError",
    "DomainNotFoundError",
    "NoMatchingRecordError",
]
