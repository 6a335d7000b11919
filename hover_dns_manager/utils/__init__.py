"""
Utility functions and helpers.

This package contains validation helpers for record input.
"""

from .validators import (
    validate_fqdn,
    validate_ipv4,
    validate_priority,
    validate_record_type,
    validate_subdomain,
)

__all__ = [
    "validate_fqdn",
    "validate_ipv4",
    "validate_priority",
    "validate_record_type",
    "validate_subdomain",
]
