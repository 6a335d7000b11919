"""
Validators - Input validation for Hover DNS records

This module provides validation functions for domain names, subdomain labels,
record types, MX priorities and IPv4 addresses, so that bad input is caught
before a request is sent to Hover.
"""

import ipaddress
import logging
import re

logger = logging.getLogger(__name__)

SUPPORTED_RECORD_TYPES = ("A", "AAAA", "CNAME", "MX", "TXT", "SRV", "NS")

_LABEL_RE = re.compile(r"^[a-zA-Z0-9_]([a-zA-Z0-9_-]*[a-zA-Z0-9])?$")


def validate_fqdn(fqdn: str) -> bool:
    """
    Validate a registered domain name such as ``example.com``.

    Args:
        fqdn: The domain name to validate

    Returns:
        True if valid, False otherwise
    """
    if not fqdn or not isinstance(fqdn, str):
        return False

    if fqdn.endswith("."):
        logger.warning(f"Domain ends with dot: {fqdn}")
        return False

    if len(fqdn) > 253:
        logger.warning(f"Domain too long: {fqdn}")
        return False

    labels = fqdn.split(".")

    if len(labels) < 2:
        logger.warning(f"Domain must have at least 2 labels: {fqdn}")
        return False

    if any(label == "" for label in labels):
        logger.warning(f"Domain contains empty labels: {fqdn}")
        return False

    for label in labels:
        if not _validate_label(label):
            logger.warning(f"Invalid label '{label}' in domain: {fqdn}")
            return False

    return True


def _validate_label(label: str) -> bool:
    """
    Validate a single DNS label.

    Labels can contain letters, digits, underscores and hyphens, and cannot
    start or end with a hyphen.
    """
    if len(label) == 0 or len(label) > 63:
        return False

    return bool(_LABEL_RE.match(label))


def validate_subdomain(subdomain: str) -> bool:
    """
    Validate the name part of a record as Hover expects it.

    ``@`` stands for the domain apex and ``*`` for a wildcard. Multi-label
    names such as ``api.internal`` are accepted.

    Args:
        subdomain: The record name to validate

    Returns:
        True if valid, False otherwise
    """
    if not subdomain or not isinstance(subdomain, str):
        return False

    if subdomain in ("@", "*"):
        return True

    labels = subdomain.split(".")
    if labels[0] == "*":
        labels = labels[1:]

    for label in labels:
        if not _validate_label(label):
            logger.warning(f"Invalid label '{label}' in record name: {subdomain}")
            return False

    return True


def validate_record_type(record_type: str) -> bool:
    """Check the record type against the types Hover manages (case-insensitive)."""
    if not record_type or not isinstance(record_type, str):
        return False

    return record_type.upper() in SUPPORTED_RECORD_TYPES


def validate_priority(priority) -> bool:
    """
    Validate an MX priority.

    Args:
        priority: Integer or numeric string

    Returns:
        True if it is an integer between 0 and 65535, False otherwise
    """
    if isinstance(priority, bool):
        return False

    try:
        value = int(str(priority).strip())
    except (TypeError, ValueError):
        logger.warning(f"Invalid MX priority: {priority}")
        return False

    return 0 <= value <= 65535


def validate_ipv4(ipv4: str) -> bool:
    """
    Validate IPv4 address.

    Args:
        ipv4: The IPv4 address to validate

    Returns:
        True if valid, False otherwise
    """
    if not ipv4 or not isinstance(ipv4, str):
        return False

    try:
        ipaddress.IPv4Address(ipv4.strip())
        return True
    except ipaddress.AddressValueError:
        logger.warning(f"Invalid IPv4 address: {ipv4}")
        return False
