"""
Record Manager - Idempotent record workflows on top of the Hover client

This module combines the client's primitive calls into the operations people
actually run against a zone: point a name at an address whether or not the
record exists yet, and clear every record of a name and type.
"""

import logging
from typing import Dict, List

from .client import HoverClient, extract_dns_entries
from ..utils.validators import validate_ipv4

logger = logging.getLogger(__name__)


class RecordManager:
    """Manages DNS record changes for Hover domains."""

    def __init__(self, client: HoverClient):
        """Initialize record manager with a Hover client."""
        self.client = client

    def list_records(self, domain: str) -> List[Dict]:
        """Return the DNS entries of a domain as a flat list."""
        entries = extract_dns_entries(self.client.get_domain_dns(domain))
        logger.info(f"Retrieved {len(entries)} records for {domain}")
        return entries

    def ensure_a_record(self, domain: str, subdomain: str, ip: str) -> Dict:
        """
        Make ``subdomain`` under ``domain`` resolve to ``ip``.

        Creates the A record when none exists and updates every existing A
        record of that name whose content differs.

        Args:
            domain: Domain name
            subdomain: Record name
            ip: IPv4 address the record should point to

        Returns:
            Dictionary with the ``action`` taken (created, updated or
            unchanged) and the affected ``record_ids``
        """
        if not validate_ipv4(ip):
            raise ValueError(f"Invalid IPv4 address: {ip}")

        existing = [
            entry
            for entry in self.list_records(domain)
            if entry.get("id")
            and str(entry.get("name", "")).lower() == subdomain.lower()
            and str(entry.get("type", "")).upper() == "A"
        ]

        if not existing:
            response = self.client.create_a_record(domain, subdomain, ip)
            logger.info(f"Created A record: {subdomain}.{domain} -> {ip}")
            record_ids = [
                value["id"]
                for value in response
                if isinstance(value, dict) and value.get("id")
            ]
            return {"action": "created", "record_ids": record_ids}

        stale = [entry for entry in existing if entry.get("content") != ip]
        if not stale:
            logger.info(f"No change needed: {subdomain}.{domain} -> {ip}")
            return {
                "action": "unchanged",
                "record_ids": [entry["id"] for entry in existing],
            }

        for entry in stale:
            self.client.update_dns(entry["id"], ip)
            logger.info(
                f"Updated record {entry['id']}: {subdomain}.{domain} "
                f"{entry.get('content')} -> {ip}"
            )

        return {"action": "updated", "record_ids": [entry["id"] for entry in stale]}

    def remove_records(self, domain: str, subdomain: str, record_type: str) -> List[str]:
        """
        Delete every record of ``subdomain`` with the given type.

        Returns:
            Identifiers of the deleted records
        """
        record_ids = self.client.get_subdomain_identifiers(domain, subdomain, record_type)

        for record_id in record_ids:
            self.client.remove_dns(record_id)
            logger.info(f"Deleted record {record_id}: {subdomain}.{domain} ({record_type})")

        return record_ids
