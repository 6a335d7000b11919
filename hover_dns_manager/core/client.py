"""
Hover Client - Authenticated access to the Hover control panel API

This module wraps the Hover HTTP API for domain and DNS record management.
Logging in starts as soon as the client is built and runs in the background;
every API call waits for that single login to settle before it is sent, so
the session cookies are always in place and the login is never repeated.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List, Optional

import requests

from .exceptions import (
    CredentialsError,
    DomainNotFoundError,
    HoverError,
    InvalidArgumentError,
    LoginError,
    NoMatchingRecordError,
    RequestError,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://www.hover.com/api"
DEFAULT_TTL = "900"
LOGIN_PATH = "/login"


class HoverClient:
    """Client for the Hover domain and DNS API sharing one logged-in session."""

    def __init__(
        self,
        username: str,
        password: str,
        base_url: str = DEFAULT_BASE_URL,
        debug: bool = False,
        session: Optional[requests.Session] = None,
    ):
        """
        Validate credentials and start logging in.

        Args:
            username: Hover account username
            password: Hover account password
            base_url: API root every request path is appended to
            debug: Log compiled requests and raw responses at INFO level
            session: Optional pre-configured requests session

        Raises:
            CredentialsError: If username or password is missing or not a string
        """
        if not isinstance(username, str) or not username:
            raise CredentialsError("Please specify a username.")

        if not isinstance(password, str) or not password:
            raise CredentialsError("Please specify a password.")

        self.debug = debug
        self._log("Setting up API")

        self._username = username
        self._password = password
        self.base_url = base_url.rstrip("/")

        # Holds the cookies captured by the login response.
        self.session = session or requests.Session()

        # The login runs in the background; every API call waits on this future.
        executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="hover-login")
        self._logged_in = executor.submit(self._login)
        executor.shutdown(wait=False)

    def _login(self) -> None:
        """Authenticate once, storing the session cookies in the jar."""
        try:
            response = self.session.post(
                self.base_url + LOGIN_PATH,
                data={"username": self._username, "password": self._password},
            )
            response.raise_for_status()
        except requests.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else None
            error = LoginError(status_code, _error_message(e.response, e))
            logger.error(str(error))
            raise error from e
        except requests.RequestException as e:
            error = LoginError(None, str(e))
            logger.error(str(error))
            raise error from e

        self._log("Logged in")

    def get_all_domains(self) -> List:
        """Retrieve all domains in the account."""
        return self._hover_request("GET", "/domains")

    def get_all_dns(self) -> List:
        """Retrieve all DNS records in the account."""
        return self._hover_request("GET", "/dns")

    def get_domain(self, domain: str) -> List:
        """Retrieve a single domain in the account."""
        return self._hover_request("GET", f"/domains/{domain}")

    def get_domain_dns(self, domain: str) -> List:
        """Retrieve the DNS records of a single domain."""
        return self._hover_request("GET", f"/domains/{domain}/dns")

    def create_a_record(self, domain: str, subdomain: str, ip: str) -> List:
        """
        Create a new A record under the given domain.

        Args:
            domain: Domain name
            subdomain: Name of the record
            ip: IPv4 address the record points to
        """
        body = {
            "name": subdomain,
            "type": "A",
            "content": ip,
            "ttl": DEFAULT_TTL,
        }
        return self._hover_request("POST", f"/domains/{domain}/dns", body)

    def create_mx_record(self, domain: str, subdomain: str, priority, ip: str) -> List:
        """
        Create a new MX record under the given domain.

        Hover expects the priority and the mail host in a single content
        field separated by one space, e.g. ``"10 1.2.3.4"``.

        Args:
            domain: Domain name
            subdomain: Name of the record
            priority: MX priority
            ip: Address of the mail host
        """
        body = {
            "name": subdomain,
            "type": "MX",
            "content": " ".join([str(priority), ip]),
            "ttl": DEFAULT_TTL,
        }
        return self._hover_request("POST", f"/domains/{domain}/dns", body)

    def update_dns(self, record_id: str, content: str) -> List:
        """Replace the content of an existing DNS record."""
        return self._hover_request("PUT", f"/dns/{record_id}", {"content": content})

    def remove_dns(self, record_id: str) -> List:
        """Delete an existing DNS record."""
        return self._hover_request("DELETE", f"/dns/{record_id}")

    def get_subdomain_identifiers(
        self, domain: str, subdomain: str, record_type: str
    ) -> List[str]:
        """
        Find the identifiers of the records matching a name and a type.

        Name and type are compared case-insensitively.

        Args:
            domain: Domain name
            subdomain: Record name to match
            record_type: Record type to match, e.g. ``A`` or ``MX``

        Returns:
            Identifiers of the matching records, in the order Hover lists them

        Raises:
            InvalidArgumentError: If an argument is empty or not a string
            DomainNotFoundError: If the domain's records could not be fetched
            NoMatchingRecordError: If no record matches
        """
        if not isinstance(domain, str) or domain == "":
            raise InvalidArgumentError("Invalid domain supplied.")

        if not isinstance(subdomain, str) or subdomain == "":
            raise InvalidArgumentError("Invalid subdomain supplied.")

        if not isinstance(record_type, str) or record_type == "":
            raise InvalidArgumentError("Invalid recordtype supplied.")

        try:
            domain_dns = self.get_domain_dns(domain)
        except HoverError:
            raise DomainNotFoundError(
                f"Could not find domain {domain} or connection error."
            ) from None

        entries = extract_dns_entries(domain_dns)
        self._log(f"Got DNS entries: {entries}")

        matching = [
            entry
            for entry in entries
            if entry.get("id")
            and str(entry.get("name", "")).lower() == subdomain.lower()
            and str(entry.get("type", "")).lower() == record_type.lower()
        ]

        if not matching:
            raise NoMatchingRecordError("No matching subdomain and record type found.")

        identifiers = [entry["id"] for entry in matching]
        self._log(f"Matching IDs: {', '.join(str(i) for i in identifiers)}")
        return identifiers

    def close(self):
        """Release the pooled connections of the session."""
        self.session.close()

    def _hover_request(self, method: str, path: str, body: Optional[Dict] = None) -> List:
        """
        Send a request once the login has settled and normalize the response.

        A failed login is re-raised as is and the request is never sent.
        Any other failure is reduced to a RequestError carrying its message.
        """
        url = self.base_url + path
        self._log(f"Compiled request: {method} {url} {body if body is not None else ''}")

        self._logged_in.result()

        try:
            self._log("Sending request.")
            response = self.session.request(method, url, json=body)
            response.raise_for_status()
            data = response.json() if response.content else {}
        except (requests.RequestException, ValueError) as e:
            logger.error(f"{method} {url} failed: {e}")
            raise RequestError(str(e)) from e

        self._log(f"Got response: {data}")
        return _normalize(data)

    def _log(self, message: str):
        """Log at INFO when debugging is enabled, DEBUG otherwise."""
        logger.log(logging.INFO if self.debug else logging.DEBUG, message)


def extract_dns_entries(payload: List) -> List[Dict]:
    """
    Pull the DNS entries out of a normalized domain DNS response.

    The first element of the payload is either the entry list itself, a
    domain mapping holding ``dns`` or ``entries``, or a list of such domains.
    """
    if not payload:
        return []

    first = payload[0]
    if isinstance(first, dict):
        return list(first.get("dns") or first.get("entries") or [])

    if not isinstance(first, list):
        return []

    entries = []
    for item in first:
        if isinstance(item, dict) and ("dns" in item or "entries" in item):
            entries.extend(item.get("dns") or item.get("entries") or [])
        else:
            entries.append(item)
    return entries


def _normalize(data) -> List:
    """Drop the ``succeeded`` flag and return the remaining values in order."""
    if isinstance(data, dict):
        values = dict(data)
        values.pop("succeeded", None)
        return list(values.values())

    if isinstance(data, list):
        return list(data)

    return []


def _error_message(response, error: Exception) -> str:
    """Extract the remote error text from a failed response."""
    if response is None:
        return str(error)

    try:
        body = response.json()
    except ValueError:
        return response.text or str(error)

    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return response.text or str(error)
