#!/usr/bin/env python3
"""
Hover DNS Manager - Command Line Interface

Main entry point for managing Hover domains and DNS records from a shell.
"""

import argparse
import logging
import os
import sys
from typing import Dict, List, Optional

import yaml
from rich.console import Console
from rich.table import Table

from ..core.client import DEFAULT_BASE_URL, HoverClient
from ..core.exceptions import HoverError
from ..core.record_manager import RecordManager
from ..utils.validators import (
    validate_fqdn,
    validate_ipv4,
    validate_priority,
    validate_record_type,
    validate_subdomain,
)

console = Console()
logger = logging.getLogger(__name__)

RECORD_COLUMNS = ("id", "name", "type", "content", "ttl")
DOMAIN_COLUMNS = ("id", "domain_name", "status")

TRUTHY = ("1", "true", "yes", "on")

DEFAULT_LOG_FILE = "hover_dns_manager.log"


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    config = load_config(args.config)
    config = apply_env_overrides(config, os.environ)
    if args.verbose:
        config.setdefault("logging", {})["level"] = "DEBUG"
        config.setdefault("hover", {})["debug"] = True
    config_logger(config)

    try:
        validate_args(args)
        client = build_client(config)
        run_command(args, client)
    except (HoverError, ValueError) as e:
        logger.error(f"{args.command} failed: {e}")
        print(f"Error: {e}")
        sys.exit(1)

    sys.exit(0)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one sub-command per operation."""
    parser = argparse.ArgumentParser(
        description="Hover DNS Manager - Manage Hover domains and DNS records"
    )

    parser.add_argument(
        "--config",
        "-c",
        default="configs/config.yaml",
        help="Configuration file path (default: configs/config.yaml)",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("domains", help="List all domains in the account")
    subparsers.add_parser("dns", help="List all DNS records in the account")

    domain = subparsers.add_parser("domain", help="Show a single domain")
    domain.add_argument("domain")

    records = subparsers.add_parser("records", help="Show the DNS records of a domain")
    records.add_argument("domain")

    create_a = subparsers.add_parser("create-a", help="Create an A record")
    create_a.add_argument("domain")
    create_a.add_argument("name")
    create_a.add_argument("ip")

    create_mx = subparsers.add_parser("create-mx", help="Create an MX record")
    create_mx.add_argument("domain")
    create_mx.add_argument("name")
    create_mx.add_argument("priority")
    create_mx.add_argument("ip")

    update = subparsers.add_parser("update", help="Replace the content of a record")
    update.add_argument("record_id")
    update.add_argument("content")

    delete = subparsers.add_parser("delete", help="Delete a record")
    delete.add_argument("record_id")

    lookup = subparsers.add_parser("lookup", help="Print the ids of matching records")
    lookup.add_argument("domain")
    lookup.add_argument("name")
    lookup.add_argument("type")

    ensure = subparsers.add_parser(
        "ensure", help="Create or update an A record so it points at IP"
    )
    ensure.add_argument("domain")
    ensure.add_argument("name")
    ensure.add_argument("ip")

    return parser


def validate_args(args: argparse.Namespace):
    """Reject malformed input before anything is sent to Hover."""
    domain = getattr(args, "domain", None)
    if domain is not None and not validate_fqdn(domain):
        raise ValueError(f"Invalid domain '{domain}'")

    name = getattr(args, "name", None)
    if name is not None and not validate_subdomain(name):
        raise ValueError(f"Invalid record name '{name}'")

    ip = getattr(args, "ip", None)
    if ip is not None and not validate_ipv4(ip):
        raise ValueError(f"Invalid IPv4 address '{ip}'")

    priority = getattr(args, "priority", None)
    if priority is not None and not validate_priority(priority):
        raise ValueError(f"Invalid MX priority '{priority}'")

    record_type = getattr(args, "type", None)
    if record_type is not None and not validate_record_type(record_type):
        raise ValueError(f"Unsupported record type '{record_type}'")


def build_client(config: Dict) -> HoverClient:
    """Create a Hover client from the ``hover`` configuration section."""
    hover_config = config.get("hover") or {}
    return HoverClient(
        hover_config.get("username"),
        hover_config.get("password"),
        base_url=hover_config.get("base_url") or DEFAULT_BASE_URL,
        debug=bool(hover_config.get("debug", False)),
    )


def run_command(args: argparse.Namespace, client: HoverClient):
    """Dispatch the parsed command to the client and print its result."""
    command = args.command

    if command == "domains":
        print_payload(client.get_all_domains(), "Domains", DOMAIN_COLUMNS)
    elif command == "dns":
        print_payload(client.get_all_dns(), "DNS Records", RECORD_COLUMNS)
    elif command == "domain":
        print_payload(client.get_domain(args.domain), args.domain, DOMAIN_COLUMNS)
    elif command == "records":
        records = RecordManager(client).list_records(args.domain)
        print_table(f"DNS Records for {args.domain}", records, RECORD_COLUMNS)
    elif command == "create-a":
        print_payload(client.create_a_record(args.domain, args.name, args.ip))
        console.print(f"[green]Created A record {args.name}.{args.domain} -> {args.ip}[/green]")
    elif command == "create-mx":
        print_payload(
            client.create_mx_record(args.domain, args.name, args.priority, args.ip)
        )
        console.print(
            f"[green]Created MX record {args.name}.{args.domain} -> "
            f"{args.priority} {args.ip}[/green]"
        )
    elif command == "update":
        client.update_dns(args.record_id, args.content)
        console.print(f"[green]Updated record {args.record_id}[/green]")
    elif command == "delete":
        client.remove_dns(args.record_id)
        console.print(f"[green]Deleted record {args.record_id}[/green]")
    elif command == "lookup":
        for record_id in client.get_subdomain_identifiers(
            args.domain, args.name, args.type
        ):
            console.print(record_id)
    elif command == "ensure":
        result = RecordManager(client).ensure_a_record(args.domain, args.name, args.ip)
        console.print(
            f"[green]{args.name}.{args.domain} -> {args.ip}: {result['action']}[/green]"
        )


def print_payload(payload: List, title: str = "", columns=RECORD_COLUMNS):
    """Print a normalized payload as a table when it holds a list of objects."""
    for value in payload:
        if isinstance(value, list) and value and all(isinstance(v, dict) for v in value):
            print_table(title, value, columns)
        elif isinstance(value, dict):
            print_table(title, [value], columns)
        else:
            console.print_json(data=value)


def print_table(title: str, rows: List[Dict], columns):
    """Render rows as a rich table limited to the given columns."""
    table = Table(title=title)
    for column in columns:
        table.add_column(column, style="cyan" if column == "id" else "white")

    for row in rows:
        table.add_row(*[str(row.get(column, "")) for column in columns])

    console.print(table)


def load_config(config_path: str) -> Dict:
    """Load configuration from YAML file."""
    try:
        with open(config_path, "r") as f:
            config = yaml.safe_load(f) or {}
        logger.info(f"Configuration loaded from {config_path}")
        return config
    except FileNotFoundError:
        logger.warning(f"Config file {config_path} not found, using defaults")
        return get_default_config()
    except yaml.YAMLError as e:
        logger.error(f"Error parsing config file: {e}")
        sys.exit(1)


def get_default_config() -> Dict:
    """Return default configuration."""
    return {
        "hover": {
            "username": "",
            "password": "",
            "base_url": DEFAULT_BASE_URL,
            "debug": False,
        },
        "logging": {"level": "INFO", "file": DEFAULT_LOG_FILE},
    }


def apply_env_overrides(config: Dict, environ) -> Dict:
    """Override the ``hover`` section with HOVER_* environment variables."""
    hover_config = dict(config.get("hover") or {})

    if environ.get("HOVER_USERNAME"):
        hover_config["username"] = environ["HOVER_USERNAME"]
    if environ.get("HOVER_PASSWORD"):
        hover_config["password"] = environ["HOVER_PASSWORD"]
    if environ.get("HOVER_BASE_URL"):
        hover_config["base_url"] = environ["HOVER_BASE_URL"]
    if "HOVER_API_DEBUG" in environ:
        hover_config["debug"] = environ["HOVER_API_DEBUG"].strip().lower() in TRUTHY

    config = dict(config)
    config["hover"] = hover_config
    return config


def config_logger(config: Dict):
    """Configure logging."""
    logging_config = config.get("logging", None)
    if logging_config:
        log_level = logging_config.get("level", "INFO")
        log_file = logging_config.get("file", DEFAULT_LOG_FILE)

        logging.basicConfig(
            level=log_level,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            handlers=[
                logging.FileHandler(log_file),
                logging.StreamHandler(sys.stdout),
            ],
        )
        return

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


if __name__ == "__main__":
    main()
