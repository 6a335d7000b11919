#!/usr/bin/env python3
"""
Test suite for the Hover DNS Manager command line interface
"""

import importlib
import os
import shutil
import tempfile
import unittest
from unittest.mock import patch

import yaml

from hover_dns_manager.cli.main import (
    DEFAULT_LOG_FILE,
    apply_env_overrides,
    build_client,
    config_logger,
    get_default_config,
    load_config,
    main,
)
from hover_dns_manager.core.exceptions import CredentialsError, LoginError


class TestConfig(unittest.TestCase):
    """Test configuration loading."""

    def setUp(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.mkdtemp()
        self.config_file = os.path.join(self.temp_dir, "config.yaml")

    def tearDown(self):
        """Clean up test fixtures."""
        shutil.rmtree(self.temp_dir)

    def test_load_config(self):
        """Test loading a YAML configuration file."""
        with open(self.config_file, "w") as f:
            yaml.dump({"hover": {"username": "user", "password": "secret"}}, f)

        config = load_config(self.config_file)

        self.assertEqual(config["hover"]["username"], "user")

    def test_missing_config_uses_defaults(self):
        """Test that a missing file falls back to defaults."""
        config = load_config(os.path.join(self.temp_dir, "missing.yaml"))

        self.assertEqual(config, get_default_config())

    def test_malformed_config_exits(self):
        """Test that a malformed file exits with an error."""
        with open(self.config_file, "w") as f:
            f.write("hover: [unclosed\n")

        with self.assertRaises(SystemExit) as ctx:
            load_config(self.config_file)
        self.assertEqual(ctx.exception.code, 1)

    def test_env_overrides(self):
        """Test that HOVER_* variables override the file."""
        config = apply_env_overrides(
            get_default_config(),
            {
                "HOVER_USERNAME": "env-user",
                "HOVER_PASSWORD": "env-secret",
                "HOVER_API_DEBUG": "1",
            },
        )

        self.assertEqual(config["hover"]["username"], "env-user")
        self.assertEqual(config["hover"]["password"], "env-secret")
        self.assertTrue(config["hover"]["debug"])

    def test_env_debug_off(self):
        """Test that non-truthy debug values disable debugging."""
        config = apply_env_overrides({"hover": {"debug": True}}, {"HOVER_API_DEBUG": "0"})

        self.assertFalse(config["hover"]["debug"])

    def test_log_file_default(self):
        """Test that the default log file is shared by defaults and logger setup."""
        self.assertEqual(get_default_config()["logging"]["file"], DEFAULT_LOG_FILE)

        with patch("logging.FileHandler") as file_handler, patch("logging.basicConfig"):
            config_logger({"logging": {"level": "INFO"}})

        file_handler.assert_called_once_with(DEFAULT_LOG_FILE)

    def test_build_client_requires_credentials(self):
        """Test that empty credentials fail when building the client."""
        with self.assertRaises(CredentialsError):
            build_client(get_default_config())


class TestMain(unittest.TestCase):
    """Test the CLI commands against a mocked client."""

    def setUp(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.mkdtemp()
        self.config_file = os.path.join(self.temp_dir, "config.yaml")
        config = {
            "hover": {"username": "user", "password": "secret"},
            "logging": {"level": "INFO", "file": os.path.join(self.temp_dir, "test.log")},
        }
        with open(self.config_file, "w") as f:
            yaml.dump(config, f)

        env_patcher = patch.dict(os.environ, {}, clear=True)
        env_patcher.start()
        self.addCleanup(env_patcher.stop)

        cli_module = importlib.import_module("hover_dns_manager.cli.main")
        patcher = patch.object(cli_module, "HoverClient")
        self.client_class = patcher.start()
        self.addCleanup(patcher.stop)
        self.client = self.client_class.return_value

    def tearDown(self):
        """Clean up test fixtures."""
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def run_main(self, *argv):
        with self.assertRaises(SystemExit) as ctx:
            main(["--config", self.config_file, *argv])
        return ctx.exception.code

    def test_domains(self):
        """Test listing domains."""
        self.client.get_all_domains.return_value = [
            [{"id": "dom1", "domain_name": "example.com", "status": "active"}]
        ]

        self.assertEqual(self.run_main("domains"), 0)
        self.client.get_all_domains.assert_called_once_with()
        self.client_class.assert_called_once_with(
            "user", "secret", base_url="https://www.hover.com/api", debug=False
        )

    def test_create_mx(self):
        """Test creating an MX record."""
        self.client.create_mx_record.return_value = []

        self.assertEqual(
            self.run_main("create-mx", "example.com", "mail", "10", "1.2.3.4"), 0
        )
        self.client.create_mx_record.assert_called_once_with(
            "example.com", "mail", "10", "1.2.3.4"
        )

    def test_lookup(self):
        """Test looking up record identifiers."""
        self.client.get_subdomain_identifiers.return_value = ["dns1"]

        self.assertEqual(self.run_main("lookup", "example.com", "www", "A"), 0)
        self.client.get_subdomain_identifiers.assert_called_once_with(
            "example.com", "www", "A"
        )

    def test_update_and_delete(self):
        """Test updating and deleting records."""
        self.assertEqual(self.run_main("update", "dns1", "5.6.7.8"), 0)
        self.client.update_dns.assert_called_once_with("dns1", "5.6.7.8")

        self.assertEqual(self.run_main("delete", "dns1"), 0)
        self.client.remove_dns.assert_called_once_with("dns1")

    def test_invalid_ip_rejected(self):
        """Test that invalid input fails before the client is built."""
        self.assertEqual(self.run_main("create-a", "example.com", "www", "1.2.3"), 1)
        self.client_class.assert_not_called()

    def test_verbose_enables_client_debug(self):
        """Test that --verbose turns on client debugging."""
        self.client.get_all_dns.return_value = []

        self.assertEqual(self.run_main("--verbose", "dns"), 0)
        self.assertTrue(self.client_class.call_args.kwargs["debug"])

    def test_login_error_exit_code(self):
        """Test that client errors exit with status 1."""
        self.client.get_all_dns.side_effect = LoginError(401, "Invalid credentials")

        self.assertEqual(self.run_main("dns"), 1)


if __name__ == "__main__":
    unittest.main(verbosity=2)
