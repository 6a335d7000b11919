#!/usr/bin/env python3
"""
Hover DNS Manager - Main Entry Point

This is the main entry point for the Hover DNS Manager.
It can be run directly or imported as a module.
"""

from hover_dns_manager.cli.main import main

if __name__ == "__main__":
    main()
