"""
Core Hover API functionality.

This package contains the authenticated client and the record workflows
built on top of it.
"""

from .client import HoverClient
from .record_manager import RecordManager

__all__ = ["HoverClient", "RecordManager"]
