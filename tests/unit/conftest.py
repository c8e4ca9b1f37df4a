"""Unit test fixtures.

Most configuration helpers are in tests/conftest.py.
"""

from tests.conftest import FakeManager, add_known_mount, run_cmd, write_config

__all__ = [
    "FakeManager",
    "add_known_mount",
    "run_cmd",
    "write_config",
]
