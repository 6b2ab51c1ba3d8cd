"""
Root conftest.py - Test configuration for all tests.

This file is automatically discovered by pytest and runs before any tests.
It clears Jupiter environment variables BEFORE any client code (including
Settings) is imported, so the tests run against the built-in defaults.
"""

import os

for key in [key for key in os.environ if key.startswith("JUPITER_")]:
    del os.environ[key]
