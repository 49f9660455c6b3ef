# backend/tests/conftest.py
"""
Pytest configuration for ACS Gateway backend tests.

- Ensures that the project root (backend/) is added to sys.path
  so that `import acs_gateway.*` works correctly in tests.
- Ensures required environment variables for tests are set
  with safe dummy values (connection string, sender addresses).
- Clears the cached settings / clients between tests so that
  monkeypatched environment variables take effect.
"""

import os
import sys
from pathlib import Path

import pytest


def _ensure_project_root_in_sys_path() -> None:
    # This file is located at: backend/tests/conftest.py
    # parents[1] -> backend/
    project_root = Path(__file__).resolve().parents[1]
    project_root_str = str(project_root)

    if project_root_str not in sys.path:
        # Insert at the beginning so it has priority over site-packages, etc.
        sys.path.insert(0, project_root_str)


DUMMY_CONNECTION_STRING = (
    "endpoint=https://dummy-acs.communication.azure.com/;accesskey=ZHVtbXktYWNjZXNzLWtleQ=="
)


def _ensure_test_env_vars() -> None:
    """
    Set dummy environment variables required for tests.

    These values are only for local testing and do NOT contain real secrets.
    """
    os.environ.setdefault("COMMUNICATION_SERVICES_CONNECTION_STRING", DUMMY_CONNECTION_STRING)
    os.environ.setdefault("SENDER_EMAIL_ADDRESS", "DoNotReply@example.com")
    os.environ.setdefault("SENDER_PHONE_NUMBER", "+18005550100")
    os.environ.setdefault("WHATSAPP_NUMBER", "00000000-0000-0000-0000-000000000000")


_ensure_project_root_in_sys_path()
_ensure_test_env_vars()


@pytest.fixture(autouse=True)
def _clear_cached_settings():
    from acs_gateway.communication.client import get_communication_clients
    from acs_gateway.communication.config import get_app_settings, get_communication_settings
    from acs_gateway.communication.router import get_communication_service

    caches = (
        get_app_settings,
        get_communication_settings,
        get_communication_clients,
        get_communication_service,
    )
    for cached in caches:
        cached.cache_clear()
    yield
    for cached in caches:
        cached.cache_clear()
