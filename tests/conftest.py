"""Pytest configuration and fixtures.

Provides environment isolation so tests never see a developer's ``.env`` or
``RESULTANT_*`` variables. All fixtures here are autouse unless noted.
"""

from __future__ import annotations

import os

import pytest

# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests."""
    monkeypatch.setattr(
        "resultant.config.load_dotenv", lambda *_args, **_kwargs: False
    )


@pytest.fixture(autouse=True)
def isolate_resultant_env(monkeypatch):
    """Clear RESULTANT_* env vars to prevent test pollution."""
    for key in list(os.environ.keys()):
        if key.startswith("RESULTANT_"):
            monkeypatch.delenv(key, raising=False)
