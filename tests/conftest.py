"""Pytest configuration and fixtures."""

from __future__ import annotations

import logging

import pytest

# =============================================================================
# Logging
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def quiet_library_logging():
    """Keep resultkit debug records out of captured output by default."""
    logging.getLogger("resultkit").setLevel(logging.INFO)
