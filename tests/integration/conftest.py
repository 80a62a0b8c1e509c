"""Pytest configuration and fixtures for integration tests."""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from aiohttp import ClientSession
from dotenv import load_dotenv

from pynatureremo import NatureRemoClient
from pynatureremo.const import DEFAULT_BASE_URL


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator


# Load .env file from project root
env_path = Path(__file__).parents[2] / ".env"
load_dotenv(env_path)


@pytest.fixture(scope="session")
def integration_config() -> dict[str, str]:
    """Load integration test configuration from environment.

    Tests are skipped unless NATURE_REMO_ACCESS_TOKEN is set, either in the
    environment or in a .env file at the project root.

    Returns:
        Dictionary with API credentials and configuration.
    """
    access_token = os.getenv("NATURE_REMO_ACCESS_TOKEN")
    base_url = os.getenv("NATURE_REMO_API_BASE_URL", DEFAULT_BASE_URL)

    if not access_token:
        pytest.skip("NATURE_REMO_ACCESS_TOKEN not configured")

    return {
        "access_token": access_token,
        "base_url": base_url,
    }


@pytest.fixture
async def session() -> AsyncGenerator[ClientSession]:
    """Create aiohttp session for tests."""
    async with ClientSession() as sess:
        yield sess


@pytest.fixture
async def client(integration_config: dict[str, str], session: ClientSession) -> AsyncGenerator[NatureRemoClient]:
    """Create client against the live API."""
    client = NatureRemoClient(
        access_token=integration_config["access_token"],
        base_url=integration_config["base_url"],
        session=session,
    )

    async with client:
        yield client
