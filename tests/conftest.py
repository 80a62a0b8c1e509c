"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import AsyncMock

import pytest
from aiohttp import ClientSession

from pynatureremo.client import NatureRemoClient


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Awaitable, Callable

    from aiohttp.test_utils import TestClient
    from aiohttp.web import Application


TEST_ACCESS_TOKEN = "DUMMY_ACCESS_TOKEN"


@pytest.fixture
def make_client(
    aiohttp_client: Callable[[Application], Awaitable[TestClient]],
) -> Callable[[Application], Awaitable[NatureRemoClient]]:
    """Create a NatureRemoClient pointed at a test aiohttp application.

    The test server plays the role of https://api.nature.global, so routes
    are registered under the /1 version prefix.
    """

    async def _make_client(app: Application) -> NatureRemoClient:
        test_client = await aiohttp_client(app)
        return NatureRemoClient(
            access_token=TEST_ACCESS_TOKEN,
            base_url=str(test_client.make_url("/1")),
            session=test_client.session,
        )

    return _make_client


@pytest.fixture
async def mock_session() -> AsyncGenerator[ClientSession]:
    """Create a mock aiohttp ClientSession.

    Yields:
        Mock ClientSession for testing.
    """
    session = AsyncMock(spec=ClientSession)
    session.closed = False

    async def mock_close() -> None:
        session.closed = True

    session.close = mock_close

    yield session

    if not session.closed:
        await session.close()
