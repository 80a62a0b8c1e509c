"""Tests for the Users accessor."""

from __future__ import annotations

from http import HTTPStatus
from typing import TYPE_CHECKING, Any
from unittest.mock import AsyncMock

import pytest
from aiohttp import web

from pynatureremo.exceptions import NatureRemoAPIError, NatureRemoDecodeError
from pynatureremo.models import User
from pynatureremo.users import Users


if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from aiohttp.web import Application

    from pynatureremo.client import NatureRemoClient


RATE_LIMIT_HEADERS = {
    "X-Rate-Limit-Limit": "10",
    "X-Rate-Limit-Reset": "1577804400",
    "X-Rate-Limit-Remaining": "10",
}

SAMPLE_USER_RESPONSE = {
    "id": "3fa85f64-5717-4562-b3fc-2c963f66afa6",
    "nickname": "string",
}


@pytest.fixture
def app() -> Application:
    """Create a test application serving /1/users/me."""
    app = web.Application()
    state = {"nickname": SAMPLE_USER_RESPONSE["nickname"]}

    async def get_me(request: web.Request) -> web.Response:
        """Mock GET /1/users/me endpoint."""
        if request.headers.get("Authorization") != "Bearer DUMMY_ACCESS_TOKEN":
            return web.Response(status=HTTPStatus.UNAUTHORIZED, text="unauthorized", headers=RATE_LIMIT_HEADERS)
        body = {"id": SAMPLE_USER_RESPONSE["id"], "nickname": state["nickname"]}
        return web.json_response(body, headers=RATE_LIMIT_HEADERS)

    async def update_me(request: web.Request) -> web.Response:
        """Mock POST /1/users/me endpoint echoing the new nickname."""
        form = await request.post()
        state["nickname"] = str(form["nickname"])
        return web.json_response({"nickname": form["nickname"]}, headers=RATE_LIMIT_HEADERS)

    app.router.add_get("/1/users/me", get_me)
    app.router.add_post("/1/users/me", update_me)
    return app


class TestGetMe:
    """Test users.get_me()."""

    async def test_get_me_success(
        self,
        make_client: Callable[[Application], Awaitable[NatureRemoClient]],
        app: Application,
    ) -> None:
        """Test decoding the current user."""
        client = await make_client(app)

        user = await client.users.get_me()

        assert user == User(id="3fa85f64-5717-4562-b3fc-2c963f66afa6", nickname="string")
        assert client.latest_rate_limit is not None
        assert client.latest_rate_limit.limit == 10

    async def test_get_me_returns_new_instance(
        self,
        make_client: Callable[[Application], Awaitable[NatureRemoClient]],
        app: Application,
    ) -> None:
        """Test each call returns a freshly decoded user."""
        client = await make_client(app)

        first = await client.users.get_me()
        second = await client.users.get_me()

        assert first == second
        assert first is not second

    async def test_get_me_not_found(
        self,
        make_client: Callable[[Application], Awaitable[NatureRemoClient]],
    ) -> None:
        """Test API errors propagate unchanged."""
        app = web.Application()

        async def not_found(request: web.Request) -> web.Response:
            return web.Response(status=HTTPStatus.NOT_FOUND, text="not found", headers=RATE_LIMIT_HEADERS)

        app.router.add_get("/1/users/me", not_found)
        client = await make_client(app)

        with pytest.raises(NatureRemoAPIError, match="not found") as exc_info:
            await client.users.get_me()

        assert exc_info.value.status == HTTPStatus.NOT_FOUND
        assert client.latest_rate_limit is not None

    async def test_get_me_wrong_shape(
        self,
        make_client: Callable[[Application], Awaitable[NatureRemoClient]],
    ) -> None:
        """Test an array body raises NatureRemoDecodeError."""
        app = web.Application()

        async def array_body(request: web.Request) -> web.Response:
            return web.json_response([SAMPLE_USER_RESPONSE], headers=RATE_LIMIT_HEADERS)

        app.router.add_get("/1/users/me", array_body)
        client = await make_client(app)

        with pytest.raises(NatureRemoDecodeError):
            await client.users.get_me()


class TestUpdateMe:
    """Test users.update_me()."""

    async def test_update_me_success(
        self,
        make_client: Callable[[Application], Awaitable[NatureRemoClient]],
        app: Application,
    ) -> None:
        """Test the returned user reflects the accepted nickname."""
        client = await make_client(app)
        me = User(nickname="foobar")

        user = await client.users.update_me(me)

        assert user.nickname == "foobar"
        assert user is not me

    async def test_update_me_visible_in_get_me(
        self,
        make_client: Callable[[Application], Awaitable[NatureRemoClient]],
        app: Application,
    ) -> None:
        """Test a subsequent read sees the update."""
        client = await make_client(app)

        await client.users.update_me(User(nickname="remo"))
        user = await client.users.get_me()

        assert user.nickname == "remo"

    async def test_update_me_does_not_mutate_argument(self) -> None:
        """Test the argument is left as passed in."""
        api = AsyncMock()
        api.post = AsyncMock(return_value={"id": "abc", "nickname": "server-side"})
        users = Users(api)
        me = User(id="abc", nickname="requested")

        user = await users.update_me(me)

        api.post.assert_awaited_once_with("users/me", {"nickname": "requested"})
        assert me.nickname == "requested"
        assert user == User(id="abc", nickname="server-side")

    async def test_update_me_bad_request(
        self,
        make_client: Callable[[Application], Awaitable[NatureRemoClient]],
    ) -> None:
        """Test API errors carry the server message."""
        app = web.Application()

        async def bad_request(request: web.Request) -> web.Response:
            body: dict[str, Any] = {"code": 400001, "message": "nickname too long"}
            return web.json_response(body, status=HTTPStatus.BAD_REQUEST, headers=RATE_LIMIT_HEADERS)

        app.router.add_post("/1/users/me", bad_request)
        client = await make_client(app)

        with pytest.raises(NatureRemoAPIError, match="nickname too long") as exc_info:
            await client.users.update_me(User(nickname="x" * 1000))

        assert exc_info.value.status == HTTPStatus.BAD_REQUEST
