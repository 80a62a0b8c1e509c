"""Accessor for the /users endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pynatureremo.const import ENDPOINT_USERS_ME
from pynatureremo.parsers import parse_user
from pynatureremo.serializers import serialize_user_update


if TYPE_CHECKING:
    from pynatureremo.api import NatureRemoAPI
    from pynatureremo.models import User

_LOGGER = logging.getLogger(__name__)


class Users:
    """Operations on the authenticated user.

    Args:
        api: Shared request dispatcher.
    """

    def __init__(self, api: NatureRemoAPI) -> None:
        """Initialize the accessor."""
        self._api = api

    async def get_me(self) -> User:
        """Get the authenticated user (GET /users/me).

        Returns:
            Newly decoded User.
        """
        data = await self._api.get(ENDPOINT_USERS_ME)
        return parse_user(data)

    async def update_me(self, user: User) -> User:
        """Update the authenticated user's nickname (POST /users/me).

        The given user is not modified; the returned instance reflects the
        value the server accepted.

        Args:
            user: User carrying the new nickname.

        Returns:
            User decoded from the server response.
        """
        _LOGGER.debug("Updating nickname to '%s'", user.nickname)
        data = await self._api.post(ENDPOINT_USERS_ME, serialize_user_update(user))
        return parse_user(data)
