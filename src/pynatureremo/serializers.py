"""Serialization of request parameters.

Write endpoints of the Nature Remo API take form-encoded bodies rather than
JSON, so serializers produce flat string mappings that aiohttp encodes as
application/x-www-form-urlencoded.
"""

from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from pynatureremo.models import User


def serialize_user_update(user: User) -> dict[str, str]:
    """Serialize a user for the POST /users/me form body.

    Only the nickname is writable; the id is ignored by the API.

    Args:
        user: User carrying the new nickname.

    Returns:
        Form parameters.

    Example:
        >>> from pynatureremo.models import User
        >>> serialize_user_update(User(nickname="foobar"))
        {'nickname': 'foobar'}
    """
    return {"nickname": user.nickname}
