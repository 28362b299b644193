"""Helper utilities for tests."""

from unittest.mock import AsyncMock, MagicMock

from app.core.config import settings

USER_ID = settings.DEFAULT_USER_ID
OTHER_USER_ID = "someone-else@fina.io"


def broken_session(owned=None):
    """A session whose every round trip to the database fails.

    Args:
        owned: When given, lookups succeed and return this row so the
            failure happens at commit time instead.

    Returns:
        MagicMock: Stand-in for AsyncSession raising on execute/scalar/commit.
    """
    session = MagicMock()
    if owned is None:
        session.execute = AsyncMock(side_effect=RuntimeError("database is down"))
    else:
        result = MagicMock()
        result.scalar_one_or_none.return_value = owned
        session.execute = AsyncMock(return_value=result)
    session.scalar = AsyncMock(side_effect=RuntimeError("database is down"))
    session.commit = AsyncMock(side_effect=RuntimeError("database is down"))
    session.refresh = AsyncMock()
    session.delete = AsyncMock()
    return session
