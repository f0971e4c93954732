"""Admin access check shared by the admin use cases."""

import logfire

from autoblog.domain.error import NotAuthorizedError
from autoblog.domain.value import SessionContext


def require_admin(session: SessionContext, action: str) -> None:
    """Ensure the caller is an admin.

    Raises:
        NotAuthorizedError: If the session is not an admin session
    """
    if not session.is_admin:
        logfire.warn("Admin action refused", user_id=session.user_id, action=action)
        raise NotAuthorizedError("admin", action, session.user_id)
