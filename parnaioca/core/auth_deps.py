"""
Authentication and authorization dependencies.

Both dependencies resolve the immutable session context from the bearer
token; the admin variant additionally requires the administrator role claim.
"""

from typing import Annotated

from fastapi import Depends

from parnaioca.core.security import get_session_context
from parnaioca.core.service_utils import ensure_admin_access
from parnaioca.schemas.user import SessionContext


def require_session() -> SessionContext:
    def dependency(
        session: SessionContext = Depends(get_session_context),
    ) -> SessionContext:
        return session

    return dependency


def require_admin_role() -> SessionContext:
    """
    Dependency that requires the administrator role.

    Raises:
        AccessDeniedError: If the session role is not admin
    """

    def dependency(
        session: SessionContext = Depends(get_session_context),
    ) -> SessionContext:
        return ensure_admin_access(session)

    return dependency


RequireSession = Annotated[SessionContext, Depends(require_session())]
RequireAdminRole = Annotated[SessionContext, Depends(require_admin_role())]
