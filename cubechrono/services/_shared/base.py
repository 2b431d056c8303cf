# cubechrono/services/_shared/base.py
from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from cubechrono.core import errors as api_errors
from cubechrono.services._shared.errors import (
    AuthError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    NotImplementedServiceError,
    ServiceError,
)

if TYPE_CHECKING:
    from cubechrono.models.account import Account


class BaseService:
    """
    Base class for application services.

    Responsibilities
    ----------------
    * Centralize error translation.
    * Provide a single clock so tests can freeze time.
    * Keep services thin, orchestration-only, no web/driver leakage.

    Notes
    -----
    - Services receive their stores through the constructor; they never
      reach for process-global state.
    """

    @staticmethod
    def now_utc() -> datetime:
        return datetime.now(UTC)

    # -------------------------- Error handling ------------------------------

    @staticmethod
    def translate_exceptions(exc: Exception) -> Exception:
        """
        Map domain/service-level errors to API-level (HTTP) errors.

        :param exc: Exception raised within the service.
        :type exc: Exception
        :returns: Translated exception ready to be re-raised.
        :rtype: Exception
        """
        if isinstance(exc, NotFoundError):
            # → 404 Not Found
            return api_errors.NotFound(str(exc))

        if isinstance(exc, ConflictError):
            # → 409 Conflict
            return api_errors.Conflict(str(exc))

        if isinstance(exc, AuthError):
            # → 401 Unauthorized, keeping the specific code (expired vs invalid)
            return api_errors.Unauthorized(str(exc), code=exc.code)

        if isinstance(exc, ForbiddenError):
            # → 403 Forbidden
            return api_errors.Forbidden(str(exc))

        if isinstance(exc, NotImplementedServiceError):
            # → 501 Not Implemented
            return api_errors.NotImplementedAPI(str(exc))

        # Any other ServiceError subclass → 400 Bad Request
        if isinstance(exc, ServiceError):
            return api_errors.APIError(
                message=str(exc),
                status_code=400,
                code="bad_request",
            )

        # Fallback: return untouched (will bubble up to Flask handler)
        return exc

    # --------------------------- AuthZ --------------------------------

    def ensure_admin(self, actor: Account, *, msg: str | None = None) -> None:
        """
        Ensure the acting account carries the admin role.

        :param actor: Authenticated account.
        :param msg: Optional custom error message.
        :type msg: str | None
        :raises ForbiddenError: If the actor is not an admin.
        """
        if not actor.is_admin():
            raise ForbiddenError(msg or "Forbidden")
