"""Bearer-token gate resolving an access token to a stored account."""

from __future__ import annotations

import logging

from cubechrono.models.account import Account
from cubechrono.services._shared.errors import (
    InvalidCredentialsError,
    TokenExpiredError,
    TokenInvalidError,
    UnauthorizedError,
)
from cubechrono.services._shared.ports import AccountStore, TokenCodec
from cubechrono.services.auth.dto import AuthSettings

log = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


class AuthGuard:
    """
    Stateless request gate; reads the credential store, never writes it.

    Accounts deleted after a token was issued are rejected here because the
    subject no longer resolves.
    """

    def __init__(
        self,
        *,
        token_codec: TokenCodec,
        accounts: AccountStore,
        settings: AuthSettings,
    ) -> None:
        self.tokens = token_codec
        self.accounts = accounts
        self.cfg = settings

    @staticmethod
    def extract_bearer(authorization: str | None) -> str:
        """
        Return the token from an ``Authorization: Bearer <token>`` value.

        :raises UnauthorizedError: Header missing, other scheme, or empty token.
        """
        if not authorization or not authorization.startswith(BEARER_PREFIX):
            raise UnauthorizedError()
        token = authorization[len(BEARER_PREFIX) :].strip()
        if not token:
            raise UnauthorizedError()
        return token

    def authenticate(self, authorization: str | None) -> Account:
        """
        Validate the bearer header and resolve its subject.

        :param authorization: Raw ``Authorization`` header value.
        :returns: The stored account for the token subject.
        :raises UnauthorizedError: Missing/malformed header or invalid token.
        :raises TokenExpiredError: Access token past its expiry.
        :raises InvalidCredentialsError: Subject no longer exists.
        """
        token = self.extract_bearer(authorization)
        try:
            claims = self.tokens.decode(token, self.cfg.access_secret)
        except TokenExpiredError:
            log.warning("auth.guard.token_expired")
            raise
        except TokenInvalidError as exc:
            log.warning("auth.guard.token_invalid")
            raise UnauthorizedError() from exc

        account = self.accounts.find_by_id(claims.sub)
        if account is None:
            log.warning("auth.guard.unknown_subject")
            raise InvalidCredentialsError()
        return account
