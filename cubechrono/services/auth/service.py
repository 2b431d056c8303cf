# cubechrono/services/auth/service.py
from __future__ import annotations

import logging

from cubechrono.models.account import Account, Role
from cubechrono.models.refresh_token import RefreshToken
from cubechrono.services._shared.base import BaseService
from cubechrono.services._shared.errors import (
    InvalidCredentialsError,
    TokenExpiredError,
    TokenInvalidError,
    UsernameTakenError,
)
from cubechrono.services._shared.ports import (
    AccountStore,
    PasswordHasher,
    RefreshTokenStore,
    TokenCodec,
)
from cubechrono.services.accounts.dto import AccountOut
from cubechrono.services.auth.dto import (
    AccessTokenOut,
    AuthSettings,
    LoginIn,
    LogoutIn,
    LogoutOut,
    RefreshIn,
    RegisterIn,
    TokenPairOut,
)

log = logging.getLogger(__name__)


class AuthService(BaseService):
    """
    Session lifecycle service (register / login / refresh / logout / revoke).

    Access tokens are stateless; refresh tokens are only honoured while
    their record exists in the :class:`RefreshTokenStore`, which makes the
    store a revocation list. This service is the only writer of that store
    besides :class:`~cubechrono.services.accounts.service.AccountService`
    bulk revocations.
    """

    def __init__(
        self,
        *,
        accounts: AccountStore,
        refresh_store: RefreshTokenStore,
        hasher: PasswordHasher,
        token_codec: TokenCodec,
        settings: AuthSettings,
    ) -> None:
        """
        Initialize the service with its dependencies.

        :param accounts: Credential store.
        :param refresh_store: Refresh token revocation list.
        :param hasher: Password hasher (Argon2 in production).
        :param token_codec: Adapter for issuing/decoding JWTs.
        :param settings: Secrets and token lifetimes.
        """
        self.accounts = accounts
        self.refresh_store = refresh_store
        self.hasher = hasher
        self.tokens = token_codec
        self.cfg = settings

    # ------------------------------------------------------------------ #
    # Registration
    # ------------------------------------------------------------------ #

    def register(self, dto: RegisterIn) -> AccountOut:
        """
        Create an account after checking the username is free.

        The check-then-insert pair is not atomic; the store's unique index
        (when present) turns a lost race into :class:`UsernameTakenError`.

        :param dto: Registration input.
        :returns: The account as re-read from the store.
        :raises UsernameTakenError: If the username is already registered.
        """
        if self.accounts.exists_by_username(dto.username):
            raise UsernameTakenError(dto.username)

        account = Account.new(dto.username, self.hasher.hash(dto.password), dto.roles)
        self.accounts.insert(account)

        # Return the canonical persisted form, not the constructed one
        stored = self.accounts.find_by_id(account.id)
        if stored is None:
            raise RuntimeError("New account not inserted")

        log.info("auth.register", extra={"account_id": stored.id})
        return AccountOut.from_account(stored)

    def bootstrap_admin(self, username: str, password: str) -> AccountOut | None:
        """
        First-run creation of a privileged account.

        :returns: The created account, or ``None`` when the username exists.
        """
        if self.accounts.exists_by_username(username):
            log.info("auth.bootstrap_admin.skipped username_exists")
            return None
        return self.register(
            RegisterIn(username=username, password=password, roles=(Role.user(), Role.admin()))
        )

    # ------------------------------------------------------------------ #
    # Login
    # ------------------------------------------------------------------ #

    def login(self, dto: LoginIn) -> TokenPairOut:
        """
        Authenticate credentials and issue a fresh token pair.

        :param dto: Login input.
        :returns: Access/Refresh token pair.
        :raises InvalidCredentialsError: Unknown username or wrong password
            (indistinguishable on purpose).
        """
        account = self.accounts.find_by_username(dto.username)
        if account is None or not self.hasher.verify(account.password_hash, dto.password):
            log.warning("auth.login.invalid_credentials")
            raise InvalidCredentialsError()

        now = self.now_utc()
        access = self.tokens.issue(
            account.id, now + self.cfg.access_expires, self.cfg.access_secret, issued_at=now
        )

        # --- Persist the refresh record FIRST, then hand the token out ---
        rt_id = self.refresh_store.new_id()
        refresh_expires_at = now + self.cfg.refresh_expires
        refresh = self.tokens.issue(
            account.id,
            refresh_expires_at,
            self.cfg.refresh_secret,
            issued_at=now,
            jti=rt_id,
        )
        self.refresh_store.insert(
            RefreshToken(
                id=rt_id,
                account_id=account.id,
                expires_at=refresh_expires_at,
                token=refresh,
            )
        )

        log.info("auth.login", extra={"account_id": account.id})
        return TokenPairOut(access_token=access, refresh_token=refresh)

    # ------------------------------------------------------------------ #
    # Refresh (no rotation)
    # ------------------------------------------------------------------ #

    def refresh(self, dto: RefreshIn) -> AccessTokenOut:
        """
        Exchange a stored, unexpired refresh token for a new access token.

        The refresh token itself is not rotated.

        :raises TokenInvalidError: Token not in the store, bad signature, or
            subject disagreeing with the stored owner.
        :raises TokenExpiredError: Signature expired or stored record expired.
        """
        record = self.refresh_store.find_by_token(dto.refresh_token)
        if record is None:
            log.warning("auth.refresh.unknown_token")
            raise TokenInvalidError()

        claims = self.tokens.decode(dto.refresh_token, self.cfg.refresh_secret)

        now = self.now_utc()
        if record.is_expired(now):
            log.warning("auth.refresh.record_expired", extra={"account_id": record.account_id})
            raise TokenExpiredError()
        if claims.sub != record.account_id:
            log.warning("auth.refresh.owner_mismatch", extra={"record_id": record.id})
            raise TokenInvalidError()

        access = self.tokens.issue(
            claims.sub, now + self.cfg.access_expires, self.cfg.access_secret, issued_at=now
        )
        return AccessTokenOut(access_token=access)

    # ------------------------------------------------------------------ #
    # Logout / revocation
    # ------------------------------------------------------------------ #

    def logout(self, dto: LogoutIn) -> LogoutOut:
        """
        Revoke one refresh token by exact string match.

        An unknown token is not an error: the caller ends up without a valid
        session either way.
        """
        deleted = self.refresh_store.delete_by_token(dto.refresh_token)
        if deleted:
            return LogoutOut(logged_out=True, message="Logged out")
        return LogoutOut(logged_out=False, message="Not logged in")

    def revoke_all(self, account: Account, password: str) -> int:
        """
        Delete every refresh token owned by ``account`` after re-checking
        the password.

        :returns: Number of revoked refresh tokens.
        :raises InvalidCredentialsError: If the password does not match.
        """
        if not self.hasher.verify(account.password_hash, password):
            log.warning("auth.revoke_all.invalid_credentials", extra={"account_id": account.id})
            raise InvalidCredentialsError()

        count = self.refresh_store.delete_all_for_account(account.id)
        log.info("auth.revoke_all", extra={"account_id": account.id, "revoked": count})
        return count
