"""JWT token domain service."""

import threading
from datetime import datetime, timedelta, timezone

import logfire

from autoblog.config import AuthSettings
from autoblog.domain.value import PROVIDER_CLAIMS, ExternalIdentityClaim, UserId
from autoblog.util.jwt import (
    JWTError,
    TokenPayload,
    TokenPurpose,
    create_token,
    verify_token,
)

from .base import Service


class CredentialRegistry:
    """Remembers exchange credentials that were already redeemed.

    Entries are kept until the credential would have expired anyway. The
    registry lives in process memory, so replay protection holds only while
    the API runs as a single worker process (see scripts/start_app.py).
    """

    def __init__(self) -> None:
        self._consumed: dict[str, datetime] = {}
        self._lock = threading.Lock()

    def consume(self, jti: str, expires_at: datetime) -> bool:
        """Mark a credential as used.

        Returns:
            False if it had already been used
        """
        now = datetime.now(timezone.utc)
        with self._lock:
            for key in [k for k, exp in self._consumed.items() if exp <= now]:
                del self._consumed[key]
            if jti in self._consumed:
                return False
            self._consumed[jti] = expires_at
            return True


class JWTService(Service):
    """Domain service for exchange credentials and session tokens."""

    def __init__(
        self, auth_settings: AuthSettings, credential_registry: CredentialRegistry
    ) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
            credential_registry: Shared record of redeemed credentials
        """
        self.auth_settings = auth_settings
        self.credential_registry = credential_registry

    def mint_exchange_credential(self, claim: ExternalIdentityClaim) -> str:
        """Mint the short-lived credential handed back by the identity bridge.

        Args:
            claim: Verified identity claim

        Returns:
            Signed credential
        """
        with logfire.span(
            "jwt_service.mint_exchange_credential", identity_key=claim.identity_key
        ):
            token, payload = create_token(
                claim.identity_key,
                TokenPurpose.EXCHANGE,
                timedelta(seconds=self.auth_settings.exchange_token_ttl_seconds),
                self.auth_settings,
                email=claim.email,
                provider=PROVIDER_CLAIMS[claim.provider],
                email_verified=True,
            )
            logfire.info(
                "Exchange credential minted",
                identity_key=claim.identity_key,
                jti=payload.jti,
            )
            return token

    def redeem_exchange_credential(self, credential: str) -> TokenPayload:
        """Verify an exchange credential and mark it used.

        Raises:
            JWTError: If the credential is invalid, expired, or already used
        """
        with logfire.span("jwt_service.redeem_exchange_credential"):
            try:
                payload = verify_token(
                    credential, TokenPurpose.EXCHANGE, self.auth_settings
                )
            except JWTError as e:
                logfire.warn("Exchange credential rejected", error=str(e))
                raise

            if not self.credential_registry.consume(payload.jti, payload.exp):
                logfire.warn(
                    "Exchange credential replayed", identity_key=payload.sub, jti=payload.jti
                )
                raise JWTError("Credential has already been used")

            logfire.info("Exchange credential redeemed", identity_key=payload.sub)
            return payload

    def create_session_token(
        self,
        user_id: UserId,
        email: str | None,
        provider: str | None,
        email_verified: bool,
    ) -> str:
        """Create the session token stored in the auth cookie."""
        with logfire.span("jwt_service.create_session_token", user_id=user_id):
            token, _ = create_token(
                user_id,
                TokenPurpose.SESSION,
                timedelta(days=self.auth_settings.session_expiry_days),
                self.auth_settings,
                email=email,
                provider=provider,
                email_verified=email_verified,
            )
            logfire.info("Session token created", user_id=user_id)
            return token

    def verify_session_token(self, token: str) -> TokenPayload:
        """Verify a session token and extract its payload.

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_session_token"):
            try:
                return verify_token(token, TokenPurpose.SESSION, self.auth_settings)
            except JWTError as e:
                logfire.debug("Session token verification failed", error=str(e))
                raise
