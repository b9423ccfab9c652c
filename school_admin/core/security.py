# school_admin/core/security.py

from datetime import datetime, timedelta, timezone
from numbers import Real
from typing import Any, Callable, Dict, Optional

from jose import JWTError, jwt
from passlib.context import CryptContext
from starlette.concurrency import run_in_threadpool

from school_admin.core.config import Settings
from school_admin.core.errors import TokenError
from school_admin.core.logging import logger

DEFAULT_PASSWORD_ROUNDS = 10
DEFAULT_TOKEN_TTL = timedelta(hours=1)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class CredentialStore:
    """One-way password hashing backed by bcrypt.

    The salt and cost are embedded in the hash itself, so the returned string
    is all that needs to be stored. Hashing is CPU-bound and runs in the
    threadpool to keep the event loop responsive.
    """

    def __init__(self, rounds: int = DEFAULT_PASSWORD_ROUNDS):
        self.rounds = rounds
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__default_rounds=rounds
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "CredentialStore":
        return cls(rounds=settings.BCRYPT_ROUNDS)

    async def hash(self, plaintext: str) -> str:
        """Hash password using bcrypt"""
        return await run_in_threadpool(self._context.hash, plaintext)

    async def verify(self, plaintext: str, hashed: str) -> bool:
        """Verify password against hash"""
        try:
            return await run_in_threadpool(self._context.verify, plaintext, hashed)
        except (ValueError, TypeError):
            logger.warning("Stored credential is not a recognised hash")
            return False

    async def dummy_verify(self) -> None:
        """Spend the time of a real verification when no account matched."""
        await run_in_threadpool(self._context.dummy_verify)


class TokenService:
    """Issues and verifies signed, time-bounded identity tokens.

    Every verification failure (bad structure, wrong signature, expiry) is
    reported as the same ``TokenError``. The specific reason is only logged.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        default_ttl: timedelta = DEFAULT_TOKEN_TTL,
        clock: Optional[Clock] = None
    ):
        self._secret = secret
        self.algorithm = algorithm
        self.default_ttl = default_ttl
        self._clock = clock or utc_now

    @classmethod
    def from_settings(cls, settings: Settings, clock: Optional[Clock] = None) -> "TokenService":
        return cls(
            secret=settings.SECRET_KEY.get_secret_value(),
            algorithm=settings.ALGORITHM,
            default_ttl=settings.access_token_ttl,
            clock=clock
        )

    def issue(self, claims: Dict[str, Any], ttl: Optional[timedelta] = None) -> str:
        """Sign ``claims`` together with an expiry ``ttl`` from now."""
        expires_at = self._clock() + (ttl if ttl is not None else self.default_ttl)
        to_encode = dict(claims)
        to_encode["exp"] = int(expires_at.timestamp())
        return jwt.encode(to_encode, self._secret, algorithm=self.algorithm)

    def verify(self, token: str) -> Dict[str, Any]:
        """Return the identity claim carried by ``token``.

        Raises:
            TokenError: for any invalid, forged or expired token
        """
        try:
            # expiry is checked below against the injectable clock
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                options={"verify_exp": False}
            )
        except (JWTError, ValueError, TypeError, AttributeError) as e:
            raise TokenError(reason=f"decode failed: {e.__class__.__name__}")

        expires_at = payload.get("exp")
        if not isinstance(expires_at, Real) or isinstance(expires_at, bool):
            raise TokenError(reason="missing or non-numeric exp")
        if self._clock().timestamp() >= expires_at:
            raise TokenError(reason="expired")
        if not payload.get("id"):
            raise TokenError(reason="missing identity claim")

        return {key: value for key, value in payload.items() if key != "exp"}
