"""
Token and password primitives

TokenCodec signs identity claims with PyJWT, PasswordHasher wraps bcrypt.
Neither knows about HTTP; callers map their failures to HTTP errors.
"""

from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Optional

import bcrypt
import jwt
from starlette.concurrency import run_in_threadpool

from app.core.config import DEFAULT_JWT_SECRET, DEVELOPMENT_ENVIRONMENTS, Config, config
from app.core.logger import logger

REFRESH_TOKEN_TYPE = "refresh"
ACCESS_TOKEN_TYPE = "access"


class TokenError(Exception):
    """Base class for token verification failures"""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidToken(TokenError):
    def __init__(self, message: str = "Invalid token"):
        super().__init__(message)


class TokenExpired(TokenError):
    def __init__(self, message: str = "Token expired"):
        super().__init__(message)


class TokenCodec:
    """Issues and verifies signed, time-limited identity claims"""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expires_in: int = 7 * 24 * 3600,
        refresh_expires_in: int = 30 * 24 * 3600,
        issuer: str = "marketplace-api",
        audience: str = "api-users",
    ):
        self.secret = secret
        self.algorithm = algorithm
        self.expires_in = expires_in
        self.refresh_expires_in = refresh_expires_in
        self.issuer = issuer
        self.audience = audience

    def _encode(self, subject_id: str, lifetime: int, token_type: Optional[str] = None) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "userId": str(subject_id),
            "iat": now,
            "exp": now + timedelta(seconds=lifetime),
            "iss": self.issuer,
            "aud": self.audience,
        }
        if token_type:
            payload["type"] = token_type
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def issue(self, subject_id: str) -> str:
        """Issue an access token for the subject"""
        return self._encode(subject_id, self.expires_in)

    def issue_refresh(self, subject_id: str) -> str:
        """Issue a longer-lived refresh token; exchanging it is left to callers"""
        return self._encode(subject_id, self.refresh_expires_in, REFRESH_TOKEN_TYPE)

    def verify(self, token: str, token_type: str = ACCESS_TOKEN_TYPE) -> str:
        """
        Verify a token and return the embedded subject id.

        Raises:
            TokenExpired: the token is past its expiry
            InvalidToken: bad signature, issuer, audience, type or payload
        """
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                issuer=self.issuer,
                audience=self.audience,
                options={"require": ["exp", "iss", "aud"]},
            )
        except jwt.ExpiredSignatureError:
            raise TokenExpired()
        except jwt.InvalidTokenError as e:
            raise InvalidToken(f"Invalid token: {e}")

        if payload.get("type", ACCESS_TOKEN_TYPE) != token_type:
            raise InvalidToken("Invalid token: unexpected token type")

        subject_id = payload.get("userId")
        if not subject_id:
            raise InvalidToken("Invalid token: missing user identifier")

        return subject_id


BCRYPT_MAX_BYTES = 72


def _encode_password(plaintext: str) -> bytes:
    # bcrypt only reads the first 72 bytes of a password
    return plaintext.encode("utf-8")[:BCRYPT_MAX_BYTES]


class PasswordHasher:
    """Salted bcrypt hashing with a configurable cost factor"""

    def __init__(self, rounds: int = 12):
        self.rounds = rounds

    def hash(self, plaintext: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(_encode_password(plaintext), salt).decode("utf-8")

    def verify(self, plaintext: str, digest: str) -> bool:
        if not plaintext or not digest:
            return False
        try:
            return bcrypt.checkpw(_encode_password(plaintext), digest.encode("utf-8"))
        except ValueError:
            # Malformed digest
            return False

    async def hash_async(self, plaintext: str) -> str:
        return await run_in_threadpool(self.hash, plaintext)

    async def verify_async(self, plaintext: str, digest: str) -> bool:
        return await run_in_threadpool(self.verify, plaintext, digest)


@lru_cache
def get_token_codec() -> TokenCodec:
    """Token codec configured from settings"""
    return TokenCodec(
        secret=config.jwt_secret,
        algorithm=config.jwt_algorithm,
        expires_in=config.jwt_expiration,
        refresh_expires_in=config.jwt_refresh_expiration,
        issuer=config.jwt_issuer,
        audience=config.jwt_audience,
    )


@lru_cache
def get_password_hasher() -> PasswordHasher:
    """Password hasher configured from settings"""
    return PasswordHasher(rounds=config.bcrypt_rounds)


def check_jwt_secret(settings: Config = config) -> None:
    """
    Refuse to run with the placeholder JWT secret outside development and test.

    Raises:
        RuntimeError: the placeholder secret is configured in another environment
    """
    if settings.jwt_secret != DEFAULT_JWT_SECRET:
        return

    if settings.environment in DEVELOPMENT_ENVIRONMENTS:
        logger.warning(
            "JWT_SECRET is not set; tokens are signed with the placeholder secret",
            metadata={"event": "default_jwt_secret", "environment": settings.environment},
        )
        return

    logger.critical(
        "JWT_SECRET must be set outside development",
        metadata={"event": "default_jwt_secret", "environment": settings.environment},
    )
    raise RuntimeError(f"JWT_SECRET must be set when ENVIRONMENT={settings.environment}")
