"""Signed session credentials."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

import jwt

from car_doctor.domain.auth import (
    Identity,
    RejectedToken,
    TokenVerification,
    VerifiedToken,
)
from car_doctor.domain.errors import InvalidClaimsError

_REGISTERED_CLAIMS = frozenset({"exp", "iat"})


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class TokenService:
    """Issues and verifies HS256 JSON Web Tokens carrying an identity claim.

    The server keeps no session state: everything needed to authenticate a
    later request travels inside the token, so verification only checks the
    signature and the ``exp`` claim.
    """

    secret: str
    ttl_seconds: int = 3600
    algorithm: str = "HS256"
    clock: Callable[[], datetime] = field(default=_utcnow)

    def __post_init__(self) -> None:
        if not self.secret:
            raise ValueError("Access token secret is not configured")

    def issue(self, claims: Mapping[str, object]) -> str:
        """Sign the identity claim with a fixed expiry window."""
        reserved = sorted(_REGISTERED_CLAIMS.intersection(claims))
        if reserved:
            raise InvalidClaimsError(f"Reserved claims are not allowed: {reserved}")
        issued_at = self.clock()
        payload = {
            **claims,
            "iat": issued_at,
            "exp": issued_at + timedelta(seconds=self.ttl_seconds),
        }
        try:
            return jwt.encode(payload, self.secret, algorithm=self.algorithm)
        except TypeError as exc:
            raise InvalidClaimsError("Identity claim is not serializable") from exc

    def verify(self, token: str) -> TokenVerification:
        """Check signature and expiry, returning the identity or a rejection."""
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"require": ["exp"]},
            )
        except jwt.ExpiredSignatureError:
            return RejectedToken(reason="expired")
        except jwt.InvalidTokenError as exc:
            return RejectedToken(reason=f"invalid: {exc}")
        claims = {
            key: value
            for key, value in payload.items()
            if key not in _REGISTERED_CLAIMS
        }
        return VerifiedToken(identity=Identity(claims=claims))
