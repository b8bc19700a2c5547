"""Domain models for session credentials."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Identity:
    """Identity claim embedded in a session credential."""

    claims: dict[str, object] = field(default_factory=dict)

    @property
    def email(self) -> str | None:
        value = self.claims.get("email")
        return value if isinstance(value, str) else None


@dataclass(frozen=True)
class VerifiedToken:
    """Successful credential verification."""

    identity: Identity


@dataclass(frozen=True)
class RejectedToken:
    """Failed credential verification with the reason it was rejected."""

    reason: str


TokenVerification = VerifiedToken | RejectedToken
