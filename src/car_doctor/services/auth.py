"""Authorization guard for ownership-protected requests."""

import logging
from dataclasses import dataclass

from car_doctor.domain.auth import RejectedToken, TokenVerification
from car_doctor.services.tokens import TokenService

logger = logging.getLogger(__name__)


@dataclass
class AuthGuard:
    """Verifies the session credential presented with a request."""

    token_service: TokenService

    def authorize(self, token: str | None) -> TokenVerification:
        """Return the verified identity or the reason the credential was rejected."""
        if not token:
            logger.info("Request without session credential")
            return RejectedToken(reason="missing")
        verification = self.token_service.verify(token)
        if isinstance(verification, RejectedToken):
            logger.warning(
                "Rejected session credential", extra={"reason": verification.reason}
            )
        return verification
