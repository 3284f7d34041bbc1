"""
Hour-granular anti-forgery form tokens.

A token is the SHA-256 of a salt followed by the current hour in a fixed
time zone. Tokens stay valid for the configured number of hours plus one
hour of slack for the rounding boundary; one hour into the future is
accepted as well to tolerate clock skew between hosts.

This discourages stale re-submission of forms. It is not a tight freshness
guarantee and must not be used for high-security purposes.
"""

import hashlib
import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from html_formgen.exceptions import FormTokenError

logger = logging.getLogger(__name__)

# Constant zone, so that hosts in different zones agree on the hour
FIXED_ZONE = timezone(timedelta(hours=-2), "UTC_-2")
HOUR_FORMAT = "%d.%m.%Y %H"


def default_salt() -> str:
    """Hardware (MAC) address of this host, formatted aa:bb:cc:dd:ee:ff."""
    node = uuid.getnode()
    return ":".join(f"{(node >> shift) & 0xff:02x}" for shift in range(40, -1, -8))


class FormTokenService:
    """
    Issue and validate form tokens.

    Usage:
        service = FormTokenService(salt="secret", timeout_hours=2)
        token = service.issue()
        service.validate(token)   # raises FormTokenError when expired
    """

    def __init__(self, salt: Optional[str] = None, timeout_hours: int = 2,
                 clock: Optional[Callable[[], datetime]] = None):
        """
        Args:
            salt: Secret mixed into every token; defaults to the host's MAC address
            timeout_hours: Hours a token stays valid
            clock: Returns the current aware datetime; injectable for tests
        """
        self.salt = default_salt() if salt is None else salt
        self.timeout_hours = timeout_hours
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def _token(self, hours_offset: int, now: datetime) -> str:
        moment = now.astimezone(FIXED_ZONE) + timedelta(hours=hours_offset)
        hasher = hashlib.sha256()
        hasher.update(self.salt.encode("utf-8"))
        hasher.update(moment.strftime(HOUR_FORMAT).encode("utf-8"))
        return hasher.hexdigest()

    def issue(self) -> str:
        """Return the token for the current hour."""
        return self._token(0, self._clock())

    def validate(self, token: str) -> None:
        """
        Check a token against the current hour and the hours before it.

        With timeout_hours = 2 the token is compared against the current
        hour and the three previous ones, then against the next hour.

        Raises:
            FormTokenError: If the token matches none of these hours
        """
        now = self._clock()
        lower_bound = -self.timeout_hours - 1
        for offset in range(0, lower_bound - 1, -1):
            if token == self._token(offset, now):
                return
        if token == self._token(1, now):
            return
        logger.warning("Rejected form token: expired or not issued by this host")
        raise FormTokenError(
            f"Form token was not issued within the last {self.timeout_hours} hours. Please reload the form."
        )

    def is_valid(self, token: str) -> bool:
        """Boolean form of validate()."""
        try:
            self.validate(token)
        except FormTokenError:
            return False
        return True
