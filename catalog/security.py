"""
Write authorization.

Mutating endpoints depend on ``require_token``, which hands the
request's ``token`` header to the ``Authorizer`` stored on the app
state.  ``TokenAuthorizer`` compares it verbatim with the configured
secret; an empty secret authorizes nothing.
"""

import hmac
import logging
from abc import ABC, abstractmethod
from typing import Optional

from fastapi import Header, Request

from .errors import Unauthorized

logger = logging.getLogger(__name__)


class Authorizer(ABC):
    """Decides whether a write request may proceed."""

    @abstractmethod
    def authorize(self, token: Optional[str]) -> None:
        """Raise ``Unauthorized`` unless ``token`` grants write access."""


class TokenAuthorizer(Authorizer):
    def __init__(self, secret: str):
        self.secret = secret or ""

    def authorize(self, token: Optional[str]) -> None:
        candidate = token or ""
        if not candidate or not self.secret or not hmac.compare_digest(candidate.encode("utf-8"), self.secret.encode("utf-8")):
            raise Unauthorized()


async def require_token(
    request: Request,
    token: Optional[str] = Header(default=None, alias="token"),
) -> None:
    try:
        request.app.state.authorizer.authorize(token)
    except Unauthorized:
        logger.warning("Rejected %s %s: invalid token", request.method, request.url.path)
        raise
