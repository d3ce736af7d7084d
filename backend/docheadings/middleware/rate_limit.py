"""Upload rate limiting backed by SlowAPI storage, keyed by client IP."""

import logging

from fastapi import Request
from limits import parse
from slowapi import Limiter
from slowapi.util import get_remote_address

from docheadings.config import Settings
from docheadings.exceptions import RateLimitExceededError

logger = logging.getLogger(__name__)

UPLOAD_SCOPE = "upload"


def build_limiter(app_settings: Settings) -> Limiter:
    """Create the limiter for one app.

    In-memory storage by default; point rate_limit_storage_uri at Redis when
    running several workers.
    """
    return Limiter(
        key_func=get_remote_address,
        storage_uri=app_settings.rate_limit_storage_uri,
        enabled=app_settings.rate_limit_enabled,
    )


def upload_limit(app_settings: Settings) -> str:
    return f"{app_settings.rate_limit_upload_per_minute}/minute"


async def rate_limit_upload(request: Request) -> None:
    """Dependency enforcing the upload limit of the app the request hit.

    Raises:
        RateLimitExceededError: If the client used up its allowance
    """
    limiter: Limiter = request.app.state.limiter
    if not limiter.enabled:
        return

    limit = upload_limit(request.app.state.settings)
    client = get_remote_address(request)
    if not limiter.limiter.hit(parse(limit), UPLOAD_SCOPE, client):
        logger.warning(f"Upload rate limit exceeded for {client} ({limit})")
        raise RateLimitExceededError(f"Limit is {limit}")
