from slowapi import Limiter
from slowapi.util import get_remote_address

from utils import AppSettings
from utils.logging_config import setup_logger

logger = setup_logger("rate_limit", "router.log")

# Shared by every user route; create_app applies the configured limit to it
limiter = Limiter(key_func=get_remote_address)

_rate_limit = AppSettings.model_fields["rate_limit"].default


def current_rate_limit() -> str:
    """Limit string evaluated by slowapi on every limited request."""
    return _rate_limit


def configure_limiter(app_settings: AppSettings) -> Limiter:
    """
    Apply the rate limit settings to the shared limiter.

    Counters are cleared so a freshly built application starts with a full
    allowance for every client.

    Args:
        app_settings: Application settings carrying the limit and the on/off switch

    Returns:
        Limiter: The shared limiter
    """
    global _rate_limit
    _rate_limit = app_settings.rate_limit
    limiter.enabled = app_settings.rate_limit_enabled
    limiter.reset()
    logger.info(
        f"Rate limit {_rate_limit} per client "
        f"({'enabled' if limiter.enabled else 'disabled'})"
    )
    return limiter
