from slowapi import Limiter
from slowapi.util import get_remote_address

from appraisal_api.core.config import settings

# Applied to every route through SlowAPIMiddleware in main.py
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[f"{settings.rate_limit_per_minute}/minute"],
    enabled=settings.rate_limit_enabled,
)
