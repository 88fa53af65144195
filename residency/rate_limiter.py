"""Rate limiter shared by the calculation endpoints."""

from slowapi import Limiter
from slowapi.util import get_remote_address

from residency.config import settings

# Keyed by client address; calculations are cheap but unauthenticated
limiter = Limiter(key_func=get_remote_address)

CALCULATION_LIMIT = settings.calculation_rate_limit
