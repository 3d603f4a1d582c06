"""Rate limiter instance for SlowAPI.

Shared so both main (app.state.limiter) and route modules can use the
same instance without circular imports. Central limit strings and
decorators keep rate limits DRY.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

limiter = Limiter(key_func=get_remote_address)

# Single source of truth for rate limit strings and decorators.
WRITE_ENDPOINT_LIMIT = "120/minute"
SHARE_LIMIT = "20/minute"
ADMIN_BULK_LIMIT = "10/minute"
SEARCH_LIMIT = "60/minute"

limit_writes = limiter.limit(WRITE_ENDPOINT_LIMIT)
limit_share = limiter.limit(SHARE_LIMIT)
limit_admin_bulk = limiter.limit(ADMIN_BULK_LIMIT)
limit_search = limiter.limit(SEARCH_LIMIT)
