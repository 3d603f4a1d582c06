"""Core constants: cache key prefixes and shared literal values.

Single source of truth for cache and deduplication key structure (DRY).
"""

# Cache key prefixes (used with :id)
CACHE_PREFIX_USER = "user"
DEDUP_PREFIX_COLLECTIONS = "collections"

# Delimiter for composite keys
CACHE_KEY_SEP = ":"

# Default cover fit per clone source (recommended covers are artwork, community covers are photos)
COVER_FIT_CONTAIN = "contain"
COVER_FIT_COVER = "cover"
