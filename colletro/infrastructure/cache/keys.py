"""Cache key builders. Single place for key format (DRY).

Key components (user_id, etc.) must not contain CACHE_KEY_SEP to avoid
ambiguous or colliding keys.
"""

from colletro.core.constants import CACHE_KEY_SEP, CACHE_PREFIX_USER


def _validate_key_component(value: str, name: str) -> None:
    """Raise ValueError if value contains the cache key separator."""
    if CACHE_KEY_SEP in value:
        raise ValueError(
            f"Cache key component {name!r} must not contain separator {CACHE_KEY_SEP!r}"
        )


def user_status_key(user_id: str) -> str:
    """Cache key for a user's {is_admin, is_verified} flags."""
    _validate_key_component(user_id, "user_id")
    return f"{CACHE_PREFIX_USER}{CACHE_KEY_SEP}status{CACHE_KEY_SEP}{user_id}"
