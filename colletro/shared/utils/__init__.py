"""Shared utilities: datetime, generators."""

from colletro.shared.utils.datetime import ensure_utc, utc_now
from colletro.shared.utils.generators import generate_cuid, generate_share_token

__all__ = [
    "generate_cuid",
    "generate_share_token",
    "utc_now",
    "ensure_utc",
]
