"""Identifier and token generators."""

import secrets

from cuid2 import cuid_wrapper

# Bytes of randomness in a public share token (hex-encoded: 32 chars).
SHARE_TOKEN_BYTES = 16

_next_cuid = cuid_wrapper()


def generate_cuid() -> str:
    """Primary key for a new row (CUID2)."""
    return str(_next_cuid())


def generate_share_token() -> str:
    """Unguessable token for a collection's public link."""
    return secrets.token_hex(SHARE_TOKEN_BYTES)
