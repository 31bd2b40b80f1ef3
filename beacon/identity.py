# beacon/identity.py
import secrets
import uuid

from .errors import EntropyUnavailable

CLIENT_ID_LENGTH = 32


def generate_client_id():
    """Return a fresh client id: 32 lowercase hex chars, UUIDv4 bit layout.

    The version nibble (byte 6) is forced to 4 and the variant bits
    (byte 8) to 0b10, leaving 122 random bits.
    """
    try:
        raw = secrets.token_bytes(16)
    except (OSError, NotImplementedError) as exc:
        raise EntropyUnavailable(f"secure random source failed: {exc}") from exc
    return uuid.UUID(bytes=raw, version=4).hex


def is_valid_client_id(value):
    # Any non-empty cookie value is reused as-is, ids minted elsewhere included.
    return bool(value and value.strip())
