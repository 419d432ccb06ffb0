"""Cryptographic commit-reveal primitives for fair game outcomes."""

import hashlib
import hmac
from typing import Any, Union


def canonical_encoding(value: Any) -> bytes:
    """
    Encode a committed value as the HMAC message.

    Integers become their decimal string and strings are used as-is, so a
    roll of 4 and a mover of "USER" hash as b"4" and b"USER".

    Args:
        value: The selected value (int or str)

    Returns:
        UTF-8 bytes of the canonical string form
    """
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise TypeError(f"cannot commit to value of type {type(value).__name__}")
    return str(value).encode("utf-8")


def make_proof(key: bytes, value: Any) -> str:
    """
    Create the commitment proof for a value.

    Args:
        key: Secret reveal key
        value: The value to commit to

    Returns:
        Hex HMAC-SHA256 digest of the canonical value
    """
    return hmac.new(key, canonical_encoding(value), hashlib.sha256).hexdigest()


def decode_key(key: Union[bytes, str]) -> bytes:
    """Accept a reveal key as raw bytes or as the hex string shown to players."""
    if isinstance(key, str):
        return bytes.fromhex(key.strip())
    return bytes(key)


def verify_commitment(value: Any, proof: str, key: Union[bytes, str]) -> bool:
    """
    Check a revealed value against its commitment proof.

    Args:
        value: The revealed value
        proof: The hex digest published before the reveal
        key: The revealed key (bytes or hex)

    Returns:
        True if the proof matches, False for any tampered field
    """
    try:
        raw_key = decode_key(key)
        expected = make_proof(raw_key, value)
        return hmac.compare_digest(expected, proof.strip().lower())
    except (AttributeError, TypeError, ValueError):
        # non-hex key, uncommittable value or malformed proof
        return False
