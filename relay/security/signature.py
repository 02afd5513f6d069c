"""Webhook signature verification.

The telephony platform signs every webhook with HMAC-SHA256 over the raw
request body using a shared secret, hex-encoded in the ``x-signature`` header.

CRITICAL: Verify against the raw bytes, before any JSON decoding.
"""

import hashlib
import hmac
import string

SIGNATURE_HEADER = "x-signature"

# Hex length of a SHA-256 digest
_DIGEST_HEX_LENGTH = hashlib.sha256().digest_size * 2
_HEX_DIGITS = frozenset(string.hexdigits.lower())


class SignatureInvalid(Exception):
    """Raised when a webhook signature is missing, malformed, or wrong."""

    pass


def compute_signature(raw_body: bytes, secret: bytes) -> str:
    """Compute the hex HMAC-SHA256 of a request body.

    Args:
        raw_body: Exact request bytes as received
        secret: Shared secret key

    Returns:
        Lowercase hex digest (64 chars)
    """
    return hmac.new(secret, raw_body, hashlib.sha256).hexdigest()


def _is_well_formed(signature: str) -> bool:
    return len(signature) == _DIGEST_HEX_LENGTH and all(c in _HEX_DIGITS for c in signature)


def verify_signature(
    raw_body: bytes,
    provided_signature_hex: str | None,
    secret: bytes,
) -> bool:
    """Check a provided signature against the body. Never raises.

    The header is compared as sent: it must be exactly the 64 lowercase hex
    characters of the digest. Anything else returns False before the
    constant-time comparison.
    """
    if not provided_signature_hex or not _is_well_formed(provided_signature_hex):
        return False

    expected = compute_signature(raw_body, secret)
    return hmac.compare_digest(provided_signature_hex.encode("ascii"), expected.encode("ascii"))


def require_valid_signature(
    raw_body: bytes,
    provided_signature_hex: str | None,
    secret: bytes,
) -> None:
    """Raise SignatureInvalid unless the signature matches."""
    if not verify_signature(raw_body, provided_signature_hex, secret):
        raise SignatureInvalid("Webhook signature verification failed")
