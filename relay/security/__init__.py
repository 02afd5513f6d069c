"""Request authentication helpers."""

from relay.security.signature import (
    SignatureInvalid,
    compute_signature,
    require_valid_signature,
    verify_signature,
)

__all__ = [
    "SignatureInvalid",
    "compute_signature",
    "require_valid_signature",
    "verify_signature",
]
