"""
errors.py - Exceptions raised by LedgerSign.

A signature that simply does not match is not an error: ``verify`` returns
False for it. Everything below means the input could not be processed at all.
"""


class LedgerSignError(Exception):
    """Base class for all LedgerSign errors."""


class InvalidAmount(LedgerSignError, ValueError):
    """Amount is not numeric or does not fit the fixed-point fields."""


class EncodingError(LedgerSignError, ValueError):
    """A transaction field cannot be rendered into the canonical payload."""


class InvalidKeyMaterial(LedgerSignError, ValueError):
    """Key bytes have the wrong length or cannot be decoded."""


class SigningError(LedgerSignError):
    """The private key or payload cannot be used for signing."""


class VerificationError(LedgerSignError):
    """Signature, key or payload passed to verify is structurally malformed."""
