"""
engine.py - Ed25519 key generation, signing and verification via PyNaCl.
"""

import logging
import threading
from typing import Optional

from nacl.encoding import HexEncoder
from nacl.exceptions import BadSignatureError, CryptoError
from nacl.signing import SigningKey, VerifyKey

from ledgersign.config import SIGNATURE_LENGTH
from ledgersign.errors import InvalidKeyMaterial, SigningError, VerificationError
from ledgersign.keys import (
    bytes_to_private_key,
    bytes_to_public_key,
    private_key_to_bytes,
    public_key_to_bytes,
)

logger = logging.getLogger(__name__)

_BYTES_TYPES = (bytes, bytearray, memoryview)


class KeyPair:
    """A signing key and its matching verify key. Never persisted here."""

    def __init__(self, private_key: SigningKey):
        self.private_key = private_key
        self.public_key: VerifyKey = private_key.verify_key

    @property
    def public_bytes(self) -> bytes:
        return public_key_to_bytes(self.public_key)

    @property
    def private_bytes(self) -> bytes:
        return private_key_to_bytes(self.private_key)

    def __repr__(self):
        return f"KeyPair(public={self.public_key.encode(encoder=HexEncoder).decode()[:16]}...)"


class SignatureEngine:
    """
    Signs and verifies arbitrary byte payloads.

    Key generation draws from libsodium's CSPRNG and is serialized on the
    engine's own lock, one generation at a time. ``sign`` and ``verify`` only
    touch their arguments and can run concurrently without coordination.
    """

    def __init__(self):
        self._generator_lock = threading.Lock()

    def generate_key_pair(self) -> KeyPair:
        with self._generator_lock:
            signing_key = SigningKey.generate()
        key_pair = KeyPair(signing_key)
        logger.debug("Generated %r", key_pair)
        return key_pair

    def sign(self, payload: bytes, private_key) -> bytes:
        """Return the 64-byte Ed25519 signature of *payload*."""
        if not isinstance(payload, _BYTES_TYPES):
            raise SigningError(f"Payload must be bytes, got {type(payload).__name__}")

        if isinstance(private_key, _BYTES_TYPES):
            try:
                private_key = bytes_to_private_key(bytes(private_key))
            except InvalidKeyMaterial as exc:
                raise SigningError(f"Unusable private key: {exc}") from exc
        elif not isinstance(private_key, SigningKey):
            raise SigningError(f"Expected SigningKey, got {type(private_key).__name__}")

        try:
            signed = private_key.sign(bytes(payload))
        except CryptoError as exc:
            raise SigningError(f"Signing failed: {exc}") from exc
        return signed.signature

    def verify(self, payload: bytes, signature: bytes, public_key) -> bool:
        """
        True iff *signature* is a valid signature of *payload* under *public_key*.

        A well-formed signature that does not match returns False. Malformed
        input (wrong lengths, wrong types) raises VerificationError.
        """
        if not isinstance(payload, _BYTES_TYPES):
            raise VerificationError(f"Payload must be bytes, got {type(payload).__name__}")
        if not isinstance(signature, _BYTES_TYPES):
            raise VerificationError(
                f"Signature must be bytes, got {type(signature).__name__}"
            )
        if len(signature) != SIGNATURE_LENGTH:
            raise VerificationError(
                f"Signature must be {SIGNATURE_LENGTH} bytes, got {len(signature)}"
            )

        if isinstance(public_key, _BYTES_TYPES):
            try:
                public_key = bytes_to_public_key(bytes(public_key))
            except InvalidKeyMaterial as exc:
                raise VerificationError(f"Malformed public key: {exc}") from exc
        elif not isinstance(public_key, VerifyKey):
            raise VerificationError(f"Expected VerifyKey, got {type(public_key).__name__}")

        try:
            public_key.verify(bytes(payload), bytes(signature))
            return True
        except BadSignatureError:
            logger.debug("Signature does not match payload")
            return False


_default_engine: Optional[SignatureEngine] = None
_default_engine_lock = threading.Lock()


def default_engine() -> SignatureEngine:
    """Process-wide engine, created on first use."""
    global _default_engine
    with _default_engine_lock:
        if _default_engine is None:
            _default_engine = SignatureEngine()
        return _default_engine
