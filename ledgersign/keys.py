"""
keys.py - Conversion between raw bytes and Ed25519 key objects.

Key layout on the wire:
    public key  = 32 bytes
    private key = 32-byte seed || 32-byte public key (64 bytes)

Only the seed is needed to rebuild a private key; the trailing public half is
ignored when decoding and recomputed when encoding.
"""

from nacl.encoding import RawEncoder
from nacl.signing import SigningKey, VerifyKey

from ledgersign.config import PUBLIC_KEY_LENGTH, SEED_LENGTH
from ledgersign.errors import InvalidKeyMaterial


def _decode(data, encoder) -> bytes:
    try:
        raw = encoder.decode(data)
    except (ValueError, TypeError) as exc:
        raise InvalidKeyMaterial(f"Cannot decode key material: {exc}") from exc
    if isinstance(raw, (bytearray, memoryview)):
        raw = bytes(raw)
    if not isinstance(raw, bytes):
        raise InvalidKeyMaterial(f"Key material must be bytes, got {type(raw).__name__}")
    return raw


def bytes_to_public_key(data, encoder=RawEncoder) -> VerifyKey:
    raw = _decode(data, encoder)
    if len(raw) != PUBLIC_KEY_LENGTH:
        raise InvalidKeyMaterial(
            f"Public key must be {PUBLIC_KEY_LENGTH} bytes, got {len(raw)}"
        )
    return VerifyKey(raw)


def bytes_to_private_key(data, encoder=RawEncoder) -> SigningKey:
    """Build a signing key from the leading 32-byte seed of *data*."""
    raw = _decode(data, encoder)
    if len(raw) < SEED_LENGTH:
        raise InvalidKeyMaterial(
            f"Private key must be at least {SEED_LENGTH} bytes, got {len(raw)}"
        )
    return SigningKey(raw[:SEED_LENGTH])


def public_key_to_bytes(key: VerifyKey, encoder=RawEncoder) -> bytes:
    if not isinstance(key, VerifyKey):
        raise InvalidKeyMaterial(f"Expected VerifyKey, got {type(key).__name__}")
    return key.encode(encoder=encoder)


def private_key_to_bytes(key: SigningKey, encoder=RawEncoder) -> bytes:
    """Return seed || public key, optionally text-encoded."""
    if not isinstance(key, SigningKey):
        raise InvalidKeyMaterial(f"Expected SigningKey, got {type(key).__name__}")
    return encoder.encode(key.encode() + key.verify_key.encode())
