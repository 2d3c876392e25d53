"""
encoders.py - Base58 text encoding for keys and signatures.

Follows PyNaCl's encoder protocol (static ``encode``/``decode`` on bytes) so it
can be passed anywhere ``nacl.encoding.HexEncoder`` is accepted.
"""

import base58


class Base58Encoder:
    """Bitcoin-alphabet Base58, no padding, no checksum."""

    @staticmethod
    def encode(data: bytes) -> bytes:
        return base58.b58encode(data)

    @staticmethod
    def decode(data) -> bytes:
        return base58.b58decode(data)


def b58encode_str(data: bytes) -> str:
    """Base58-encode raw bytes into a str."""
    return Base58Encoder.encode(data).decode("ascii")
