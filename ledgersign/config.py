"""
config.py - LedgerSign protocol constants.
Every node on the network must use the same values, otherwise signatures
produced on one node will not verify on another.
"""

from nacl.bindings import (
    crypto_sign_BYTES,
    crypto_sign_PUBLICKEYBYTES,
    crypto_sign_SEEDBYTES,
)

# Number of fractional digits carried by an amount
FRACTION_DIGITS = 18

# Fixed denominator of the fractional field (1 unit = 1e-18)
SCALE = 10 ** FRACTION_DIGITS

# Integral field is a signed 32-bit integer
INTEGRAL_BITS = 32
INTEGRAL_MIN = -(2 ** (INTEGRAL_BITS - 1))
INTEGRAL_MAX = 2 ** (INTEGRAL_BITS - 1) - 1

# Fractional field is an unsigned 64-bit integer
FRACTION_BITS = 64
FRACTION_MAX = 2 ** FRACTION_BITS - 1

# Currency code is a single byte
CURRENCY_MIN = 0
CURRENCY_MAX = 255

# Canonical payload separators
FIELD_SEPARATOR = "|"
AMOUNT_SEPARATOR = ":"

# Ed25519 sizes (bytes)
SEED_LENGTH = crypto_sign_SEEDBYTES               # 32
PUBLIC_KEY_LENGTH = crypto_sign_PUBLICKEYBYTES    # 32
PRIVATE_KEY_LENGTH = SEED_LENGTH + PUBLIC_KEY_LENGTH  # 64, seed || public
SIGNATURE_LENGTH = crypto_sign_BYTES              # 64
