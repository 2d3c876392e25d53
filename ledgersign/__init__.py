# Amounts and payload
from .amount import FixedPointAmount, to_fixed_point
from .encoding import canonical_payload, encode_transaction

# Keys and signatures
from .encoders import Base58Encoder
from .keys import (
    bytes_to_private_key,
    bytes_to_public_key,
    private_key_to_bytes,
    public_key_to_bytes,
)
from .engine import KeyPair, SignatureEngine, default_engine

# Transactions
from .transaction import (
    TransactionFields,
    TransactionSigner,
    generate_sign_of_transaction,
    verify_sign_of_transaction,
)

# Errors
from .errors import (
    EncodingError,
    InvalidAmount,
    InvalidKeyMaterial,
    LedgerSignError,
    SigningError,
    VerificationError,
)

__all__ = [
    # Amounts and payload
    "FixedPointAmount",
    "to_fixed_point",
    "canonical_payload",
    "encode_transaction",
    # Keys and signatures
    "Base58Encoder",
    "bytes_to_private_key",
    "bytes_to_public_key",
    "private_key_to_bytes",
    "public_key_to_bytes",
    "KeyPair",
    "SignatureEngine",
    "default_engine",
    # Transactions
    "TransactionFields",
    "TransactionSigner",
    "generate_sign_of_transaction",
    "verify_sign_of_transaction",
    # Errors
    "LedgerSignError",
    "InvalidAmount",
    "EncodingError",
    "InvalidKeyMaterial",
    "SigningError",
    "VerificationError",
]
