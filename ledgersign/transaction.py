"""
transaction.py - Signing and verifying ledger transactions.

Signatures travel as Base58 strings over the canonical payload built by
``ledgersign.encoding``.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from ledgersign.config import SCALE
from ledgersign.encoders import Base58Encoder, b58encode_str
from ledgersign.encoding import canonical_payload
from ledgersign.engine import SignatureEngine, default_engine
from ledgersign.errors import VerificationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransactionFields:
    """The caller-owned fields that make up a signed transaction."""

    inner_id: str
    source: str
    target: str
    amount: object
    balance: object
    currency: int

    def signing_payload(self, scale: int = SCALE) -> bytes:
        """Returns the bytes to be signed."""
        return canonical_payload(
            self.inner_id,
            self.source,
            self.target,
            self.amount,
            self.balance,
            self.currency,
            scale,
        )

    def __repr__(self):
        return f"Tx({self.inner_id}, {self.source[:8]}→{self.target[:8]}, {self.amount})"


class TransactionSigner:
    """Produces and checks Base58 signatures for transactions."""

    def __init__(self, engine: Optional[SignatureEngine] = None, scale: int = SCALE):
        self.engine = engine or default_engine()
        self.scale = scale

    def sign(self, fields: TransactionFields, private_key) -> str:
        payload = fields.signing_payload(self.scale)
        logger.debug("Signing the message [%s]", payload.decode("ascii"))
        signature = self.engine.sign(payload, private_key)
        return b58encode_str(signature)

    def generate_sign_of_transaction(
        self,
        inner_id: str,
        source: str,
        target: str,
        amount,
        balance,
        currency: int,
        private_key,
    ) -> str:
        """Sign a transaction given as loose fields; returns the Base58 signature."""
        fields = TransactionFields(inner_id, source, target, amount, balance, currency)
        return self.sign(fields, private_key)

    def verify_sign_of_transaction(self, fields: TransactionFields, signature: str, public_key) -> bool:
        """Rebuild the payload for *fields* and check a Base58 signature against it."""
        try:
            raw_signature = Base58Encoder.decode(signature)
        except (ValueError, TypeError) as exc:
            raise VerificationError(f"Signature is not valid Base58: {exc}") from exc

        payload = fields.signing_payload(self.scale)
        valid = self.engine.verify(payload, raw_signature, public_key)
        if not valid:
            logger.debug("Rejected signature for transaction %s", fields.inner_id)
        return valid


def generate_sign_of_transaction(inner_id, source, target, amount, balance, currency, private_key) -> str:
    """Sign with the default engine and the network SCALE."""
    return TransactionSigner().generate_sign_of_transaction(
        inner_id, source, target, amount, balance, currency, private_key
    )


def verify_sign_of_transaction(fields: TransactionFields, signature: str, public_key) -> bool:
    return TransactionSigner().verify_sign_of_transaction(fields, signature, public_key)
