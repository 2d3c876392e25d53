import unittest
from decimal import Decimal

import base58

from ledgersign import (
    EncodingError,
    InvalidAmount,
    SignatureEngine,
    SigningError,
    TransactionFields,
    TransactionSigner,
    VerificationError,
    bytes_to_private_key,
    generate_sign_of_transaction,
    verify_sign_of_transaction,
)

MICRO = 10 ** 6
SEED = bytes.fromhex("9d61b19deffd5a60ba844af492ec2cc44449c5697b326919703bac031cae7f60")
EXPECTED_PAYLOAD = b"TX1|4TsX...|4TsY...|12:500000|100:0|1"
# Recorded Base58 signature of EXPECTED_PAYLOAD under SEED
EXPECTED_SIGNATURE = (
    "3AbdVom96GcjkxsY1tm9zYpgULScW4n5VpDDH7sb5TyKbtNCG6CK29iuPNF9mdg4WM4KUZVMvdzErkWBoWBCVhSo"
)


class TestTransactionSigner(unittest.TestCase):
    def setUp(self):
        self.engine = SignatureEngine()
        self.signer = TransactionSigner(engine=self.engine, scale=MICRO)
        self.private_key = bytes_to_private_key(SEED)
        self.public_key = self.private_key.verify_key
        self.fields = TransactionFields(
            "TX1", "4TsX...", "4TsY...", Decimal("12.5"), Decimal("100.0"), 1
        )

    def test_signing_payload(self):
        self.assertEqual(self.fields.signing_payload(MICRO), EXPECTED_PAYLOAD)

    def test_signature_matches_engine_over_canonical_payload(self):
        signature = self.signer.generate_sign_of_transaction(
            "TX1", "4TsX...", "4TsY...", Decimal("12.5"), Decimal("100.0"), 1, self.private_key
        )
        self.assertIsInstance(signature, str)
        raw = base58.b58decode(signature)
        self.assertEqual(raw, self.engine.sign(EXPECTED_PAYLOAD, self.private_key))
        self.assertTrue(self.engine.verify(EXPECTED_PAYLOAD, raw, self.public_key))

    def test_recorded_signature(self):
        signature = self.signer.generate_sign_of_transaction(
            "TX1", "4TsX...", "4TsY...", Decimal("12.5"), Decimal("100.0"), 1, self.private_key
        )
        self.assertEqual(signature, EXPECTED_SIGNATURE)
        self.assertTrue(
            self.signer.verify_sign_of_transaction(self.fields, EXPECTED_SIGNATURE, self.public_key)
        )

    def test_signature_is_stable(self):
        self.assertEqual(
            self.signer.sign(self.fields, self.private_key),
            self.signer.sign(self.fields, SEED + self.public_key.encode()),
        )

    def test_verify_round_trip(self):
        signature = self.signer.sign(self.fields, self.private_key)
        self.assertTrue(self.signer.verify_sign_of_transaction(self.fields, signature, self.public_key))

    def test_verify_rejects_changed_fields(self):
        signature = self.signer.sign(self.fields, self.private_key)
        changed = TransactionFields("TX1", "4TsX...", "4TsZ...", Decimal("12.5"), Decimal("100.0"), 1)
        self.assertFalse(self.signer.verify_sign_of_transaction(changed, signature, self.public_key))

        changed = TransactionFields("TX1", "4TsX...", "4TsY...", Decimal("12.500001"), Decimal("100.0"), 1)
        self.assertFalse(self.signer.verify_sign_of_transaction(changed, signature, self.public_key))

    def test_amounts_equal_after_scaling_share_a_signature(self):
        same = TransactionFields("TX1", "4TsX...", "4TsY...", "12.5000001", 100, 1)
        self.assertEqual(
            self.signer.sign(same, self.private_key),
            self.signer.sign(self.fields, self.private_key),
        )

    def test_malformed_signature_raises(self):
        with self.assertRaises(VerificationError):
            self.signer.verify_sign_of_transaction(self.fields, "0OIl", self.public_key)

        short = base58.b58encode(b"\x01" * 10).decode()
        with self.assertRaises(VerificationError):
            self.signer.verify_sign_of_transaction(self.fields, short, self.public_key)

    def test_errors_surface_unchanged(self):
        with self.assertRaises(InvalidAmount):
            self.signer.generate_sign_of_transaction(
                "TX1", "A", "B", "twelve", 1, 1, self.private_key
            )
        with self.assertRaises(EncodingError):
            self.signer.generate_sign_of_transaction(
                "TX1", "Ä", "B", 1, 1, 1, self.private_key
            )
        with self.assertRaises(SigningError):
            self.signer.generate_sign_of_transaction(
                "TX1", "A", "B", 1, 1, 1, b"too short"
            )

    def test_logs_payload_before_signing(self):
        with self.assertLogs("ledgersign.transaction", level="DEBUG") as cm:
            self.signer.sign(self.fields, self.private_key)
        self.assertIn("Signing the message [TX1|4TsX...|4TsY...|12:500000|100:0|1]", cm.output[0])

    def test_module_level_helpers_use_network_scale(self):
        signature = generate_sign_of_transaction(
            "TX1", "4TsX...", "4TsY...", Decimal("12.5"), Decimal("100.0"), 1, self.private_key
        )
        self.assertTrue(verify_sign_of_transaction(self.fields, signature, self.public_key))
        self.assertFalse(self.signer.verify_sign_of_transaction(self.fields, signature, self.public_key))


class TestTransactionFields(unittest.TestCase):

    def test_payload_built_from_field_values(self):
        fields = TransactionFields("TX9", "A", "B", Decimal("-0.5"), "3.25", 7)
        self.assertEqual(fields.signing_payload(MICRO), b"TX9|A|B|-1:500000|3:250000|7")

    def test_immutable(self):
        fields = TransactionFields("TX1", "A", "B", 1, 1, 1)
        with self.assertRaises(AttributeError):
            fields.amount = 2

    def test_equality(self):
        self.assertEqual(
            TransactionFields("TX1", "A", "B", 1, 2, 1),
            TransactionFields("TX1", "A", "B", 1, 2, 1),
        )
        self.assertNotEqual(
            TransactionFields("TX1", "A", "B", 1, 2, 1),
            TransactionFields("TX2", "A", "B", 1, 2, 1),
        )


if __name__ == "__main__":
    unittest.main()
