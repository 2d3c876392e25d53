#!/usr/bin/env python3
"""
LedgerSign CLI

Command-line front end for generating keys and signing transactions.
Keys and signatures are passed as Base58 strings.

Usage:
    # New key pair
    ledgersign keygen

    # Show the exact bytes that get signed
    ledgersign payload --inner-id TX1 --source <addr> --target <addr> \
        --amount 12.5 --balance 100 --currency 1

    # Sign / verify
    ledgersign sign ... --private-key <base58>
    ledgersign verify ... --signature <base58> --public-key <base58>
"""

import argparse
import logging
import sys

from ledgersign.config import SCALE
from ledgersign.encoders import Base58Encoder, b58encode_str
from ledgersign.engine import SignatureEngine
from ledgersign.errors import LedgerSignError
from ledgersign.keys import bytes_to_private_key, bytes_to_public_key
from ledgersign.transaction import TransactionFields, TransactionSigner

logger = logging.getLogger(__name__)


def _add_transaction_args(parser):
    parser.add_argument("--inner-id", required=True, help="Transaction inner id")
    parser.add_argument("--source", required=True, help="Source wallet address")
    parser.add_argument("--target", required=True, help="Target wallet address")
    parser.add_argument("--amount", required=True, help="Amount as a decimal string")
    parser.add_argument("--balance", required=True, help="Balance as a decimal string")
    parser.add_argument("--currency", type=int, default=1, help="Currency code (0-255)")


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="ledgersign",
        description="Ed25519 transaction signing",
    )

    parser.add_argument(
        "--scale",
        type=int,
        default=SCALE,
        help="Fractional scale (default: network SCALE)"
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )

    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("keygen", help="Generate a new key pair")

    payload = commands.add_parser("payload", help="Print the canonical signing payload")
    _add_transaction_args(payload)

    sign = commands.add_parser("sign", help="Sign a transaction")
    _add_transaction_args(sign)
    sign.add_argument("--private-key", required=True, help="Private key (Base58)")

    verify = commands.add_parser("verify", help="Verify a transaction signature")
    _add_transaction_args(verify)
    verify.add_argument("--signature", required=True, help="Signature (Base58)")
    verify.add_argument("--public-key", required=True, help="Public key (Base58)")

    return parser.parse_args(argv)


def _fields(args) -> TransactionFields:
    return TransactionFields(
        inner_id=args.inner_id,
        source=args.source,
        target=args.target,
        amount=args.amount,
        balance=args.balance,
        currency=args.currency,
    )


def run(args) -> int:
    engine = SignatureEngine()
    signer = TransactionSigner(engine=engine, scale=args.scale)

    if args.command == "keygen":
        key_pair = engine.generate_key_pair()
        print(f"public:  {b58encode_str(key_pair.public_bytes)}")
        print(f"private: {b58encode_str(key_pair.private_bytes)}")
        return 0

    if args.command == "payload":
        print(_fields(args).signing_payload(args.scale).decode("ascii"))
        return 0

    if args.command == "sign":
        private_key = bytes_to_private_key(args.private_key, encoder=Base58Encoder)
        print(signer.sign(_fields(args), private_key))
        return 0

    public_key = bytes_to_public_key(args.public_key, encoder=Base58Encoder)
    if signer.verify_sign_of_transaction(_fields(args), args.signature, public_key):
        print("valid")
        return 0
    print("invalid")
    return 1


def main(argv=None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Setup logging
    level = logging.DEBUG if args.debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S"
    )

    try:
        return run(args)
    except LedgerSignError as e:
        logger.error("%s failed: %s", args.command, e)
        return 2


if __name__ == "__main__":
    sys.exit(main())
