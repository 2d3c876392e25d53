"""
encoding.py - Canonical transaction payload.

The bytes that get signed are the ASCII string

    <innerId>|<source>|<target>|<amountIntegral>:<amountFraction>|<balanceIntegral>:<balanceFraction>|<currency>

Every node must rebuild exactly this string from the same field values, so
integers are rendered with plain ``str(int)`` and text fields are never
normalised or replaced.
"""

from ledgersign.amount import to_fixed_point
from ledgersign.config import (
    AMOUNT_SEPARATOR,
    CURRENCY_MAX,
    CURRENCY_MIN,
    FIELD_SEPARATOR,
    SCALE,
)
from ledgersign.errors import EncodingError


def _ascii_field(name: str, value) -> str:
    if not isinstance(value, str):
        raise EncodingError(f"{name} must be a str, got {type(value).__name__}")
    try:
        value.encode("ascii")
    except UnicodeEncodeError as exc:
        raise EncodingError(
            f"{name} contains a non-ASCII character at position {exc.start}"
        ) from exc
    return value


def _int_field(name: str, value) -> str:
    if isinstance(value, bool) or not isinstance(value, int):
        raise EncodingError(f"{name} must be an int, got {value!r}")
    return str(value)


def encode_transaction(
    inner_id: str,
    source: str,
    target: str,
    amount_integral: int,
    amount_fraction: int,
    balance_integral: int,
    balance_fraction: int,
    currency: int,
) -> bytes:
    """Build the canonical signing payload from already converted fields."""
    currency_text = _int_field("currency", currency)
    if not CURRENCY_MIN <= currency <= CURRENCY_MAX:
        raise EncodingError(
            f"currency {currency} outside [{CURRENCY_MIN}, {CURRENCY_MAX}]"
        )

    amount_text = AMOUNT_SEPARATOR.join((
        _int_field("amount_integral", amount_integral),
        _int_field("amount_fraction", amount_fraction),
    ))
    balance_text = AMOUNT_SEPARATOR.join((
        _int_field("balance_integral", balance_integral),
        _int_field("balance_fraction", balance_fraction),
    ))

    message = FIELD_SEPARATOR.join((
        _ascii_field("inner_id", inner_id),
        _ascii_field("source", source),
        _ascii_field("target", target),
        amount_text,
        balance_text,
        currency_text,
    ))
    return message.encode("ascii")


def canonical_payload(inner_id, source, target, amount, balance, currency, scale: int = SCALE) -> bytes:
    """Convert decimal amount and balance, then build the signing payload."""
    amount_value = to_fixed_point(amount, scale)
    balance_value = to_fixed_point(balance, scale)
    return encode_transaction(
        inner_id,
        source,
        target,
        amount_value.integral,
        amount_value.fraction,
        balance_value.integral,
        balance_value.fraction,
        currency,
    )
