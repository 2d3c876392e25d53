"""
amount.py - Fixed-point representation of monetary amounts.

An amount is split into a signed whole-unit ``integral`` and an unsigned
``fraction`` counted in 1/SCALE sub-units, so that

    amount == integral + fraction / SCALE

The conversion rounds towards negative infinity at the sub-unit boundary
(ROUND_FLOOR). For positive amounts this drops the digits beyond the scale.
For negative amounts the whole part is floored and the fraction stays
positive, e.g. -0.5 becomes (-1, SCALE / 2), so the sign is never lost when
the whole part would otherwise be zero.
"""

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, ROUND_FLOOR, localcontext

from ledgersign.config import FRACTION_MAX, INTEGRAL_MAX, INTEGRAL_MIN, SCALE
from ledgersign.errors import InvalidAmount

# Integral part never has more digits than this, anything larger is out of range
_MAX_INTEGRAL_DIGITS = len(str(INTEGRAL_MAX))

# ASCII digits only: no underscores, no other scripts' digits, no nan/inf
_DECIMAL_TEXT = re.compile(r"[+-]?[0-9]+(\.[0-9]+)?([eE][+-]?[0-9]+)?", re.ASCII)


def _scale_digits(scale) -> int:
    if isinstance(scale, bool) or not isinstance(scale, int):
        raise InvalidAmount(f"Scale must be an int, got {type(scale).__name__}")
    digits = len(str(scale)) - 1
    if scale < 1 or scale != 10 ** digits or scale > FRACTION_MAX + 1:
        raise InvalidAmount(f"Scale must be a power of ten up to 1e19, got {scale}")
    return digits


def _to_decimal(value) -> Decimal:
    """Coerce a caller supplied amount into a finite Decimal."""
    if isinstance(value, bool) or value is None:
        raise InvalidAmount(f"Amount must be numeric, got {value!r}")

    with localcontext() as ctx:
        ctx.traps[InvalidOperation] = True
        try:
            if isinstance(value, Decimal):
                number = value
            elif isinstance(value, int):
                number = Decimal(value)
            elif isinstance(value, float):
                # repr gives the shortest string that round-trips, not the binary expansion
                number = Decimal(repr(value))
            elif isinstance(value, str):
                text = value.strip()
                if not _DECIMAL_TEXT.fullmatch(text):
                    raise InvalidAmount(f"Amount is not a plain decimal: {value!r}")
                number = Decimal(text)
            else:
                raise InvalidAmount(f"Unsupported amount type: {type(value).__name__}")
        except InvalidOperation as exc:
            raise InvalidAmount(f"Amount is not a number: {value!r}") from exc

    if not number.is_finite():
        raise InvalidAmount(f"Amount must be finite, got {value!r}")
    return number


@dataclass(frozen=True)
class FixedPointAmount:
    """Immutable (integral, fraction) pair at a fixed scale."""

    integral: int
    fraction: int
    scale: int = SCALE

    def __post_init__(self):
        _scale_digits(self.scale)
        if isinstance(self.integral, bool) or not isinstance(self.integral, int):
            raise InvalidAmount(f"Integral must be an int, got {self.integral!r}")
        if isinstance(self.fraction, bool) or not isinstance(self.fraction, int):
            raise InvalidAmount(f"Fraction must be an int, got {self.fraction!r}")
        if not INTEGRAL_MIN <= self.integral <= INTEGRAL_MAX:
            raise InvalidAmount(
                f"Integral {self.integral} outside [{INTEGRAL_MIN}, {INTEGRAL_MAX}]"
            )
        if not 0 <= self.fraction < self.scale:
            raise InvalidAmount(f"Fraction {self.fraction} outside [0, {self.scale})")

    @property
    def negative(self) -> bool:
        # fraction is a magnitude, so the sign is entirely in integral
        return self.integral < 0

    @staticmethod
    def from_decimal(value, scale: int = SCALE) -> "FixedPointAmount":
        """Convert a Decimal, int, numeric str or float into a fixed-point amount."""
        digits = _scale_digits(scale)
        number = _to_decimal(value)

        if number and number.adjusted() >= _MAX_INTEGRAL_DIGITS:
            raise InvalidAmount(f"Amount {value!r} exceeds the integral field")

        with localcontext() as ctx:
            # exact: enough precision for every digit of the product
            ctx.prec = len(number.as_tuple().digits) + digits + _MAX_INTEGRAL_DIGITS + 2
            ctx.traps[InvalidOperation] = True
            units = int((number * scale).to_integral_value(rounding=ROUND_FLOOR))

        integral, fraction = divmod(units, scale)
        return FixedPointAmount(integral, fraction, scale)

    def to_decimal(self) -> Decimal:
        """Exact Decimal value of this amount."""
        digits = _scale_digits(self.scale)
        units = self.integral * self.scale + self.fraction
        with localcontext() as ctx:
            ctx.prec = len(str(abs(units))) + 2
            return Decimal(units).scaleb(-digits)


def to_fixed_point(value, scale: int = SCALE) -> FixedPointAmount:
    """Shortcut for ``FixedPointAmount.from_decimal``."""
    return FixedPointAmount.from_decimal(value, scale)
