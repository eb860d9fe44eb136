"""
Platform fee math.

Amounts are integer minor units (cents). The platform keeps a fixed
percentage of every payment; the rest goes to the payee. Fees round to the
nearest cent with ties away from zero, so 0.5 cents becomes 1 cent.

Amounts above MAX_AMOUNT_MINOR_UNITS are rejected: the figures are shared with
a JavaScript front end, which cannot represent larger integers exactly.
"""

from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Optional, Union

from core.domain.constants import DEFAULT_PLATFORM_FEE_PERCENTAGE, MAX_AMOUNT_MINOR_UNITS
from core.domain.models import FeeBreakdown


class InvalidAmountError(ValueError):
    """Amount is not a non-negative integer within the supported range"""


def _check_amount(amount_minor_units) -> int:
    # bool is an int subclass, but True cents is never meant
    if isinstance(amount_minor_units, bool) or not isinstance(amount_minor_units, int):
        raise InvalidAmountError(
            f"Amount must be an integer number of minor units, got {amount_minor_units!r}"
        )
    if amount_minor_units < 0:
        raise InvalidAmountError(f"Amount must not be negative, got {amount_minor_units}")
    if amount_minor_units > MAX_AMOUNT_MINOR_UNITS:
        raise InvalidAmountError(
            f"Amount {amount_minor_units} exceeds the maximum of {MAX_AMOUNT_MINOR_UNITS}"
        )
    return amount_minor_units


class PlatformFeeCalculator:
    """Splits amounts between the platform and the payee at a fixed percentage"""

    __slots__ = ("_fee_percentage",)

    def __init__(self, fee_percentage: int = DEFAULT_PLATFORM_FEE_PERCENTAGE):
        if isinstance(fee_percentage, bool) or not isinstance(fee_percentage, int):
            raise ValueError(f"Fee percentage must be an integer, got {fee_percentage!r}")
        if not 0 <= fee_percentage <= 100:
            raise ValueError(f"Fee percentage must be between 0 and 100, got {fee_percentage}")
        self._fee_percentage = fee_percentage

    @classmethod
    def from_settings(cls, settings) -> "PlatformFeeCalculator":
        return cls(settings.platform_fee_percentage)

    @property
    def fee_percentage(self) -> int:
        return self._fee_percentage

    def calculate_fee(self, amount_minor_units: int) -> int:
        amount = _check_amount(amount_minor_units)
        fee = Decimal(amount * self._fee_percentage) / Decimal(100)
        return int(fee.quantize(Decimal(1), rounding=ROUND_HALF_UP))

    def amount_after_fee(self, amount_minor_units: int) -> int:
        return amount_minor_units - self.calculate_fee(amount_minor_units)

    def split(self, amount_minor_units: int) -> FeeBreakdown:
        fee = self.calculate_fee(amount_minor_units)
        return FeeBreakdown(
            amount=amount_minor_units,
            fee_percentage=self._fee_percentage,
            platform_fee=fee,
            net_amount=amount_minor_units - fee,
        )

    def __eq__(self, other):
        if not isinstance(other, PlatformFeeCalculator):
            return NotImplemented
        return self._fee_percentage == other._fee_percentage

    def __hash__(self):
        return hash(self._fee_percentage)

    def __repr__(self):
        return f"PlatformFeeCalculator(fee_percentage={self._fee_percentage})"


default_calculator = PlatformFeeCalculator()


def _calculator_for(fee_percentage: Optional[int]) -> PlatformFeeCalculator:
    if fee_percentage is None:
        return default_calculator
    return PlatformFeeCalculator(fee_percentage)


def calculate_platform_fee(amount_minor_units: int, fee_percentage: Optional[int] = None) -> int:
    """
    Platform fee in minor units, rounded to the nearest unit (ties up).

    >>> calculate_platform_fee(1000)
    50
    >>> calculate_platform_fee(10)
    1
    """
    return _calculator_for(fee_percentage).calculate_fee(amount_minor_units)


def amount_after_platform_fee(amount_minor_units: int, fee_percentage: Optional[int] = None) -> int:
    """Amount left for the payee once the platform fee is deducted."""
    return _calculator_for(fee_percentage).amount_after_fee(amount_minor_units)


def format_minor_units_to_display(amount_minor_units: Union[int, float, Decimal]) -> str:
    """
    Minor units as a major-unit string with two decimals, e.g. 1050 -> "10.50".
    No currency symbol, no thousands separator.
    """
    if isinstance(amount_minor_units, int):
        sign = "-" if amount_minor_units < 0 else ""
        major, minor = divmod(abs(amount_minor_units), 100)
        return f"{sign}{major}.{minor:02d}"

    if isinstance(amount_minor_units, float):
        amount = Decimal(repr(amount_minor_units))
    else:
        amount = Decimal(amount_minor_units)
    # Precision must cover every digit the quantized result keeps
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(amount.as_tuple().digits), amount.adjusted() + 3) + 2
        display = (amount / Decimal(100)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    if display.is_zero():
        display = display.copy_abs()
    return str(display)
