"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import operator
import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any

from cactus_shop.domain.exceptions import ValidationError

DEFAULT_CURRENCY = "USD"

_CURRENCY_RE = re.compile(r"^[A-Z]{3}$")
_SYMBOLS = {"USD": "$", "EUR": "€", "GBP": "£"}


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Uses Decimal so totals are exact; a cactus at 10.10 times three is
    30.30, not 30.299999.  Amounts in different currencies never mix:
    adding or comparing them raises ValidationError.
    """

    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < 0:
            raise ValidationError(f"Money amount cannot be negative, got {self.amount}")
        if not _CURRENCY_RE.match(self.currency):
            raise ValidationError(f"Currency must be a 3-letter code, got {self.currency!r}")

    @staticmethod
    def of(amount: str | int | Decimal, currency: str = DEFAULT_CURRENCY) -> Money:
        """Build from anything Decimal accepts as text."""
        try:
            return Money(Decimal(str(amount)), currency)
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc

    @staticmethod
    def zero(currency: str = DEFAULT_CURRENCY) -> Money:
        return Money(Decimal("0.00"), currency)

    @staticmethod
    def sum(amounts: Iterable[Money], currency: str = DEFAULT_CURRENCY) -> Money:
        """Add up *amounts*, all of which must be in *currency*."""
        total = Money.zero(currency)
        for money in amounts:
            total = total + money
        return total

    def __add__(self, other: Money) -> Money:
        return Money(self._combine(other, operator.add), self.currency)

    def __sub__(self, other: Money) -> Money:
        result = self._combine(other, operator.sub)
        if result < 0:
            raise ValidationError("Money subtraction would result in a negative amount")
        return Money(result, self.currency)

    def __mul__(self, factor: int) -> Money:
        if isinstance(factor, bool) or not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor, self.currency)

    def __lt__(self, other: Money) -> bool:
        return self._combine(other, operator.lt)

    def __le__(self, other: Money) -> bool:
        return self._combine(other, operator.le)

    def __gt__(self, other: Money) -> bool:
        return self._combine(other, operator.gt)

    def __ge__(self, other: Money) -> bool:
        return self._combine(other, operator.ge)

    def __str__(self) -> str:
        symbol = _SYMBOLS.get(self.currency)
        if symbol is None:
            return f"{self.amount:.2f} {self.currency}"
        return f"{symbol}{self.amount:.2f}"

    def _combine(self, other: Money, op: Callable[[Decimal, Decimal], Any]) -> Any:
        if self.currency != other.currency:
            raise ValidationError(f"Cannot combine {self.currency} with {other.currency}")
        return op(self.amount, other.amount)


_EMAIL_RE = re.compile(r"^[A-Za-z0-9+_.-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")

MIN_PHONE_LENGTH = 10


@dataclass(frozen=True)
class Email:
    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValidationError("Email cannot be blank")
        if not _EMAIL_RE.match(self.value):
            raise ValidationError(f"Invalid email format: {self.value}")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PhoneNumber:
    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValidationError("Phone number cannot be blank")
        if len(self.value) < MIN_PHONE_LENGTH:
            raise ValidationError(
                f"Phone number must be at least {MIN_PHONE_LENGTH} characters"
            )

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Volume:
    """Bottle volume of a fertilizer, in whole milliliters."""

    milliliters: int

    def __post_init__(self) -> None:
        if not isinstance(self.milliliters, int) or isinstance(self.milliliters, bool):
            raise ValidationError(
                f"Volume must be an integer, got {type(self.milliliters).__name__}"
            )
        if self.milliliters <= 0:
            raise ValidationError(
                f"Volume must be positive, but was: {self.milliliters}"
            )

    def __str__(self) -> str:
        return f"{self.milliliters} ml"


@dataclass(frozen=True)
class Address:
    street: str
    city: str
    postal_code: str

    def __post_init__(self) -> None:
        if not self.street or not self.street.strip():
            raise ValidationError("Street cannot be blank")
        if not self.city or not self.city.strip():
            raise ValidationError("City cannot be blank")
        if not self.postal_code or not self.postal_code.strip():
            raise ValidationError("Postal code cannot be blank")

    def full_address(self) -> str:
        return f"{self.street}, {self.city}, {self.postal_code}"
