"""
Currency codes and single-currency amounts.
"""

from dataclasses import dataclass

from irslib.swap.errors import ValidationError


@dataclass(frozen=True, order=True)
class Currency:
    """ISO-4217 style three letter currency code."""

    code: str

    def __post_init__(self):
        if len(self.code) != 3 or not self.code.isascii() or not self.code.isalpha() or not self.code.isupper():
            raise ValidationError(f"Invalid currency code: {self.code!r}")

    @classmethod
    def of(cls, code: str) -> "Currency":
        """Parse a currency code, ignoring case and surrounding whitespace."""
        return cls(code.strip().upper())

    def __str__(self) -> str:
        return self.code


EUR = Currency("EUR")
USD = Currency("USD")
GBP = Currency("GBP")
JPY = Currency("JPY")
CHF = Currency("CHF")


@dataclass(frozen=True)
class CurrencyAmount:
    """An amount of money in a single currency."""

    currency: Currency
    amount: float

    def negated(self) -> "CurrencyAmount":
        return CurrencyAmount(self.currency, -self.amount)

    def plus(self, other: "CurrencyAmount") -> "CurrencyAmount":
        self._check_currency(other)
        return CurrencyAmount(self.currency, self.amount + other.amount)

    def minus(self, other: "CurrencyAmount") -> "CurrencyAmount":
        self._check_currency(other)
        return CurrencyAmount(self.currency, self.amount - other.amount)

    def multiplied_by(self, factor: float) -> "CurrencyAmount":
        return CurrencyAmount(self.currency, self.amount * factor)

    def _check_currency(self, other: "CurrencyAmount") -> None:
        if other.currency != self.currency:
            raise ValidationError(
                f"Currency mismatch: {self.currency} and {other.currency}"
            )

    def __str__(self) -> str:
        return f"{self.currency} {self.amount:,.2f}"
