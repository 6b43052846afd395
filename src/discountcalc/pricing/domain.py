"""Pricing context: value objects and service protocols (no framework code)."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

from discountcalc.domain import ValueObject


@dataclass(frozen=True)
class ValidationResult(ValueObject):
    """Valid(value) when value is set, Invalid otherwise."""

    value: Optional[float] = None

    @property
    def is_valid(self) -> bool:
        return self.value is not None

    def __bool__(self) -> bool:
        return self.is_valid

    @classmethod
    def valid(cls, value: float) -> ValidationResult:
        return cls(value)

    @classmethod
    def invalid(cls) -> ValidationResult:
        return INVALID


INVALID = ValidationResult()


@dataclass(frozen=True)
class PricingResult(ValueObject):
    """Discounted price and its tax-inclusive variant, at full float precision."""

    discounted_price: float
    price_with_gst: float


@dataclass(frozen=True)
class Quote(ValueObject):
    """A PricingResult together with the inputs it came from and its display strings."""

    amount: float
    discount_percent: float
    pricing: PricingResult
    discounted_display: str
    with_gst_display: str


@dataclass(frozen=True)
class SharePayload(ValueObject):
    title: str
    text: str
    url: Optional[str] = None

    def fallback_text(self) -> str:
        """Text copied to the clipboard when no share target is available."""
        if self.url:
            return f"{self.text} {self.url}"
        return self.text


class IInputValidator(Protocol):
    def filter_edit(self, previous: str, candidate: str) -> str:
        ...

    def validate(self, raw: str) -> ValidationResult:
        ...


class IPricingCalculator(Protocol):
    def compute(self, amount: float, discount_percent: float) -> PricingResult:
        ...


class IPriceFormatter(Protocol):
    def format(self, value: float) -> str:
        ...
