"""Pricing: queries and handlers (DI of validator, calculator and formatter)."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from discountcalc.core.config import CalculatorConfig
from discountcalc.ddd import Query

from .domain import IInputValidator, IPriceFormatter, IPricingCalculator, Quote, SharePayload
from .infrastructure import build_share_payload


@dataclass(frozen=True)
class GetQuote(Query):
    amount_raw: str
    discount_raw: str


@dataclass(frozen=True)
class BuildSharePayload(Query):
    amount_raw: str
    discount_raw: str


class GetQuoteHandler:
    """validate -> compute -> format. Returns None unless both inputs are complete numbers with a finite result."""

    def __init__(
        self,
        input_validator: IInputValidator,
        pricing_calculator: IPricingCalculator,
        price_formatter: IPriceFormatter,
    ):
        self._validator = input_validator
        self._calculator = pricing_calculator
        self._formatter = price_formatter

    def __call__(self, query: GetQuote) -> Optional[Quote]:
        amount = self._validator.validate(query.amount_raw)
        discount = self._validator.validate(query.discount_raw)
        if not (amount and discount):
            return None
        pricing = self._calculator.compute(amount.value, discount.value)
        if not (math.isfinite(pricing.discounted_price) and math.isfinite(pricing.price_with_gst)):
            return None
        return Quote(
            amount=amount.value,
            discount_percent=discount.value,
            pricing=pricing,
            discounted_display=self._formatter.format(pricing.discounted_price),
            with_gst_display=self._formatter.format(pricing.price_with_gst),
        )


class BuildSharePayloadHandler:
    def __init__(self, get_quote: GetQuoteHandler, config: CalculatorConfig):
        self._get_quote = get_quote
        self._config = config

    def __call__(self, query: BuildSharePayload) -> Optional[SharePayload]:
        quote = self._get_quote(GetQuote(query.amount_raw, query.discount_raw))
        if quote is None:
            return None
        return build_share_payload(
            query.amount_raw,
            query.discount_raw,
            quote.discounted_display,
            quote.with_gst_display,
            self._config,
        )
