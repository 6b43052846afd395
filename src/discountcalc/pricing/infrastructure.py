"""Pricing: validator, calculator and formatter implementations."""
from __future__ import annotations

import logging
import math
import re
from decimal import ROUND_HALF_UP, Decimal

from discountcalc.core.config import DEFAULT_GST_MULTIPLIER, CalculatorConfig
from .domain import INVALID, PricingResult, SharePayload, ValidationResult

logger = logging.getLogger(__name__)

# Non-negative decimal literal or a prefix of one: "", "12", "12.", ".5", "."
_DECIMAL_PREFIX = re.compile(r"[0-9]*\.?[0-9]*")

# Float noise is cleared at this many places before rounding to cents
_NOISE_PLACES = 9
_CENTS = Decimal("0.01")


def filter_edit(previous: str, candidate: str) -> str:
    """Accept candidate if it is empty or a decimal prefix, otherwise keep previous."""
    if _DECIMAL_PREFIX.fullmatch(candidate):
        return candidate
    logger.debug("Rejected edit %r, keeping %r", candidate, previous)
    return previous


def validate(raw: str) -> ValidationResult:
    """Parse raw text into Valid(value) or INVALID. A bare "." is a prefix, not a number."""
    if not raw or not _DECIMAL_PREFIX.fullmatch(raw):
        return INVALID
    if raw == ".":
        return INVALID
    value = float(raw)
    if not math.isfinite(value):
        return INVALID
    return ValidationResult.valid(value)


def compute(amount: float, discount_percent: float, gst_multiplier: float = DEFAULT_GST_MULTIPLIER) -> PricingResult:
    """Discounted price and price with GST. No rounding; discounts above 100 go negative."""
    discounted = amount - amount * (discount_percent / 100)
    return PricingResult(discounted_price=discounted, price_with_gst=discounted * gst_multiplier)


def format_price(value: float) -> str:
    """
    Display string for a price: "590" for integral values, otherwise two decimals
    rounded half away from zero ("5.005" -> "5.01").
    """
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"Cannot format non-finite value {value!r}")
    if value.is_integer():
        return str(int(value))
    normalised = round(value, _NOISE_PLACES)
    cents = Decimal(repr(normalised)).quantize(_CENTS, rounding=ROUND_HALF_UP)
    if cents == 0:
        cents = abs(cents)
    return str(cents)


def build_share_text(amount_raw: str, discount_raw: str, discounted_display: str, with_gst_display: str) -> str:
    return (
        f"Price: {discounted_display} | GST Price: {with_gst_display} "
        f"(Amt: {amount_raw}, Disc: {discount_raw}%)"
    )


def build_share_payload(
    amount_raw: str,
    discount_raw: str,
    discounted_display: str,
    with_gst_display: str,
    config: CalculatorConfig | None = None,
) -> SharePayload:
    config = config or CalculatorConfig()
    return SharePayload(
        title=config.share_title,
        text=build_share_text(amount_raw, discount_raw, discounted_display, with_gst_display),
        url=config.share_url,
    )


class DecimalInputValidator:
    """IInputValidator over non-negative decimal text."""

    def filter_edit(self, previous: str, candidate: str) -> str:
        return filter_edit(previous, candidate)

    def validate(self, raw: str) -> ValidationResult:
        return validate(raw)


class GstPricingCalculator:
    """IPricingCalculator with the configured GST multiplier."""

    def __init__(self, config: CalculatorConfig):
        self._multiplier = config.gst_multiplier

    def compute(self, amount: float, discount_percent: float) -> PricingResult:
        return compute(amount, discount_percent, self._multiplier)


class PriceFormatter:
    def format(self, value: float) -> str:
        return format_price(value)
