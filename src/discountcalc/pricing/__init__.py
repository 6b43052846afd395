"""Pricing bounded context: validate, compute, format, share."""
from discountcalc.pricing.domain import (
    INVALID,
    IInputValidator,
    IPriceFormatter,
    IPricingCalculator,
    PricingResult,
    Quote,
    SharePayload,
    ValidationResult,
)
from discountcalc.pricing.infrastructure import (
    DecimalInputValidator,
    GstPricingCalculator,
    PriceFormatter,
    build_share_payload,
    build_share_text,
    compute,
    filter_edit,
    format_price,
    validate,
)
from discountcalc.pricing.application import BuildSharePayload, BuildSharePayloadHandler, GetQuote, GetQuoteHandler
from discountcalc.pricing.module import PricingModule, pricing_module

__all__ = [
    "INVALID",
    "BuildSharePayload",
    "BuildSharePayloadHandler",
    "DecimalInputValidator",
    "GetQuote",
    "GetQuoteHandler",
    "GstPricingCalculator",
    "IInputValidator",
    "IPriceFormatter",
    "IPricingCalculator",
    "PriceFormatter",
    "PricingModule",
    "PricingResult",
    "Quote",
    "SharePayload",
    "ValidationResult",
    "build_share_payload",
    "build_share_text",
    "compute",
    "filter_edit",
    "format_price",
    "pricing_module",
    "validate",
]
