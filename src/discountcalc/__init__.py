"""
discountcalc: discount and GST price calculator.
Pure core (validate, compute, format) composed into an app via app.register(module).
"""
from discountcalc.core import CalculatorApp, CalculatorConfig, Container, Module, load_config_from_env
from discountcalc.pricing import PricingModule, pricing_module
from discountcalc.session import CalculatorSession, SessionState

__all__ = [
    "CalculatorApp",
    "CalculatorConfig",
    "CalculatorSession",
    "Container",
    "Module",
    "PricingModule",
    "SessionState",
    "load_config_from_env",
    "pricing_module",
]
