from discountcalc.core.app import CalculatorApp
from discountcalc.core.container import Container
from discountcalc.core.module import Module
from discountcalc.core.config import CalculatorConfig, ConfigError, load_config_from_env
from discountcalc.core.log import setup_logging

__all__ = [
    "CalculatorApp",
    "Container",
    "Module",
    "CalculatorConfig",
    "ConfigError",
    "load_config_from_env",
    "setup_logging",
]
