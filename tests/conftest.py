import logging

import pytest

from discountcalc import CalculatorApp, CalculatorConfig, pricing_module
from discountcalc.capabilities import CapabilitiesModule, MemoryClipboard


@pytest.fixture(autouse=True)
def reset_package_logger():
    # CLI runs install a handler bound to the runner's captured stdout
    yield
    logger = logging.getLogger("discountcalc")
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def config():
    return CalculatorConfig()


@pytest.fixture
def clipboard():
    return MemoryClipboard()


@pytest.fixture
def calculator_app(config, clipboard):
    return (
        CalculatorApp(config)
        .register(pricing_module())
        .register(CapabilitiesModule().clipboard(clipboard))
    )


@pytest.fixture
def session(calculator_app):
    return calculator_app.session()
