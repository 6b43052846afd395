"""Module protocol: any object with register_into(app) can be registered in the calculator app."""
from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from discountcalc.core.app import CalculatorApp


@runtime_checkable
class Module(Protocol):
    """Building block: configured externally, attached via app.register(module)."""

    def register_into(self, app: CalculatorApp) -> None:
        """Attach the module to the app: bindings, capabilities, subscriptions."""
        ...
