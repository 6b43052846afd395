"""
PricingModule: the pricing bounded context as one object.
Binds validator, calculator and formatter protocols to implementations and
registers the query handlers. Register via app.register(module).
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Type

from discountcalc.core.module import Module
from discountcalc.ddd import Query

from .application import BuildSharePayload, BuildSharePayloadHandler, GetQuote, GetQuoteHandler
from .domain import IInputValidator, IPriceFormatter, IPricingCalculator
from .infrastructure import DecimalInputValidator, GstPricingCalculator, PriceFormatter

if TYPE_CHECKING:
    from discountcalc.core.app import CalculatorApp


class PricingModule(Module):
    """
    .bind() .query() then app.register(module).
    Queries are resolved by type through app.ask(query).
    """

    def __init__(self, name: str = "pricing") -> None:
        self.name = name
        self._bindings: list[tuple[Type[Any], Type[Any]]] = []
        self._queries: list[tuple[Type[Query], Type[Any] | Callable[..., Any]]] = []

    def bind(self, interface: Type[Any], impl: Type[Any]) -> PricingModule:
        """Register interface -> implementation for DI (validator, calculator, formatter)."""
        self._bindings.append((interface, impl))
        return self

    def query(self, query_type: Type[Query], handler: Type[Any] | Callable[..., Any]) -> PricingModule:
        self._queries.append((query_type, handler))
        return self

    def register_into(self, app: CalculatorApp) -> None:
        container = app.container

        for iface, impl in self._bindings:
            container.register_class(impl)
            container.register(iface, lambda c=container, i=impl: c.resolve(i))

        for query_type, handler in self._queries:
            if isinstance(handler, type):
                container.register_class(handler)
            app.add_query_handler(query_type, handler)


def pricing_module() -> PricingModule:
    """Default wiring: decimal validator, GST calculator, two-decimal formatter."""
    return (
        PricingModule()
        .bind(IInputValidator, DecimalInputValidator)
        .bind(IPricingCalculator, GstPricingCalculator)
        .bind(IPriceFormatter, PriceFormatter)
        .query(GetQuote, GetQuoteHandler)
        .query(BuildSharePayload, BuildSharePayloadHandler)
    )
