"""CalculatorApp: composed from modules via app.register(module). Owns config and the DI container."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable

from discountcalc.core.config import CalculatorConfig
from discountcalc.core.container import Container
from discountcalc.core.module import Module

if TYPE_CHECKING:
    from discountcalc.ddd import Query
    from discountcalc.session.controller import CalculatorSession

logger = logging.getLogger(__name__)


class CalculatorApp:
    """
    Calculator application. Composed from modules via register(module);
    answers queries with ask(query) and opens sessions for a presentation layer.
    """

    def __init__(self, config: CalculatorConfig | None = None) -> None:
        self._config = config or CalculatorConfig()
        self._modules: list[Module] = []
        self._container = Container()
        self._query_handlers: dict[type, Any] = {}
        self._container.register_instance(CalculatorConfig, self._config)
        self._container.register_instance("config", self._config)

    def register(self, module: Module) -> CalculatorApp:
        """Register a module (PricingModule, CapabilitiesModule, etc.). Returns self for chaining."""
        module.register_into(self)
        self._modules.append(module)
        logger.debug("Registered module %s", type(module).__name__)
        return self

    def add_query_handler(self, query_type: type, handler: type | Callable[..., Any]) -> None:
        """One handler per query type; a class handler is resolved from the container on use."""
        if query_type in self._query_handlers:
            raise ValueError(f"Handler for {query_type.__name__} already registered")
        self._query_handlers[query_type] = handler

    def ask(self, query: Query) -> Any:
        """Run the handler registered for type(query)."""
        try:
            handler = self._query_handlers[type(query)]
        except KeyError:
            raise KeyError(f"No handler for {type(query).__name__}") from None
        if isinstance(handler, type):
            handler = self._container.resolve(handler)
        return handler(query)

    @property
    def config(self) -> CalculatorConfig:
        return self._config

    @property
    def container(self) -> Container:
        """DI container: registration and resolution of dependencies."""
        return self._container

    def session(self) -> CalculatorSession:
        """New calculator session wired with the registered validator and capabilities."""
        from discountcalc.capabilities.protocol import Clipboard, ShareTarget
        from discountcalc.pricing.domain import IInputValidator
        from discountcalc.session.controller import CalculatorSession

        c = self._container
        return CalculatorSession(
            ask=self.ask,
            validator=c.resolve(IInputValidator),
            config=self._config,
            clipboard=c.resolve(Clipboard) if c.has(Clipboard) else None,
            share_target=c.resolve(ShareTarget) if c.has(ShareTarget) else None,
        )
