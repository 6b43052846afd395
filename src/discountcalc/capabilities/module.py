"""
CapabilitiesModule: host capabilities as one object.
Configure via .clipboard(...) and .share_target(...); register with app.register(capabilities).
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from discountcalc.capabilities.adapters import MemoryClipboard
from discountcalc.capabilities.protocol import Clipboard, ShareTarget

if TYPE_CHECKING:
    from discountcalc.core.app import CalculatorApp


class CapabilitiesModule:
    """Clipboard and share target. Either may be left out; sessions then degrade gracefully."""

    def __init__(self) -> None:
        self._clipboard: Clipboard | None = None
        self._share_target: ShareTarget | None = None

    def clipboard(self, impl: Clipboard) -> CapabilitiesModule:
        self._clipboard = impl
        return self

    def in_memory(self) -> CapabilitiesModule:
        """In-memory clipboard out of the box for tests and prototypes."""
        self._clipboard = MemoryClipboard()
        return self

    def share_target(self, impl: ShareTarget) -> CapabilitiesModule:
        self._share_target = impl
        return self

    def register_into(self, app: CalculatorApp) -> None:
        if self._clipboard is not None:
            app.container.register_instance(Clipboard, self._clipboard)
        if self._share_target is not None:
            app.container.register_instance(ShareTarget, self._share_target)
