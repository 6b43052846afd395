"""
In-process capability adapters.
Real hosts (browser, desktop, mobile) provide their own Clipboard/ShareTarget.
"""
from __future__ import annotations

from typing import Callable, Optional

from discountcalc.pricing.domain import SharePayload


class MemoryClipboard:
    """Clipboard kept in memory; history in write order."""

    def __init__(self) -> None:
        self.history: list[str] = []

    async def write_text(self, text: str) -> None:
        self.history.append(text)

    @property
    def text(self) -> Optional[str]:
        return self.history[-1] if self.history else None


class CallbackShareTarget:
    """Share by passing the fallback text (text + url) to a callback, e.g. typer.echo."""

    def __init__(self, callback: Callable[[str], None]) -> None:
        self._callback = callback

    async def share(self, payload: SharePayload) -> bool:
        self._callback(payload.fallback_text())
        return True
