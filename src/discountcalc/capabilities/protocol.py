"""Host capability protocols: clipboard and share sheet. Implementations come from the presentation layer."""
from typing import Protocol, runtime_checkable

from discountcalc.pricing.domain import SharePayload


@runtime_checkable
class Clipboard(Protocol):
    """Write text to the host clipboard. May raise; callers treat failure as non-fatal."""

    async def write_text(self, text: str) -> None:
        ...


@runtime_checkable
class ShareTarget(Protocol):
    """Hand a payload to the host share sheet. Returns False if the user or host declined."""

    async def share(self, payload: SharePayload) -> bool:
        ...
