"""CalculatorSession: one open calculator with its state, derived quote, copy and share."""
from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Optional

from discountcalc.capabilities.protocol import Clipboard, ShareTarget
from discountcalc.core.config import CalculatorConfig
from discountcalc.domain import DomainEvent, InProcessEventDispatcher
from discountcalc.pricing.application import BuildSharePayload, GetQuote
from discountcalc.pricing.domain import IInputValidator, Quote, SharePayload

from .state import (
    AmountEdited,
    CopiedFeedbackCleared,
    CopyTarget,
    DiscountEdited,
    PresetSelected,
    ResultCopied,
    SessionState,
    SessionUpdated,
    reduce,
)

logger = logging.getLogger(__name__)


class CalculatorSession:
    """
    Holds the SessionState and applies events through reduce().
    Subscribers to SessionUpdated on .events re-render after each change.
    Clipboard and share failures are logged and never change state.
    """

    def __init__(
        self,
        ask: Callable[[Any], Any],
        validator: IInputValidator,
        config: CalculatorConfig,
        clipboard: Optional[Clipboard] = None,
        share_target: Optional[ShareTarget] = None,
    ) -> None:
        self._ask = ask
        self._validator = validator
        self._config = config
        self._clipboard = clipboard
        self._share_target = share_target
        self._state = SessionState()
        self._clear_handle: Optional[asyncio.TimerHandle] = None
        self.events = InProcessEventDispatcher()

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def presets(self) -> tuple[int, ...]:
        return self._config.preset_discounts

    @property
    def quote(self) -> Optional[Quote]:
        """Current result, or None while either field is empty or incomplete."""
        return self._ask(GetQuote(self._state.amount_raw, self._state.discount_raw))

    @property
    def active_preset(self) -> Optional[int]:
        """Preset equal to the current discount value ("63" and "63.0" both match 63)."""
        discount = self._validator.validate(self._state.discount_raw)
        if not discount:
            return None
        for preset in self._config.preset_discounts:
            if discount.value == preset:
                return preset
        return None

    def dispatch(self, event: DomainEvent) -> SessionState:
        previous = self._state
        self._state = reduce(previous, event, self._validator.filter_edit)
        logger.debug("%s: %s -> %s", type(event).__name__, previous, self._state)
        self.events.publish(SessionUpdated(self._state))
        return self._state

    def edit_amount(self, candidate: str) -> SessionState:
        return self.dispatch(AmountEdited(candidate))

    def edit_discount(self, candidate: str) -> SessionState:
        return self.dispatch(DiscountEdited(candidate))

    def select_preset(self, percent: int) -> SessionState:
        if percent not in self._config.preset_discounts:
            raise ValueError(f"{percent} is not a preset discount")
        return self.dispatch(PresetSelected(percent))

    def clear_copied(self) -> SessionState:
        self._clear_handle = None
        return self.dispatch(CopiedFeedbackCleared())

    def share_payload(self) -> Optional[SharePayload]:
        return self._ask(BuildSharePayload(self._state.amount_raw, self._state.discount_raw))

    async def copy(self, target: CopyTarget) -> bool:
        """Copy one displayed result. Returns False if there is nothing to copy or the clipboard failed."""
        event = ResultCopied(target)
        quote = self.quote
        if quote is None or self._clipboard is None:
            return False
        text = quote.discounted_display if target == "discount" else quote.with_gst_display
        try:
            await self._clipboard.write_text(text)
        except Exception:
            logger.warning("Clipboard write failed for %s result", target, exc_info=True)
            return False
        self.dispatch(event)
        self._schedule_clear()
        return True

    async def share(self) -> bool:
        """Share the current result; without a share target, copy the fallback text instead."""
        payload = self.share_payload()
        if payload is None:
            return False
        if self._share_target is not None:
            try:
                return bool(await self._share_target.share(payload))
            except Exception:
                logger.warning("Share failed", exc_info=True)
                return False
        if self._clipboard is None:
            logger.info("No share target or clipboard available")
            return False
        try:
            await self._clipboard.write_text(payload.fallback_text())
        except Exception:
            logger.warning("Clipboard fallback for share failed", exc_info=True)
            return False
        return True

    def _schedule_clear(self) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            return
        if self._clear_handle is not None:
            self._clear_handle.cancel()
        self._clear_handle = loop.call_later(self._config.copied_feedback_seconds, self.clear_copied)
