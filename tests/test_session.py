import asyncio
import logging

import pytest

from discountcalc import CalculatorApp, CalculatorConfig, pricing_module
from discountcalc.capabilities import CapabilitiesModule, MemoryClipboard
from discountcalc.pricing import SharePayload
from discountcalc.session import (
    AmountEdited,
    CopiedFeedbackCleared,
    DiscountEdited,
    PresetSelected,
    ResultCopied,
    SessionState,
    SessionUpdated,
    reduce,
)


class FailingClipboard:
    async def write_text(self, text: str) -> None:
        raise RuntimeError("clipboard unavailable")


class RecordingShareTarget:
    def __init__(self, result=True, error=None):
        self.payloads = []
        self._result = result
        self._error = error

    async def share(self, payload: SharePayload) -> bool:
        if self._error is not None:
            raise self._error
        self.payloads.append(payload)
        return self._result


def _session(clipboard=None, share_target=None, config=None):
    capabilities = CapabilitiesModule()
    if clipboard is not None:
        capabilities.clipboard(clipboard)
    if share_target is not None:
        capabilities.share_target(share_target)
    app = CalculatorApp(config or CalculatorConfig()).register(pricing_module()).register(capabilities)
    return app.session()


class TestReduce:
    def test_edits_pass_through_filter(self):
        state = reduce(SessionState(), AmountEdited("12"))
        state = reduce(state, AmountEdited("12a"))
        assert state.amount_raw == "12"
        state = reduce(state, DiscountEdited("5.5"))
        state = reduce(state, DiscountEdited("5.5.5"))
        assert state.discount_raw == "5.5"

    def test_preset_sets_discount_string(self):
        state = reduce(SessionState(discount_raw="12.5"), PresetSelected(63))
        assert state.discount_raw == "63"

    def test_copy_flag_set_and_cleared(self):
        state = reduce(SessionState(), ResultCopied("gst"))
        assert state.copied == "gst"
        assert reduce(state, CopiedFeedbackCleared()).copied is None

    def test_state_is_not_mutated(self):
        before = SessionState(amount_raw="1")
        after = reduce(before, AmountEdited("10"))
        assert before.amount_raw == "1"
        assert after is not before

    def test_unknown_event_raises(self):
        with pytest.raises(TypeError):
            reduce(SessionState(), SessionUpdated(SessionState()))

    def test_unknown_copy_target_raises(self):
        with pytest.raises(ValueError):
            ResultCopied("total")


class TestScenarios:
    def test_half_off_thousand(self, session):
        session.edit_amount("1000")
        session.edit_discount("50")
        quote = session.quote
        assert quote.pricing.discounted_price == 500
        assert (quote.discounted_display, quote.with_gst_display) == ("500", "590")

    def test_fractional_amount_rounds_for_display(self, session):
        session.edit_amount("250.5")
        session.edit_discount("45")
        quote = session.quote
        assert (quote.discounted_display, quote.with_gst_display) == ("137.78", "162.57")

    def test_full_discount(self, session):
        session.edit_amount("100")
        session.edit_discount("100")
        quote = session.quote
        assert (quote.discounted_display, quote.with_gst_display) == ("0", "0")

    def test_preset_63_on_200(self, session):
        session.edit_amount("200")
        session.select_preset(63)
        assert session.state.discount_raw == "63"
        quote = session.quote
        assert (quote.discounted_display, quote.with_gst_display) == ("74", "87.32")

    def test_tiny_fraction_is_not_shown_as_integer(self, session):
        session.edit_amount("2.0000000001")
        session.edit_discount("0")
        assert session.quote.discounted_display == "2.00"

    def test_overflowing_price_gives_no_quote(self, session):
        session.edit_amount("17" + "0" * 307)
        session.edit_discount("0")
        assert session.quote is None
        assert session.share_payload() is None

    def test_no_quote_when_a_field_is_empty_or_incomplete(self, session):
        assert session.quote is None
        session.edit_amount("100")
        assert session.quote is None
        session.edit_discount(".")
        assert session.quote is None
        session.edit_discount("10")
        assert session.quote is not None
        session.edit_amount("")
        assert session.quote is None


class TestPresets:
    def test_default_presets(self, session):
        assert session.presets == (45,) + tuple(range(50, 75))
        assert len(session.presets) == 26

    def test_unknown_preset_rejected(self, session):
        with pytest.raises(ValueError):
            session.select_preset(46)
        assert session.state.discount_raw == ""

    def test_active_preset_matches_numeric_value(self, session):
        assert session.active_preset is None
        session.edit_discount("63.0")
        assert session.active_preset == 63
        session.edit_discount("63.5")
        assert session.active_preset is None


def test_session_publishes_updates(session):
    seen = []
    session.events.subscribe(SessionUpdated, lambda event: seen.append(event.state))
    session.edit_amount("5")
    session.edit_amount("5x")
    assert [s.amount_raw for s in seen] == ["5", "5"]


class TestCopy:
    @pytest.mark.asyncio
    async def test_copy_writes_display_string(self, session, clipboard):
        session.edit_amount("250.5")
        session.edit_discount("45")
        assert await session.copy("discount") is True
        assert clipboard.text == "137.78"
        assert session.state.copied == "discount"
        assert await session.copy("gst") is True
        assert clipboard.history == ["137.78", "162.57"]
        assert session.state.copied == "gst"

    @pytest.mark.asyncio
    async def test_copy_without_result_does_nothing(self, session, clipboard):
        session.edit_amount("10")
        assert await session.copy("discount") is False
        assert clipboard.history == []
        assert session.state.copied is None

    @pytest.mark.asyncio
    async def test_copy_feedback_clears_after_delay(self, clipboard):
        session = _session(clipboard=clipboard, config=CalculatorConfig(copied_feedback_seconds=0))
        session.edit_amount("10")
        session.edit_discount("10")
        await session.copy("gst")
        assert session.state.copied == "gst"
        await asyncio.sleep(0.01)
        assert session.state.copied is None

    @pytest.mark.asyncio
    async def test_clipboard_failure_keeps_state(self, caplog):
        session = _session(clipboard=FailingClipboard())
        session.edit_amount("10")
        session.edit_discount("10")
        before = session.state
        with caplog.at_level(logging.WARNING, logger="discountcalc"):
            assert await session.copy("discount") is False
        assert session.state == before
        assert "Clipboard write failed" in caplog.text


class TestShare:
    @pytest.mark.asyncio
    async def test_share_hands_payload_to_target(self):
        target = RecordingShareTarget()
        session = _session(share_target=target)
        session.edit_amount("1000")
        session.edit_discount("50")
        assert await session.share() is True
        (payload,) = target.payloads
        assert payload.title == "Discount Result"
        assert payload.text == "Price: 500 | GST Price: 590 (Amt: 1000, Disc: 50%)"

    @pytest.mark.asyncio
    async def test_share_without_result(self):
        target = RecordingShareTarget()
        session = _session(share_target=target)
        assert await session.share() is False
        assert target.payloads == []

    @pytest.mark.asyncio
    async def test_share_failure_is_reported_not_raised(self):
        session = _session(share_target=RecordingShareTarget(error=RuntimeError("cancelled")))
        session.edit_amount("1")
        session.edit_discount("1")
        assert await session.share() is False
        assert session.state.amount_raw == "1"

    @pytest.mark.asyncio
    async def test_share_falls_back_to_clipboard(self):
        clipboard = MemoryClipboard()
        config = CalculatorConfig(share_url="https://calc.example")
        session = _session(clipboard=clipboard, config=config)
        session.edit_amount("200")
        session.select_preset(63)
        assert await session.share() is True
        assert clipboard.text == "Price: 74 | GST Price: 87.32 (Amt: 200, Disc: 63%) https://calc.example"

    @pytest.mark.asyncio
    async def test_share_without_any_capability(self):
        session = _session()
        session.edit_amount("1")
        session.edit_discount("1")
        assert await session.share() is False
