"""Session state and its events. reduce(state, event) is the only way state changes."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable, Literal, Optional

from discountcalc.domain import DomainEvent, ValueObject
from discountcalc.pricing.infrastructure import filter_edit

CopyTarget = Literal["discount", "gst"]
COPY_TARGETS: tuple[str, ...] = ("discount", "gst")


@dataclass(frozen=True)
class SessionState(ValueObject):
    """Two raw input strings and which result (if any) was just copied."""

    amount_raw: str = ""
    discount_raw: str = ""
    copied: Optional[CopyTarget] = None


@dataclass(frozen=True)
class AmountEdited(DomainEvent):
    candidate: str


@dataclass(frozen=True)
class DiscountEdited(DomainEvent):
    candidate: str


@dataclass(frozen=True)
class PresetSelected(DomainEvent):
    percent: int


@dataclass(frozen=True)
class ResultCopied(DomainEvent):
    target: CopyTarget

    def __post_init__(self) -> None:
        if self.target not in COPY_TARGETS:
            raise ValueError(f"Unknown copy target {self.target!r}; expected one of {COPY_TARGETS}")


@dataclass(frozen=True)
class CopiedFeedbackCleared(DomainEvent):
    pass


@dataclass(frozen=True)
class SessionUpdated(DomainEvent):
    """Published after every transition; carries the new state."""

    state: SessionState


def reduce(
    state: SessionState,
    event: DomainEvent,
    edit_filter: Callable[[str, str], str] = filter_edit,
) -> SessionState:
    """Old state + event -> new state. Rejected keystrokes leave the field unchanged."""
    if isinstance(event, AmountEdited):
        return replace(state, amount_raw=edit_filter(state.amount_raw, event.candidate))
    if isinstance(event, DiscountEdited):
        return replace(state, discount_raw=edit_filter(state.discount_raw, event.candidate))
    if isinstance(event, PresetSelected):
        return replace(state, discount_raw=str(event.percent))
    if isinstance(event, ResultCopied):
        return replace(state, copied=event.target)
    if isinstance(event, CopiedFeedbackCleared):
        return replace(state, copied=None)
    raise TypeError(f"Unsupported session event {type(event).__name__}")
