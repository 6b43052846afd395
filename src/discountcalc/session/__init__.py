from discountcalc.session.state import (
    AmountEdited,
    CopiedFeedbackCleared,
    DiscountEdited,
    PresetSelected,
    ResultCopied,
    SessionState,
    SessionUpdated,
    reduce,
)
from discountcalc.session.controller import CalculatorSession

__all__ = [
    "AmountEdited",
    "CalculatorSession",
    "CopiedFeedbackCleared",
    "DiscountEdited",
    "PresetSelected",
    "ResultCopied",
    "SessionState",
    "SessionUpdated",
    "reduce",
]
