import string

import pytest
from hypothesis import given, strategies as st

from discountcalc.pricing import INVALID, DecimalInputValidator, ValidationResult, filter_edit, validate


@pytest.mark.parametrize("candidate", ["", "0", "12", "12.", ".5", ".", "250.5", "007"])
def test_filter_edit_accepts_decimal_prefixes(candidate):
    assert filter_edit("1", candidate) == candidate


@pytest.mark.parametrize("candidate", ["-5", "1.2.3", "12a", "abc", "1e5", " 5", "5 ", "+3", "1,5", "٣"])
def test_filter_edit_keeps_previous_on_rejected_input(candidate):
    assert filter_edit("12.5", candidate) == "12.5"


def test_filter_edit_rejects_any_string_with_letter_minus_or_two_points():
    for bad in ["1x", "x1", "-", "--1", "1..", "..", "1.1.", "0.5-"]:
        assert filter_edit("", bad) == ""


def test_validate_empty_is_invalid():
    assert validate("") is INVALID
    assert not validate("")


def test_validate_lone_point_is_invalid():
    assert validate(".") == ValidationResult.invalid()


@pytest.mark.parametrize("raw,expected", [
    ("0", 0.0),
    ("1000", 1000.0),
    ("250.5", 250.5),
    ("5.", 5.0),
    (".5", 0.5),
])
def test_validate_parses_complete_numbers(raw, expected):
    result = validate(raw)
    assert result.is_valid
    assert result.value == expected


def test_validate_rejects_non_decimal_text():
    for raw in ["-1", "abc", "1.2.3", "inf", "nan"]:
        assert not validate(raw)


def test_validate_rejects_overflowing_digit_string():
    assert not validate("9" * 400)


def test_decimal_input_validator_delegates():
    v = DecimalInputValidator()
    assert v.filter_edit("1", "1a") == "1"
    assert v.validate("42").value == 42.0


_decimal_chars = st.sampled_from("0123456789.")
_forbidden = st.one_of(
    st.sampled_from(string.ascii_letters + "éßЖλ"),
    st.just("-"),
)


@given(
    previous=st.text(alphabet="0123456789", max_size=6),
    head=st.text(alphabet=_decimal_chars, max_size=6),
    bad=_forbidden,
    tail=st.text(max_size=6),
)
def test_filter_edit_never_stores_letters_or_minus(previous, head, bad, tail):
    assert filter_edit(previous, head + bad + tail) == previous


@given(
    previous=st.text(alphabet="0123456789", max_size=6),
    parts=st.lists(st.text(alphabet="0123456789", max_size=4), min_size=3, max_size=5),
)
def test_filter_edit_never_stores_two_decimal_points(previous, parts):
    assert filter_edit(previous, ".".join(parts)) == previous


@given(st.text(alphabet=_decimal_chars, max_size=12))
def test_accepted_text_is_stored_verbatim(candidate):
    if candidate.count(".") <= 1:
        assert filter_edit("", candidate) == candidate
