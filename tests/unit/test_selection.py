"""Unit tests for selection list parsing."""

import pytest

from cutr.errors import SelectionError
from cutr.selection import (
    IllegalListValue,
    InvalidRangeOrder,
    RangePair,
    Single,
    classify_token,
    format_selection,
    parse_extraction,
    parse_selection,
    selector_to_range,
)


def test_parse_selection_converts_singles_and_ranges_to_half_open_ranges() -> None:
    """Singles and closed ranges should become 0-based half-open ranges."""

    assert parse_selection("1,3,5-7") == [range(0, 1), range(2, 3), range(4, 7)]
    assert parse_selection("1") == [range(0, 1)]
    assert parse_selection("2-10") == [range(1, 10)]


def test_parse_selection_preserves_input_order_and_repeats() -> None:
    """Parser should neither sort, merge, nor de-duplicate ranges."""

    assert parse_selection("5-7,1-3,2,2") == [
        range(4, 7),
        range(0, 3),
        range(1, 2),
        range(1, 2),
    ]


def test_parse_selection_accepts_leading_zeros_on_non_zero_values() -> None:
    """Digit strings with leading zeros still parse as their decimal value."""

    assert parse_selection("01,002-010") == [range(0, 1), range(1, 10)]


@pytest.mark.parametrize(
    ("text", "expected_message"),
    [
        ("", 'illegal list value: ""'),
        ("0", 'illegal list value: "0"'),
        ("0-1", 'illegal list value: "0"'),
        ("00-3", 'illegal list value: "00"'),
        ("1-0", 'illegal list value: "0"'),
        ("+1", 'illegal list value: "+1"'),
        ("+1-2", 'illegal list value: "+1-2"'),
        ("1-+2", 'illegal list value: "1-+2"'),
        ("a", 'illegal list value: "a"'),
        ("1,a", 'illegal list value: "a"'),
        ("1-a", 'illegal list value: "1-a"'),
        ("a-1", 'illegal list value: "a-1"'),
        ("-", 'illegal list value: "-"'),
        (",", 'illegal list value: ""'),
        ("1,", 'illegal list value: ""'),
        ("1-", 'illegal list value: "1-"'),
        ("-5", 'illegal list value: "-5"'),
        ("1-1-1", 'illegal list value: "1-1-1"'),
        ("1-1-a", 'illegal list value: "1-1-a"'),
        (" 1", 'illegal list value: " 1"'),
        ("1 ,2", 'illegal list value: "1 "'),
        ("1:3", 'illegal list value: "1:3"'),
        ("١", 'illegal list value: "١"'),
    ],
)
def test_parse_selection_reports_illegal_list_values(
    text: str, expected_message: str
) -> None:
    """Malformed tokens and zero positions should yield `IllegalListValue`."""

    result = parse_selection(text)

    assert isinstance(result, IllegalListValue)
    assert str(result) == expected_message
    assert result.message == expected_message


@pytest.mark.parametrize(
    ("text", "first", "second"),
    [("1-1", 1, 1), ("2-1", 2, 1), ("3,10-9", 10, 9)],
)
def test_parse_selection_reports_invalid_range_order(
    text: str, first: int, second: int
) -> None:
    """Ranges whose first number is not lower than the second should be rejected."""

    result = parse_selection(text)

    assert result == InvalidRangeOrder(first, second)
    assert str(result) == (
        f"First number in range ({first}) must be lower than second number ({second})"
    )


def test_parse_selection_stops_at_first_invalid_token() -> None:
    """Only the first failing token should be reported."""

    assert parse_selection("1,0,a,3-2") == IllegalListValue("0")
    assert parse_selection("3-2,a") == InvalidRangeOrder(3, 2)


def test_parse_selection_returns_ranges_with_valid_bounds() -> None:
    """Every successful range should satisfy `0 <= start < stop`."""

    tokens = [str(index) for index in range(1, 30)] + [
        f"{index}-{index + step}" for index in range(1, 30) for step in (1, 7)
    ]
    result = parse_selection(",".join(tokens))

    assert isinstance(result, list)
    assert len(result) == len(tokens)
    assert all(0 <= span.start < span.stop and span.step == 1 for span in result)


def test_parse_extraction_raises_selection_error_with_parse_error_value() -> None:
    """Raising wrapper should expose the exact message and the error value."""

    assert parse_extraction("1,3") == [range(0, 1), range(2, 3)]

    with pytest.raises(SelectionError, match='illegal list value: "0"') as exc_info:
        parse_extraction("0-1")
    assert exc_info.value.error == IllegalListValue("0")

    with pytest.raises(ValueError, match=r"First number in range \(2\)"):
        parse_extraction("2-1")


def test_classify_token_and_selector_to_range() -> None:
    """Token classification and range building should agree with the grammar."""

    assert classify_token("4") == Single(4)
    assert classify_token("4-6") == RangePair(4, 6)
    assert selector_to_range(Single(4)) == range(3, 4)
    assert selector_to_range(RangePair(4, 6)) == range(3, 6)


def test_format_selection_renders_one_based_list_syntax() -> None:
    """Formatter should render ranges back into canonical list syntax."""

    assert format_selection([range(0, 1), range(4, 7), range(1, 2)]) == "1,5-7,2"
    assert format_selection([]) == ""
    assert format_selection(parse_extraction("3,1-2,9")) == "3,1-2,9"
