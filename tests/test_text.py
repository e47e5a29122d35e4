import pytest

from cpufeat.text import (
    copy_string,
    get_attribute_key_value,
    has_word,
    index_of,
    index_of_char,
    iter_attributes,
    keep_front,
    parse_positive_number,
    pop_back,
    pop_front,
    starts_with,
    trim_whitespace,
)


@pytest.mark.parametrize(
    "text, char, expected",
    [("test", "e", 1), ("test", "t", 0), ("beef", "e", 1), ("test", "z", -1), ("", "z", -1)],
)
def test_index_of_char(text, char, expected):
    assert index_of_char(text, char) == expected


@pytest.mark.parametrize(
    "text, needle, expected",
    [
        ("test", "es", 1),
        ("test", "test", 0),
        ("tesstest", "test", 4),
        ("test", "aa", -1),
        ("", "aa", -1),
        ("aa", "", -1),
    ],
)
def test_index_of(text, needle, expected):
    assert index_of(text, needle) == expected


@pytest.mark.parametrize(
    "text, prefix, expected",
    [
        ("test", "te", True),
        ("test", "test", True),
        ("test", "st", False),
        ("test", "est", False),
        ("test", "", False),
        ("", "test", False),
    ],
)
def test_starts_with(text, prefix, expected):
    assert starts_with(text, prefix) is expected


@pytest.mark.parametrize(
    "count, expected", [(2, "st"), (0, "test"), (4, ""), (100, "")]
)
def test_pop_front(count, expected):
    assert pop_front("test", count) == expected


@pytest.mark.parametrize(
    "count, expected", [(2, "te"), (0, "test"), (4, ""), (100, "")]
)
def test_pop_back(count, expected):
    assert pop_back("test", count) == expected


@pytest.mark.parametrize(
    "count, expected", [(2, "te"), (0, ""), (4, "test"), (6, "test")]
)
def test_keep_front(count, expected):
    assert keep_front("test", count) == expected


@pytest.mark.parametrize(
    "text",
    [
        "  first middle last  ",
        "first middle last  ",
        "  first middle last",
        "first middle last",
    ],
)
def test_trim_whitespace(text):
    assert trim_whitespace(text) == "first middle last"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("0x2a", 42),
        ("0x2A", 42),
        ("0x2A2a", 10794),
        ("0x2a2A", 10794),
        ("-10", -1),
        ("-0x2A", -1),
        ("abc", -1),
        ("", -1),
    ],
)
def test_parse_positive_number(text, expected):
    assert parse_positive_number(text) == expected


@pytest.mark.parametrize(
    "text, expected", [("", ""), ("a", "a"), ("abc", "abc"), ("abcd", "abc")]
)
def test_copy_string(text, expected):
    assert copy_string(text, 4) == expected


def test_copy_string_zero_size_is_empty():
    assert copy_string("abc", 0) == ""


@pytest.mark.parametrize(
    "text, word, separator, expected",
    [
        ("first middle last", "first", " ", True),
        ("first middle last", "middle", " ", True),
        ("first middle last", "last", " ", True),
        ("first-middle-last", "first", "-", True),
        ("first-middle-last", "middle", "-", True),
        ("first-middle-last", "last", "-", True),
        ("first middle last", "irst", " ", False),
        ("first middle last", "mid", " ", False),
        ("first middle last", "las", " ", False),
    ],
)
def test_has_word(text, word, separator, expected):
    assert has_word(text, word, separator) is expected


def test_get_attribute_key_value():
    assert get_attribute_key_value(" key :   first middle last   ") == (
        "key",
        "first middle last",
    )


def test_failing_get_attribute_key_value():
    assert get_attribute_key_value("key  first middle last") is None


def test_iter_attributes_skips_lines_without_colon():
    content = "a : 1\nnothing here\n\nb\t: two words\n"
    assert list(iter_attributes(content)) == [("a", "1"), ("b", "two words")]