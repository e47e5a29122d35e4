"""Small text helpers for reading ``/proc/cpuinfo`` style content."""

from __future__ import annotations

from collections.abc import Iterator

_WHITESPACE = " \t\n\v\f\r"
_DECIMAL_DIGITS = frozenset("0123456789")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def index_of_char(text: str, char: str) -> int:
    """Return the index of the first ``char`` in ``text``, or -1."""
    return text.find(char) if char else -1


def index_of(text: str, needle: str) -> int:
    """Return the index of the first ``needle`` in ``text``, or -1.

    An empty needle is never found.
    """
    if not needle:
        return -1
    return text.find(needle)


def starts_with(text: str, prefix: str) -> bool:
    """Tell whether ``text`` starts with a non-empty ``prefix``."""
    return bool(prefix) and text.startswith(prefix)


def pop_front(text: str, count: int) -> str:
    """Drop ``count`` characters from the front of ``text``."""
    return text[count:]


def pop_back(text: str, count: int) -> str:
    """Drop ``count`` characters from the back of ``text``."""
    if count <= 0:
        return text
    return text[:-count]


def keep_front(text: str, count: int) -> str:
    """Keep at most ``count`` characters from the front of ``text``."""
    return text[: max(count, 0)]


def trim_whitespace(text: str) -> str:
    """Strip ASCII whitespace from both ends of ``text``."""
    return text.strip(_WHITESPACE)


def parse_positive_number(text: str) -> int:
    """Parse a decimal or ``0x``-prefixed hexadecimal number.

    Returns -1 when ``text`` is not a valid non-negative number.
    """
    if not text:
        return -1
    if starts_with(text, "0x"):
        digits, allowed, base = text[2:], _HEX_DIGITS, 16
    else:
        digits, allowed, base = text, _DECIMAL_DIGITS, 10
    if not digits or not set(digits) <= allowed:
        return -1
    return int(digits, base)


def copy_string(text: str, size: int) -> str:
    """Return ``text`` as it would fit in a buffer of ``size`` bytes.

    One slot is reserved for the terminator, so at most ``size - 1``
    characters are kept.
    """
    if size <= 0:
        return ""
    return text[: size - 1]


def has_word(text: str, word: str, separator: str) -> bool:
    """Tell whether ``word`` appears in ``text`` as a whole separated word."""
    if not word:
        return False
    return word in text.split(separator)


def get_attribute_key_value(line: str) -> tuple[str, str] | None:
    """Split a ``key : value`` line into its trimmed key and value.

    Returns ``None`` when the line holds no colon.
    """
    colon = index_of_char(line, ":")
    if colon < 0:
        return None
    key = trim_whitespace(keep_front(line, colon))
    value = trim_whitespace(pop_front(line, colon + 1))
    return key, value


def iter_attributes(content: str) -> Iterator[tuple[str, str]]:
    """Yield the ``(key, value)`` pairs of every attribute line in ``content``."""
    for line in content.split("\n"):
        pair = get_attribute_key_value(line)
        if pair is not None:
            yield pair