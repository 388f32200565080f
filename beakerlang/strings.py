"""Character classification, digit conversion and a bounded string builder."""

from __future__ import annotations

__all__ = [
    "is_space",
    "is_newline",
    "is_binary_digit",
    "is_decimal_digit",
    "char_to_int",
    "string_to_int",
    "StringBuilder",
]


def is_space(c: str) -> bool:
    """Return True for horizontal whitespace (space, tab, CR and VT)."""
    return len(c) == 1 and c in " \t\r\v"


def is_newline(c: str) -> bool:
    """Return True if ``c`` is a newline character."""
    return c == "\n"


def is_binary_digit(c: str) -> bool:
    """Return True if the character orders below ``'2'``."""
    return len(c) == 1 and ord(c) - ord("0") < 2


def is_decimal_digit(c: str) -> bool:
    """Return True if ``c`` is an ASCII decimal digit."""
    return len(c) == 1 and "0" <= c <= "9"


def _in_base(n: int, base: int) -> int:
    if n < base:
        return n
    raise ValueError("invalid digit")


def char_to_int(c: str, base: int) -> int:
    """Return the value of the digit ``c`` in ``base``.

    Raises ValueError if ``c`` is not a digit in that base.
    """
    if "0" <= c <= "9":
        return _in_base(ord(c) - ord("0"), base)
    if "a" <= c <= "z":
        return _in_base(ord(c) - ord("a") + 10, base)
    if "A" <= c <= "Z":
        return _in_base(ord(c) - ord("A") + 10, base)
    return _in_base(ord(c), 0)


def string_to_int(text: str, base: int) -> int:
    """Return the integer that ``text`` spells in ``base``.

    Raises ValueError if any character is not a digit in that base.
    """
    n = 0
    for c in text:
        n = n * base + char_to_int(c, base)
    return n


class StringBuilder:
    """Accumulates the characters of a lexeme, up to a fixed capacity."""

    CAPACITY = 128

    def __init__(self) -> None:
        self._chars: list[str] = []

    def __str__(self) -> str:
        return "".join(self._chars)

    def __len__(self) -> int:
        return len(self._chars)

    def put(self, text: str) -> None:
        """Append ``text``; raise OverflowError if the capacity is exceeded."""
        if len(text) == 1:
            if len(self._chars) == self.CAPACITY:
                raise OverflowError("string builder overflow")
        elif len(self._chars) + len(text) >= self.CAPACITY:
            raise OverflowError("string builder overflow")
        self._chars.extend(text)

    def take(self) -> str:
        """Return the accumulated text and reset the builder."""
        text = str(self)
        self.clear()
        return text

    def clear(self) -> None:
        """Discard the accumulated text."""
        self._chars.clear()