"""Small character and string helpers used by the scene parser."""

from __future__ import annotations

BLANK_CHARS = " \f\n\r\t\v"


def is_in_set(char: str, charset: str) -> bool:
    """Return True if the single character ``char`` occurs in ``charset``."""
    return len(char) == 1 and char in charset


def is_number(char: str) -> bool:
    """Return True if ``char`` is an ASCII digit."""
    return len(char) == 1 and "0" <= char <= "9"


def is_space(char: str) -> bool:
    """Return True if ``char`` is one of the blank characters."""
    return is_in_set(char, BLANK_CHARS)


def trim(text: str, chars: str = BLANK_CHARS) -> str:
    """Return ``text`` with characters of ``chars`` removed from both ends."""
    if not chars:
        return text
    return text.strip(chars)


def atoi(text: str) -> int:
    """Read the leading decimal number of ``text``.

    Leading blanks are skipped, then any run of '+' and '-' characters is
    skipped without changing the sign, then ASCII digits are read. The
    result is therefore never negative; text without digits gives 0.
    """
    rest = text.lstrip(BLANK_CHARS).lstrip("+-")
    value = 0
    for char in rest:
        if not is_number(char):
            break
        value = value * 10 + (ord(char) - ord("0"))
    return value