"""Numeric helpers: linear rescaling and lenient decimal parsing."""

from __future__ import annotations

_WHITESPACE = frozenset("\t\n\v\f\r ")
_DIGITS = frozenset("0123456789")


def scale_val(num: float, new_min: float, new_max: float, old_min: float, old_max: float) -> float:
    """Map ``num`` linearly from ``[old_min, old_max]`` onto ``[new_min, new_max]``."""
    return (new_max - new_min) * (num - old_min) / (old_max - old_min) + new_min


def _split_number(s: str) -> tuple[int, str, str, str]:
    """Split ``s`` into (sign, integer digits, fraction digits, unparsed rest)."""
    text = s.lstrip("".join(_WHITESPACE))
    sign = 1
    if text[:1] in ("+", "-"):
        if text[0] == "-":
            sign = -1
        text = text[1:]

    def take_digits(rest: str) -> tuple[str, str]:
        end = len(rest)
        for pos, ch in enumerate(rest):
            if ch not in _DIGITS:
                end = pos
                break
        return rest[:end], rest[end:]

    integer, text = take_digits(text)
    if text.startswith("."):
        text = text[1:]
    fraction, text = take_digits(text)
    return sign, integer, fraction, text


def str_to_double(s: str) -> float:
    """Parse a leading decimal number from ``s``, ignoring anything after it.

    Leading whitespace and one sign are accepted; an empty number yields 0.0.
    """
    sign, integer, fraction, _ = _split_number(s)
    integer_part = 0.0
    for ch in integer:
        integer_part = integer_part * 10 + int(ch)
    fract_part = 0.0
    base = 1.0
    for ch in fraction:
        base *= 10.0
        fract_part += int(ch) / base
    return (integer_part + fract_part) * sign


def is_valid(s: str) -> bool:
    """Return True when all of ``s`` is a plain decimal number that str_to_double accepts."""
    _, _, _, rest = _split_number(s)
    return rest == ""