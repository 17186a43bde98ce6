"""Identifier and hash helpers for UI keys.

Neither function is suitable for security purposes: IDs are drawn from the
non-cryptographic ``random`` module and the hash is 32-bit FNV-1a.
"""

import random

FNV1_32A_INIT = 0x811C9DC5
_MASK_32 = 0xFFFFFFFF
_BASE36_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_FRAGMENT_DIGITS = 12


def _base36_fraction(value: float, digits: int = _FRAGMENT_DIGITS) -> str:
    """Render the fractional part of ``value`` in base 36, without trailing zeros."""
    out = []
    for _ in range(digits):
        value *= 36
        digit = int(value)
        out.append(_BASE36_DIGITS[digit])
        value -= digit
    return "".join(out).rstrip("0")


def generate_id() -> str:
    """Generate a random ID of (almost always) 18 to 24 characters.

    Uniqueness is not enforced; collisions are unlikely but possible.
    """
    return _base36_fraction(random.random()) + _base36_fraction(random.random())


def hash_text(text: str) -> str:
    """Return the 32-bit FNV-1a hash of ``text`` as 8 lowercase hex digits.

    The hash runs over UTF-16 code units so that values match those computed
    by browser front-ends.
    """
    data = text.encode("utf-16-le", "surrogatepass")
    hval = FNV1_32A_INIT
    for i in range(0, len(data), 2):
        hval ^= data[i] | (data[i + 1] << 8)
        hval = (hval + (hval << 1) + (hval << 4) + (hval << 7) + (hval << 8) + (hval << 24)) & _MASK_32
    return f"{hval:08x}"
