"""
cgv2 Common Types
Scalar parsers shared by every interface file, and the Max sentinel type
"""

from dataclasses import dataclass
from typing import Optional, Union

from .exceptions import MalformedField

MAX = "max"


def parse_uint(text: str) -> int:
    """Parse an unsigned decimal integer"""
    if not (text.isascii() and text.isdigit()):
        raise MalformedField(text, "expected an unsigned integer")
    return int(text)


def parse_int(text: str) -> int:
    """Parse a signed decimal integer"""
    digits = text[1:] if text[:1] in ('-', '+') else text
    if not (digits.isascii() and digits.isdigit()):
        raise MalformedField(text, "expected an integer")
    return int(text)


def parse_float(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        raise MalformedField(text, "expected a decimal number") from None


def parse_flag(text: str) -> bool:
    """Parse a kernel 0/1 flag"""
    if text == "1":
        return True
    if text == "0":
        return False
    raise MalformedField(text, "expected 0 or 1")


def format_flag(value: bool) -> str:
    return "1" if value else "0"


@dataclass(frozen=True)
class Max:
    """Either unbounded ("max") or a bounded non-negative integer

    ``Max()`` is the unbounded value; ``Max(n)`` is bounded by ``n``.
    """
    value: Optional[int] = None

    def __post_init__(self):
        if self.value is None:
            return
        if isinstance(self.value, bool) or not isinstance(self.value, int) or self.value < 0:
            raise ValueError(f"Max bound must be a non-negative integer, got {self.value!r}")

    @classmethod
    def unbounded(cls) -> 'Max':
        return cls()

    @classmethod
    def bounded(cls, value: int) -> 'Max':
        return cls(value)

    @classmethod
    def coerce(cls, value: Union['Max', int, None]) -> 'Max':
        """Accept a Max, a plain integer bound, or None for unbounded"""
        if isinstance(value, Max):
            return value
        return cls(value)

    @property
    def is_unbounded(self) -> bool:
        return self.value is None

    @classmethod
    def parse(cls, text: str) -> 'Max':
        if text == MAX:
            return cls()
        return cls(parse_uint(text))

    def format(self) -> str:
        return MAX if self.value is None else str(self.value)

    def __str__(self) -> str:
        return self.format()
