"""Parsing and validation of EAN-13 barcodes and their UPC-A subset."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

__all__ = ["Ean13", "Ean13Error", "calculate_check_digit"]

_DIGITS = "0123456789"


def calculate_check_digit(first_12: Iterable[int]) -> int:
    """Return the check digit for the first 12 digits of an EAN-13 code."""
    digits = list(first_12)
    if len(digits) != 12:
        raise ValueError(f"expected 12 digits, got {len(digits)}")
    total = sum(digits[0::2]) + 3 * sum(digits[1::2])
    return (10 - total % 10) % 10


class Ean13Error(ValueError):
    """Raised when a code cannot be turned into a valid EAN-13."""

    INVALID_LENGTH = "InvalidLength"
    INVALID_DIGIT = "InvalidDigit"
    INVALID_CHECK_DIGIT = "InvalidCheckDigit"

    def __init__(self, kind: str) -> None:
        super().__init__(kind)
        self.kind = kind

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ean13Error):
            return NotImplemented
        return self.kind == other.kind

    def __hash__(self) -> int:
        return hash(self.kind)


@dataclass(frozen=True, repr=False)
class Ean13:
    """A validated EAN-13 barcode held as a tuple of 13 digits."""

    digits: tuple[int, ...]

    def __post_init__(self) -> None:
        digits = tuple(self.digits)
        object.__setattr__(self, "digits", digits)
        if len(digits) != 13:
            raise Ean13Error(Ean13Error.INVALID_LENGTH)
        if any(not isinstance(d, int) or not 0 <= d <= 9 for d in digits):
            raise Ean13Error(Ean13Error.INVALID_DIGIT)
        if calculate_check_digit(digits[:12]) != digits[12]:
            raise Ean13Error(Ean13Error.INVALID_CHECK_DIGIT)

    @classmethod
    def from_str(cls, text: str) -> Ean13:
        """Parse a 13 digit EAN-13 or a 12 digit UPC-A code strictly."""
        length = len(text.encode("utf-8"))
        if length == 12:
            text = "0" + text
        elif length != 13:
            raise Ean13Error(Ean13Error.INVALID_LENGTH)
        if any(ch not in _DIGITS for ch in text):
            raise Ean13Error(Ean13Error.INVALID_DIGIT)
        return cls(tuple(int(ch) for ch in text))

    @classmethod
    def from_str_nonstrict(cls, broken_str: str) -> Ean13:
        """Build a code from a malformed string.

        Non-digit characters are dropped, leading zeros are trimmed and the
        result is zero padded to 13 digits; the check digit is recomputed.
        Use with care: almost any input yields a valid looking code.
        """
        only_digits = "".join(ch for ch in broken_str if ch in _DIGITS)
        normalized = only_digits.lstrip("0").rjust(13, "0")
        if len(normalized) != 13:
            raise Ean13Error(Ean13Error.INVALID_LENGTH)
        first_12 = [int(ch) for ch in normalized[:12]]
        return cls((*first_12, calculate_check_digit(first_12)))

    def as_tuple(self) -> tuple[int, ...]:
        """Return the code as a tuple of 13 digits."""
        return self.digits

    def is_upca(self) -> bool:
        """Return True when the code is a UPC-A, i.e. its first digit is 0."""
        return self.digits[0] == 0

    def to_json(self) -> str:
        """Return the JSON-ready form of the code: its 13 digit string."""
        return "".join(map(str, self.digits))

    @classmethod
    def from_json(cls, data: Any) -> Ean13:
        """Build a code from its JSON form, which must be a string."""
        if not isinstance(data, str):
            raise TypeError(f"expected a string, got {type(data).__name__}")
        return cls.from_str(data)

    def __str__(self) -> str:
        return f"EAN-13({self.to_json()})"

    def __repr__(self) -> str:
        return f"Ean13({self.to_json()})"