"""Shared error definitions."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class PixError(Exception):
    code: str
    message: str

    def __str__(self) -> str:  # noqa: D401 override
        return f"{self.code}: {self.message}"


class InvalidKeyError(PixError):
    """Raw pix key matches none of the accepted key shapes."""


class InvalidAmountError(PixError):
    """Amount is negative, non-finite or not a decimal number."""


class FieldTooLongError(PixError):
    """Field value does not fit the two-digit length prefix."""


class InvalidFieldError(PixError):
    """Field value outside its allowed set."""


def err_invalid_key(message: str | None = None) -> InvalidKeyError:
    return InvalidKeyError(code="ERR_INVALID_KEY", message=message or "Invalid pix key")


def err_invalid_amount(message: str | None = None) -> InvalidAmountError:
    return InvalidAmountError(code="ERR_INVALID_AMOUNT", message=message or "Invalid payment amount")


def err_field_too_long(message: str | None = None) -> FieldTooLongError:
    return FieldTooLongError(code="ERR_FIELD_TOO_LONG", message=message or "Field value exceeds 99 characters")


def err_invalid_field(message: str | None = None) -> InvalidFieldError:
    return InvalidFieldError(code="ERR_INVALID_FIELD", message=message or "Invalid field value")
