"""CPF (individual taxpayer id) check-digit validation."""
from __future__ import annotations

CPF_LENGTH = 11
_DIGITS = frozenset("0123456789")


def _check_digit(digits: str, first_weight: int) -> int:
    total = sum(int(ch) * weight for weight, ch in enumerate(digits, start=first_weight))
    remainder = total % 11
    return 0 if remainder == 10 else remainder


def cpf_check_digits(base: str) -> str:
    """Return the two check digits for the first nine digits of a CPF."""

    first = _check_digit(base[:9], first_weight=1)
    second = _check_digit(f"{base[:9]}{first}", first_weight=0)
    return f"{first}{second}"


def validate_cpf(digits: str) -> bool:
    """Return ``True`` when ``digits`` is an 11-digit CPF with matching check digits."""

    if len(digits) != CPF_LENGTH or not set(digits) <= _DIGITS:
        return False
    return digits[9:] == cpf_check_digits(digits)
