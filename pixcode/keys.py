"""Pix key classification and normalization."""
from __future__ import annotations

import enum
import logging
import re
from dataclasses import dataclass

from .cpf import validate_cpf
from .services.errors import err_invalid_key

logger = logging.getLogger("pixcode.keys")

PHONE_PREFIX = "+55"
RANDOM_KEY_LENGTH = 36
CNPJ_LENGTH = 14
PHONE_LENGTH = 11

_NON_DIGITS = re.compile(r"[^0-9]")


class KeyType(str, enum.Enum):
    RANDOM = "RANDOM"
    EMAIL = "EMAIL"
    CPF = "CPF"
    CNPJ = "CNPJ"
    PHONE = "PHONE"


@dataclass(frozen=True)
class PixKey:
    type: KeyType
    value: str


def strip_non_digits(value: str) -> str:
    return _NON_DIGITS.sub("", value)


def classify_key(raw: str) -> PixKey:
    """Classify a raw pix key into one of the accepted key types.

    Checks run in a fixed order and the first match wins, since a formatted
    phone number or CPF can also satisfy later rules once its separators are
    stripped:

    1. random key (36 chars, five hyphen-separated groups), kept verbatim
    2. e-mail (contains ``@`` and ``.``), kept verbatim
    3. CPF passing the check-digit test, digits only
    4. CNPJ (14 digits), digits only
    5. phone (11 digits), ``+55`` prefixed

    Raises:
        InvalidKeyError: If no rule matches.
    """

    if not isinstance(raw, str):
        logger.warning("pix key rejected", extra={"reason": "not_a_string"})
        raise err_invalid_key("Pix key must be a string")

    trimmed = raw.strip()
    if not raw.isascii():
        logger.warning("pix key rejected", extra={"reason": "non_ascii"})
        raise err_invalid_key("Pix key must contain only ASCII characters")
    digits = strip_non_digits(trimmed)

    if len(trimmed) == RANDOM_KEY_LENGTH and len(trimmed.split("-")) == 5:
        key = PixKey(type=KeyType.RANDOM, value=raw)
    elif "@" in trimmed and "." in trimmed:
        key = PixKey(type=KeyType.EMAIL, value=raw)
    elif validate_cpf(digits):
        key = PixKey(type=KeyType.CPF, value=digits)
    elif len(digits) == CNPJ_LENGTH:
        key = PixKey(type=KeyType.CNPJ, value=digits)
    elif len(digits) == PHONE_LENGTH:
        key = PixKey(type=KeyType.PHONE, value=f"{PHONE_PREFIX}{digits}")
    else:
        logger.warning("pix key rejected", extra={"reason": "no_match", "key_length": len(trimmed)})
        raise err_invalid_key(f"Pix key matches no accepted format ({len(trimmed)} characters)")

    logger.debug("pix key classified", extra={"key_type": key.type.value})
    return key
