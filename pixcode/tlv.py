"""Helpers to build EMV-style TLV fields."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .services.errors import err_field_too_long

MAX_VALUE_LENGTH = 99


def length_prefix(value: str) -> str:
    """Return the two-digit, zero-padded character count of ``value``."""

    if len(value) > MAX_VALUE_LENGTH:
        raise err_field_too_long(f"Field value has {len(value)} characters, limit is {MAX_VALUE_LENGTH}")
    return f"{len(value):02d}"


@dataclass(frozen=True)
class TLVItem:
    tag: str
    value: str

    def __post_init__(self) -> None:
        if len(self.tag) != 2 or not self.tag.isdigit():
            raise ValueError(f"TLV tag must be two digits, got {self.tag!r}")

    def serialize(self) -> str:
        return f"{self.tag}{length_prefix(self.value)}{self.value}"


def tlv_field(tag: str, value: str) -> str:
    return TLVItem(tag=tag, value=value).serialize()


def build_tlv(items: Iterable[TLVItem]) -> str:
    """Serialize iterable of TLV items into EMV string."""

    return "".join(item.serialize() for item in items)
