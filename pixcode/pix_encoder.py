"""Static Pix (BR Code) payload encoder."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Decimal, InvalidOperation, localcontext
from typing import Iterable

from .config import settings
from .crc import crc16_ccitt
from .keys import PixKey, classify_key, strip_non_digits
from .services.errors import err_field_too_long, err_invalid_amount, err_invalid_field
from .tlv import MAX_VALUE_LENGTH, TLVItem, build_tlv

logger = logging.getLogger("pixcode.encoder")

PIX_GUI = "BR.GOV.BCB.PIX"
PAYLOAD_FORMAT_INDICATOR = "01"
MERCHANT_CATEGORY_CODE = "0000"
CURRENCY_BRL = "986"
COUNTRY_CODE = "BR"
CRC_MARKER = "6304"
UNKNOWN = "desconhecido"
POINTS_OF_INITIATION = frozenset({"11", "12"})
TEXT_FIELDS = ("description", "merchant_name", "merchant_city", "merchant_postal_code", "txid")

_CENTS = Decimal("0.01")


@dataclass(frozen=True)
class EncodedPayload:
    payload: str
    crc: str


def to_amount(value: Decimal | int | str | None) -> Decimal:
    """Coerce ``value`` to a non-negative, finite ``Decimal``; ``None`` is zero."""

    if value is None:
        return Decimal("0.00")
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value))
        except InvalidOperation as exc:
            raise err_invalid_amount(f"Amount is not a decimal number: {value!r}") from exc
    if not amount.is_finite():
        raise err_invalid_amount("Amount must be finite")
    if amount < 0:
        raise err_invalid_amount(f"Amount must not be negative, got {amount}")
    if amount.is_zero():
        # Decimal keeps the sign of "-0"; the payload must never carry one.
        amount = abs(amount)
    return amount


def format_amount(amount: Decimal) -> str:
    """Render ``amount`` with exactly two decimals, rounding half to even."""

    if amount.adjusted() >= MAX_VALUE_LENGTH:
        raise err_field_too_long(f"Amount has more than {MAX_VALUE_LENGTH} integer digits")
    with localcontext() as ctx:
        # One spare digit for a carry such as 999.995 -> 1000.00.
        ctx.prec = max(ctx.prec, amount.adjusted() + 4)
        return f"{amount.quantize(_CENTS, rounding=ROUND_HALF_EVEN):f}"


@dataclass(frozen=True)
class PixPayload:
    """Immutable description of a static Pix charge.

    Build instances through :meth:`create`, which classifies the raw key and
    fills the defaults. Every field is validated on construction, so
    :meth:`get_code` cannot fail afterwards.
    """

    key: PixKey
    description: str = ""
    merchant_name: str = UNKNOWN
    merchant_city: str = UNKNOWN
    merchant_postal_code: str = UNKNOWN
    txid: str = UNKNOWN
    amount: Decimal = Decimal("0.00")
    point_of_initiation: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", to_amount(self.amount))
        for name in TEXT_FIELDS:
            if not getattr(self, name).isascii():
                raise err_invalid_field(f"{name} must contain only ASCII characters")
        if not self.key.value.isascii():
            raise err_invalid_field("key must contain only ASCII characters")
        if self.point_of_initiation is not None and self.point_of_initiation not in POINTS_OF_INITIATION:
            raise err_invalid_field(f"Point of initiation must be 11 or 12, got {self.point_of_initiation!r}")
        # Raises FieldTooLongError for any value over the two-digit length limit.
        encode_payload(self)

    @classmethod
    def create(
        cls,
        pix_key: str,
        *,
        description: str | None = None,
        merchant_name: str | None = None,
        merchant_city: str | None = None,
        merchant_postal_code: str | None = None,
        txid: str | None = None,
        amount: Decimal | int | str | None = None,
        point_of_initiation: str | None = None,
    ) -> PixPayload:
        """Classify ``pix_key`` and build a payload, applying defaults for missing fields.

        Raises:
            InvalidKeyError: If the key matches no accepted format.
            InvalidAmountError: If the amount is negative or not a number.
            FieldTooLongError: If any encoded value exceeds 99 characters.
        """

        payload = cls(
            key=classify_key(pix_key),
            description=description if description is not None else "",
            merchant_name=merchant_name if merchant_name is not None else UNKNOWN,
            merchant_city=merchant_city if merchant_city is not None else UNKNOWN,
            merchant_postal_code=merchant_postal_code if merchant_postal_code is not None else UNKNOWN,
            txid=txid if txid is not None else UNKNOWN,
            amount=amount,
            point_of_initiation=point_of_initiation or settings.point_of_initiation,
        )
        logger.debug(
            "pix payload created",
            extra={"key_type": payload.key.type.value, "amount": format_amount(payload.amount)},
        )
        return payload

    def encode(self) -> EncodedPayload:
        return encode_payload(self)

    def get_code(self) -> str:
        """Return the complete payload string, CRC included."""

        return encode_payload(self).payload


def merchant_account_items(key: PixKey) -> Iterable[TLVItem]:
    yield TLVItem(tag="00", value=PIX_GUI)
    yield TLVItem(tag="01", value=key.value)


def additional_data_items(txid: str) -> Iterable[TLVItem]:
    yield TLVItem(tag="05", value=txid)


def payload_items(payload: PixPayload) -> Iterable[TLVItem]:
    """Yield the top-level fields in the order the payload requires."""

    yield TLVItem(tag="00", value=PAYLOAD_FORMAT_INDICATOR)
    if payload.point_of_initiation:
        yield TLVItem(tag="01", value=payload.point_of_initiation)
    yield TLVItem(tag="26", value=build_tlv(merchant_account_items(payload.key)))
    yield TLVItem(tag="02", value=payload.description)
    yield TLVItem(tag="52", value=MERCHANT_CATEGORY_CODE)
    yield TLVItem(tag="53", value=CURRENCY_BRL)
    yield TLVItem(tag="54", value=format_amount(payload.amount))
    yield TLVItem(tag="58", value=COUNTRY_CODE)
    yield TLVItem(tag="59", value=payload.merchant_name)
    yield TLVItem(tag="60", value=payload.merchant_city)
    yield TLVItem(tag="61", value=strip_non_digits(payload.merchant_postal_code))
    yield TLVItem(tag="62", value=build_tlv(additional_data_items(payload.txid)))


def encode_payload(payload: PixPayload) -> EncodedPayload:
    """Assemble all fields and append the CRC16-CCITT field."""

    crc_input = f"{build_tlv(payload_items(payload))}{CRC_MARKER}"
    crc = crc16_ccitt(crc_input)
    return EncodedPayload(payload=f"{crc_input}{crc}", crc=crc)
