"""Pix code generation service."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal

from ..pix_encoder import EncodedPayload, PixPayload
from ..renderer import render_png_base64

logger = logging.getLogger("pixcode.generator")


@dataclass(slots=True)
class GenerateResult:
    pix: PixPayload
    encoded: EncodedPayload
    qr_png_base64: str | None


class PixCodeGenerator:
    def __init__(self, render: bool = True):
        self.render = render

    def generate(
        self,
        *,
        pix_key: str,
        description: str | None = None,
        merchant_name: str | None = None,
        merchant_city: str | None = None,
        merchant_postal_code: str | None = None,
        txid: str | None = None,
        amount: Decimal | int | str | None = None,
    ) -> GenerateResult:
        pix = PixPayload.create(
            pix_key,
            description=description,
            merchant_name=merchant_name,
            merchant_city=merchant_city,
            merchant_postal_code=merchant_postal_code,
            txid=txid,
            amount=amount,
        )
        encoded = pix.encode()

        qr_png_base64 = None
        if self.render:
            qr_png_base64 = render_png_base64(encoded.payload)

        logger.info(
            "pix code generated",
            extra={"key_type": pix.key.type.value, "crc": encoded.crc, "rendered": self.render},
        )
        return GenerateResult(pix=pix, encoded=encoded, qr_png_base64=qr_png_base64)
