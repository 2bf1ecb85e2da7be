"""Adapter handing a finished payload to ``qrcode`` for PNG output."""
from __future__ import annotations

import base64
import io

import qrcode
from qrcode.image.pil import PilImage

from .config import settings


def render_png(payload: str) -> bytes:
    """Encode ``payload`` as a QR code and return the PNG bytes.

    Error correction M is what Pix apps read reliably at typical payload sizes.
    """

    qr = qrcode.QRCode(
        version=None,
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        box_size=settings.qr_box_size,
        border=settings.qr_border,
        image_factory=PilImage,
    )
    qr.add_data(payload)
    qr.make(fit=True)

    buffer = io.BytesIO()
    qr.make_image(fill_color="black", back_color="white").save(buffer, format="PNG")
    return buffer.getvalue()


def render_png_base64(payload: str) -> str:
    return base64.b64encode(render_png(payload)).decode("ascii")
