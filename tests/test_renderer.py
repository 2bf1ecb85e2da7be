import base64
import io

from PIL import Image

from pixcode.pix_encoder import PixPayload
from pixcode.renderer import render_png, render_png_base64

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


class TestRenderPng:
    def test_returns_square_png(self, email_key: str) -> None:
        png = render_png(PixPayload.create(email_key).get_code())

        assert png.startswith(PNG_SIGNATURE)
        width, height = Image.open(io.BytesIO(png)).size
        assert width == height

    def test_longer_payload_needs_larger_symbol(self, email_key: str) -> None:
        short = Image.open(io.BytesIO(render_png("000201"))).size
        full = Image.open(io.BytesIO(render_png(PixPayload.create(email_key, description="d" * 99).get_code()))).size

        assert full[0] > short[0]


class TestRenderPngBase64:
    def test_decodes_to_png_bytes(self, random_key: str) -> None:
        code = PixPayload.create(random_key).get_code()

        assert base64.b64decode(render_png_base64(code)) == render_png(code)
