import re

from pixcode.crc import crc16_ccitt

BCB_RANDOM_KEY_EXAMPLE = (
    "00020126580014br.gov.bcb.pix0136123e4567-e12b-12d1-a456-426655440000"
    "5204000053039865802BR5913Fulano de Tal6008BRASILIA62070503***6304"
)


class TestCrc16Vectors:
    def test_standard_check_value(self) -> None:
        assert crc16_ccitt(b"123456789") == "29B1"

    def test_empty_input_returns_initial_register(self) -> None:
        assert crc16_ccitt(b"") == "FFFF"

    def test_bcb_manual_example(self) -> None:
        assert crc16_ccitt(BCB_RANDOM_KEY_EXAMPLE) == "1D3D"


class TestCrc16Format:
    def test_str_and_bytes_agree(self) -> None:
        assert crc16_ccitt("123456789") == crc16_ccitt(b"123456789")

    def test_result_is_four_uppercase_hex_digits(self) -> None:
        for data in (b"", b"A", b"000201", BCB_RANDOM_KEY_EXAMPLE.encode("ascii")):
            assert re.fullmatch(r"[0-9A-F]{4}", crc16_ccitt(data))

    def test_is_deterministic(self) -> None:
        data = b"00020126360014BR.GOV.BCB.PIX6304"

        assert crc16_ccitt(data) == crc16_ccitt(data)

    def test_single_byte_change_alters_checksum(self) -> None:
        assert crc16_ccitt(b"5802BR") != crc16_ccitt(b"5802BS")
