import pytest

from crcfamily.checksum import (
    CRC_START_8,
    CRC_START_16,
    CRC_START_32,
    CRC_START_64_ECMA,
    CRC_START_64_WE,
    CRC_START_CCITT_1D0F,
    CRC_START_CCITT_FFFF,
    CRC_START_DNP,
    CRC_START_KERMIT,
    CRC_START_MODBUS,
    CRC_START_XMODEM,
    InvalidArgumentError,
    crc_8,
    crc_16,
    crc_32,
    crc_64_ecma,
    crc_64_we,
    crc_ccitt_1d0f,
    crc_ccitt_ffff,
    crc_dnp,
    crc_kermit,
    crc_modbus,
    crc_xmodem,
    update_crc_8,
    update_crc_16,
    update_crc_32,
    update_crc_64_ecma,
    update_crc_ccitt,
    update_crc_dnp,
    update_crc_kermit,
)


def _fold(update, start, data):
    crc = start
    for c in data:
        crc = update(crc, c)
    return crc


# (update function, start constant, final xor, whole-buffer function)
CASES = [
    (update_crc_8, CRC_START_8, 0x00, crc_8),
    (update_crc_16, CRC_START_16, 0x0000, crc_16),
    (update_crc_16, CRC_START_MODBUS, 0x0000, crc_modbus),
    (update_crc_ccitt, CRC_START_XMODEM, 0x0000, crc_xmodem),
    (update_crc_ccitt, CRC_START_CCITT_1D0F, 0x0000, crc_ccitt_1d0f),
    (update_crc_ccitt, CRC_START_CCITT_FFFF, 0x0000, crc_ccitt_ffff),
    (update_crc_dnp, CRC_START_DNP, 0xFFFF, crc_dnp),
    (update_crc_kermit, CRC_START_KERMIT, 0x0000, crc_kermit),
    (update_crc_32, CRC_START_32, 0xFFFFFFFF, crc_32),
    (update_crc_64_ecma, CRC_START_64_ECMA, 0, crc_64_ecma),
    (update_crc_64_ecma, CRC_START_64_WE, 0xFFFFFFFFFFFFFFFF, crc_64_we),
]


@pytest.mark.parametrize("update,start,xorout,whole", CASES)
def test_incremental_update_matches_whole_buffer(update, start, xorout, whole, payloads):
    for data in payloads:
        assert _fold(update, start, data) ^ xorout == whole(data)


@pytest.mark.parametrize("update,start,xorout,whole", CASES)
def test_incremental_update_resumes_across_pieces(update, start, xorout, whole, check_input):
    head = _fold(update, start, check_input[:5])
    crc = _fold(update, head, check_input[5:])
    assert crc ^ xorout == whole(check_input)


def test_update_crc_32_single_byte():
    # CRC-32 of b"a" is 0xE8B7BE43
    assert update_crc_32(CRC_START_32, ord("a")) ^ 0xFFFFFFFF == 0xE8B7BE43


def test_update_rejects_out_of_range_byte():
    with pytest.raises(InvalidArgumentError):
        update_crc_16(0, 0x100)


def test_update_rejects_register_wider_than_width():
    with pytest.raises(InvalidArgumentError):
        update_crc_8(0x100, 0)
    with pytest.raises(InvalidArgumentError):
        update_crc_ccitt(0x10000, 0)
