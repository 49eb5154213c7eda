import pytest

from crcfamily.engine.errors import InvalidArgumentError
from crcfamily.families.sick import (
    CRC_START_SICK,
    SickStream,
    crc_sick,
    finish_sick,
    update_crc_sick,
)


def test_sick_check_value(check_input):
    assert crc_sick(check_input) == 0x56A6


def test_first_steps_by_hand():
    # '1' then '2' with the previous byte folded into the high half
    crc = update_crc_sick(CRC_START_SICK, 0x31, 0x00)
    assert crc == 0x0031
    crc = update_crc_sick(crc, 0x32, 0x31)
    assert crc == 0x3150


def test_update_with_carried_previous_byte_matches_whole(payloads):
    for data in payloads:
        crc = CRC_START_SICK
        prev = 0
        for c in data:
            crc = update_crc_sick(crc, c, prev)
            prev = c
        assert finish_sick(crc) == crc_sick(data)


def test_dropping_previous_byte_changes_result(check_input):
    crc = CRC_START_SICK
    for c in check_input:
        crc = update_crc_sick(crc, c, 0)
    assert finish_sick(crc) != crc_sick(check_input)


def test_stream_any_split_equals_whole(check_input):
    expected = crc_sick(check_input)
    for cut in range(len(check_input) + 1):
        s = SickStream()
        s.update(check_input[:cut]).update(check_input[cut:])
        assert s.value == expected
        assert s.byte_count == len(check_input)
        assert s.prev_byte == check_input[-1]


def test_finish_swaps_bytes():
    assert finish_sick(0xA656) == 0x56A6
    assert finish_sick(0x0000) == 0x0000


def test_length_and_none_handling(check_input):
    assert crc_sick(check_input + b"zz", 9) == 0x56A6
    assert crc_sick(None) == 0
    with pytest.raises(InvalidArgumentError):
        crc_sick(None, 3)


def test_update_rejects_bad_arguments():
    with pytest.raises(InvalidArgumentError):
        update_crc_sick(0x10000, 0, 0)
    with pytest.raises(InvalidArgumentError):
        update_crc_sick(0, 0x100, 0)
    with pytest.raises(InvalidArgumentError):
        update_crc_sick(0, 0, -1)
