import random

import pytest

from crcfamily.catalog import available_variants, get_params
from crcfamily.engine.bitwise import compute_bitwise
from crcfamily.engine.compute import checksum
from crcfamily.engine.params import ParamSet

TABLE_DRIVEN = [v for v in available_variants() if v != "sick"]


@pytest.mark.parametrize("variant", TABLE_DRIVEN)
def test_table_engine_matches_bitwise_for_every_preset(variant, payloads):
    params = get_params(variant)
    for data in payloads:
        assert checksum(params, data) == compute_bitwise(params, data)


def _random_params(rng: random.Random) -> ParamSet:
    width = rng.choice([8, 16, 32, 64])
    mask = (1 << width) - 1
    return ParamSet(
        width=width,
        polynomial=rng.randrange(mask + 1) | 1,
        init=rng.randrange(mask + 1),
        reflect_in=rng.random() < 0.5,
        reflect_out=rng.random() < 0.5,
        xorout=rng.randrange(mask + 1),
    )


def test_table_engine_matches_bitwise_for_random_parameter_sets():
    rng = random.Random(1234)
    for _ in range(40):
        params = _random_params(rng)
        data = bytes(rng.randrange(256) for _ in range(rng.randrange(0, 40)))
        assert checksum(params, data) == compute_bitwise(params, data), params


def test_bitwise_known_vectors(check_input):
    # CRC-16/CCITT-FALSE and CRC-32/ISO-HDLC
    ccitt_false = ParamSet(width=16, polynomial=0x1021, init=0xFFFF)
    crc32 = ParamSet(width=32, polynomial=0xEDB88320, init=0xFFFFFFFF,
                     reflect_in=True, reflect_out=True, xorout=0xFFFFFFFF)
    assert compute_bitwise(ccitt_false, check_input) == 0x29B1
    assert compute_bitwise(crc32, check_input) == 0xCBF43926
    assert compute_bitwise(ccitt_false, b"") == 0xFFFF
    assert compute_bitwise(crc32, b"") == 0x00000000
