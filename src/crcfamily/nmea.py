# nmea.py
from __future__ import annotations

from typing import Optional, Union

from crcfamily.engine.compute import as_buffer
from crcfamily.engine.errors import InvalidArgumentError

TextOrBytes = Union[str, bytes, bytearray, memoryview]

_SENTENCE_STOP = (ord("*"), ord("\r"), ord("\n"), 0)
_HEX_DIGITS = b"0123456789ABCDEFabcdef"


def checksum_NMEA(data: Optional[TextOrBytes], length: Optional[int] = None) -> str:
    """
    NMEA 0183 checksum: XOR of every byte, as two uppercase hex digits.

    Not a CRC. Order independent. data is the payload between '$' and '*';
    use nmea_sentence_checksum() for a full sentence.
    """
    acc = 0
    for c in as_buffer(_to_bytes(data), length):
        acc ^= c
    return f"{acc & 0xFF:02X}"


checksum_nmea = checksum_NMEA


def nmea_sentence_checksum(sentence: TextOrBytes) -> str:
    """
    Checksum of a framed sentence: skips one leading '$' and stops at the first
    '*', CR, LF or NUL.
      "$GPGGA,123519,...,M,,*47" -> "47"
    """
    b = _to_bytes(sentence)
    if b is None:
        raise InvalidArgumentError("sentence must not be None")
    start = 1 if b[:1] == b"$" else 0
    end = start
    while end < len(b) and b[end] not in _SENTENCE_STOP:
        end += 1
    return checksum_NMEA(b[start:end])


def verify_nmea_sentence(sentence: TextOrBytes) -> bool:
    """
    True if the sentence carries a '*HH' field matching its payload.
    A sentence without '*' followed by two hex digits does not verify.
    """
    b = _to_bytes(sentence)
    if b is None:
        raise InvalidArgumentError("sentence must not be None")
    star = b.find(b"*")
    if star < 0:
        return False
    sent = b[star + 1:star + 3]
    if len(sent) != 2 or not all(ch in _HEX_DIGITS for ch in sent):
        return False
    return int(sent.decode("ascii"), 16) == int(nmea_sentence_checksum(b), 16)


# ============================
# Internal
# ============================

def _to_bytes(data: Optional[TextOrBytes]):
    if isinstance(data, str):
        try:
            return data.encode("ascii")
        except UnicodeEncodeError as e:
            raise InvalidArgumentError("NMEA text must be ASCII") from e
    if isinstance(data, memoryview):
        return data.tobytes()
    return data
