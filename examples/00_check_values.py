import logging

from crcfamily.catalog import available_variants, checksum
from crcfamily.logging_config import setup_logging
from crcfamily.nmea import checksum_NMEA, verify_nmea_sentence


CHECK = b"123456789"
GGA = "$GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47"


if __name__ == "__main__":
    setup_logging(logging.DEBUG)

    for name in available_variants():
        print(f"{name:<12} 0x{checksum(CHECK, variant=name):X}")

    print(f"{'nmea':<12} {checksum_NMEA(CHECK)}")
    print(f"GGA sentence verifies: {verify_nmea_sentence(GGA)}")
