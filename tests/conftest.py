from __future__ import annotations

import logging
import random
from pathlib import Path

import pytest


CHECK_INPUT = b"123456789"


def repo_root() -> Path:
    """
    Find the repository root by walking upward until we find pyproject.toml.
    This is robust regardless of where tests live.
    """
    start = Path(__file__).resolve()
    for p in [start] + list(start.parents):
        if (p / "pyproject.toml").exists():
            return p
    raise RuntimeError("repo_root(): could not find pyproject.toml walking upward")


@pytest.fixture
def examples_dir() -> Path:
    return repo_root() / "examples"


@pytest.fixture
def check_input() -> bytes:
    """The catalogue check string every CRC standard quotes its check value for."""
    return CHECK_INPUT


@pytest.fixture
def payloads() -> list[bytes]:
    rng = random.Random(0xC0FFEE)
    out = [b"", b"\x00", b"\xff", CHECK_INPUT, bytes(range(256))]
    for n in (2, 3, 7, 31, 64, 257):
        out.append(bytes(rng.randrange(256) for _ in range(n)))
    return out


@pytest.fixture(autouse=True)
def restore_package_logger():
    """setup_logging() reconfigures the 'crcfamily' logger; undo it per test."""
    lg = logging.getLogger("crcfamily")
    saved = (lg.level, list(lg.handlers), lg.propagate)
    yield
    lg.setLevel(saved[0])
    lg.handlers[:] = saved[1]
    lg.propagate = saved[2]
