# engine/errors.py
from __future__ import annotations


class InvalidArgumentError(ValueError):
    """
    Caller broke a precondition of the CRC engine (e.g. data=None with a
    nonzero length). Treat as a programming error, not a transient one.
    """
