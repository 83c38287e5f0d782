"""Helpers for raw JSON values that carry binary data.

Raw values are plain Python objects: ``None`` for null, ``bool``, ``float``
(or ``int``), ``str``, ``list``, ``dict`` and ``bytes`` for binary payloads.
"""

from __future__ import annotations

import base64
import binascii
import logging
from typing import Any

logger = logging.getLogger(__name__)


def is_binary(raw: Any) -> bool:
    """True when the raw value is a binary payload rather than text or data."""
    return isinstance(raw, (bytes, bytearray))


def binary_of(raw: Any) -> bytes:
    """The bytes a raw value stands for.

    Binary payloads are returned as they are, strings are decoded as base64
    (an undecodable string gives empty bytes) and anything else gives
    empty bytes.
    """
    if is_binary(raw):
        return bytes(raw)
    if isinstance(raw, str):
        try:
            return base64.b64decode(raw, validate=True)
        except (binascii.Error, ValueError):
            logger.warning("could not decode %r as a binary", raw)
            return b""
    return b""