# -*- coding: utf-8 -*-
"""
s3sign.util
~~~~~~~~~~~

Byte, hashing and URI helpers shared by the signature implementations.
"""

import hashlib
import hmac
from urllib.parse import quote


def stringify(value):
    """Return ``value`` as text, decoding UTF-8 bytes."""
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return value


def to_bytes(value):
    """
    Coerce ``value`` to bytes.

    Args:
        value (str or bytes): Value to convert

    Returns:
        bytes: The UTF-8 encoding of ``value``

    Raises:
        TypeError: If ``value`` is neither text nor bytes
    """
    if isinstance(value, bytes):
        return value
    if isinstance(value, str):
        return value.encode("utf-8")
    raise TypeError(
        "expected str or bytes, got {0}".format(type(value).__name__)
    )


def uri_encode(value, encode_slash=True):
    """
    Percent-encode ``value`` the way SigV4 canonicalization expects.

    Unreserved characters (``A-Z a-z 0-9 - _ . ~``) are left alone, every
    other byte of the UTF-8 encoding becomes ``%XX`` with upper-case hex.

    Args:
        value (str or bytes): The path segment, key or value to encode
        encode_slash (bool): Escape ``/`` too. Paths pass False,
            query keys and values pass True.

    Returns:
        str: The encoded value

    Examples:
        >>> uri_encode("/my bucket/a+b", encode_slash=False)
        '/my%20bucket/a%2Bb'
        >>> uri_encode("us-east-1/s3")
        'us-east-1%2Fs3'
    """
    return quote(to_bytes(value), safe="" if encode_slash else "/")


def hash_sha256(data):
    """Lower-case hex SHA-256 digest of ``data``."""
    return hashlib.sha256(to_bytes(data)).hexdigest()


def hmac_sha256(key, msg):
    """Raw HMAC-SHA256 digest."""
    return hmac.new(to_bytes(key), to_bytes(msg), hashlib.sha256).digest()


def hmac_sha256_hex(key, msg):
    """Lower-case hex HMAC-SHA256 digest."""
    return hmac.new(to_bytes(key), to_bytes(msg), hashlib.sha256).hexdigest()
