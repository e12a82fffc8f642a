# -*- coding: utf-8 -*-
"""
s3sign.data
~~~~~~~~~~~

Value types passed into and out of the signer.
"""

from collections import namedtuple


def _pairs(items):
    """Turn a mapping or an iterable of pairs into a tuple of pairs."""
    if items is None:
        return ()
    if hasattr(items, "items"):
        items = items.items()
    return tuple((name, value) for name, value in items)


class RequestInfo(
    namedtuple(
        "RequestInfo",
        ["method", "path", "headers", "query_params", "payload_hash", "region"],
    )
):
    """
    Description of one request to sign.

    Args:
        method (str): HTTP method, used verbatim
        path (str): Request path, not yet percent-encoded
        headers: Ordered ``(name, value)`` pairs or a mapping
        query_params: Ordered ``(name, value)`` pairs or a mapping. A value
            of None means the parameter has no value (``?uploads``).
        payload_hash (str, optional): Hex SHA-256 of the body. When absent
            the body is signed as ``UNSIGNED-PAYLOAD``.
        region (str, optional): Overrides the connection's region
    """

    __slots__ = ()

    def __new__(
        cls, method, path, headers=(), query_params=(), payload_hash=None, region=None
    ):
        return super(RequestInfo, cls).__new__(
            cls,
            method,
            path,
            _pairs(headers),
            _pairs(query_params),
            payload_hash,
            region,
        )


SignV4Data = namedtuple(
    "SignV4Data",
    [
        "sign_time",
        "scope",
        "canonical_request",
        "headers_to_sign",
        "output",
        "string_to_sign",
        "signing_key",
    ],
)
SignV4Data.__doc__ = """Intermediate and final values of a single SigV4 signing call."""
