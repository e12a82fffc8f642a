# -*- coding: utf-8 -*-
"""
s3sign.signatures.v4
~~~~~~~~~~~~~~~~~~~~

AWS Signature Version 4 implementation.

The signing pipeline is a chain of pure functions::

    get_headers_to_sign -> mk_canonical_request -> mk_string_to_sign
    mk_signing_key -> compute_signature

``sign_v4_at_time`` runs it for an explicit timestamp and either returns
the headers that authenticate a request (header mode) or the query
parameters of a presigned URL (when an expiry is given). ``sign_v4`` is the
same thing at the current time. ``SignatureV4`` applies the result to
``requests`` objects and URLs.
"""

import logging
from urllib.parse import quote, unquote, urlencode, urlsplit, urlunsplit

from .. import datetime_utils
from ..data import RequestInfo, SignV4Data
from ..datetime_utils import aws_date_format, aws_time_format, to_utc
from ..util import (
    hash_sha256,
    hmac_sha256,
    hmac_sha256_hex,
    stringify,
    to_bytes,
    uri_encode,
)
from .base import BaseSignature

logger = logging.getLogger(__name__)

ALGORITHM = "AWS4-HMAC-SHA256"
SERVICE = "s3"
TERMINATOR = "aws4_request"
UNSIGNED_PAYLOAD = "UNSIGNED-PAYLOAD"
EMPTY_PAYLOAD_HASH = hash_sha256(b"")

# never part of the signed header set
IGNORED_HEADERS = frozenset(
    ["authorization", "content-type", "content-length", "user-agent"]
)


def mk_scope(timestamp, region):
    """
    Build the credential scope ``YYYYMMDD/REGION/s3/aws4_request``.

    Args:
        timestamp (datetime): Signing time
        region (str): Region the request is sent to

    Returns:
        str: The scope
    """
    return "/".join([aws_date_format(timestamp), stringify(region), SERVICE, TERMINATOR])


def get_headers_to_sign(headers):
    """
    Select and normalize the headers that take part in the signature.

    Names are folded to lower case and values stripped of surrounding
    whitespace. Whitespace inside a value is kept as is. Headers whose
    folded name is in ``IGNORED_HEADERS`` are dropped; duplicates are kept.

    Args:
        headers: Iterable of ``(name, value)`` pairs

    Returns:
        list: ``(name, value)`` pairs, in input order
    """
    headers_to_sign = []
    for name, value in headers:
        name = stringify(name).lower()
        if name in IGNORED_HEADERS:
            continue
        headers_to_sign.append((name, stringify(value).strip()))
    return headers_to_sign


def mk_canonical_request(request_info, headers_to_sign):
    """
    Serialize a request into its SigV4 canonical form.

    The result is six newline-joined sections: method, encoded path,
    canonical query string, canonical headers, signed header names and
    payload hash. Query pairs are sorted by encoded key, then encoded value;
    headers by name, then value. Sorting compares code points, which for
    these strings is the same as comparing their UTF-8 bytes.

    Args:
        request_info (RequestInfo): The request, with any presign query
            parameters already merged in
        headers_to_sign (list): Output of ``get_headers_to_sign``

    Returns:
        str: The canonical request
    """
    encoded_query = sorted(
        (uri_encode(key), "" if value is None else uri_encode(value))
        for key, value in request_info.query_params
    )
    canonical_query_string = "&".join(
        "{0}={1}".format(key, value) for key, value in encoded_query
    )

    sorted_headers = sorted(headers_to_sign)
    canonical_headers = "".join(
        "{0}:{1}\n".format(name, value) for name, value in sorted_headers
    )
    signed_headers = ";".join(name for name, _ in sorted_headers)

    payload_hash = request_info.payload_hash
    if payload_hash is None:
        payload_hash = UNSIGNED_PAYLOAD

    return "\n".join(
        [
            request_info.method,
            uri_encode(request_info.path, encode_slash=False),
            canonical_query_string,
            canonical_headers,
            signed_headers,
            payload_hash,
        ]
    )


def mk_string_to_sign(timestamp, scope, canonical_request):
    """Build the string to sign for ``canonical_request``."""
    return "\n".join(
        [ALGORITHM, aws_time_format(timestamp), scope, hash_sha256(canonical_request)]
    )


def mk_signing_key(timestamp, region, secret_key):
    """
    Derive the scoped signing key.

    Each step keys an HMAC-SHA256 with the raw output of the previous one,
    starting from ``"AWS4" + secret_key``.

    Args:
        timestamp (datetime): Signing time, only its date is used
        region (str): Region of the scope
        secret_key (str or bytes): AWS secret key

    Returns:
        bytes: The 32-byte signing key
    """
    key = b"AWS4" + to_bytes(secret_key)
    for label in (aws_date_format(timestamp), region, SERVICE, TERMINATOR):
        key = hmac_sha256(key, label)
    return key


def compute_signature(string_to_sign, signing_key):
    """Lower-case hex HMAC-SHA256 of ``string_to_sign`` under ``signing_key``."""
    return hmac_sha256_hex(signing_key, string_to_sign)


def sign_v4_at_time(timestamp, connect_info, request_info, expiry=None):
    """
    Sign a request at a given time.

    Without an expiry the output holds the ``authorization`` and
    ``X-Amz-Date`` headers to add to the request. With an expiry (in
    seconds) a presigned request is built instead: the authentication
    parameters are signed as part of the query string and the output is the
    list of query parameters to append to the URL, ``X-Amz-Signature`` first.

    Args:
        timestamp (datetime): Signing time
        connect_info (ConnectInfo): Credentials and default region
        request_info (RequestInfo): The request to sign
        expiry (int, optional): Lifetime of a presigned URL in seconds

    Returns:
        SignV4Data: The output together with every intermediate value
    """
    presign = expiry is not None
    region = request_info.region
    if region is None:
        region = connect_info.region

    scope = mk_scope(timestamp, region)
    credential = "{0}/{1}".format(stringify(connect_info.access_key), scope)
    date_pair = ("X-Amz-Date", aws_time_format(timestamp))

    headers = request_info.headers
    if not presign:
        headers = headers + (date_pair,)
    headers_to_sign = get_headers_to_sign(headers)
    signed_header_keys = ";".join(sorted(name for name, _ in headers_to_sign))

    auth_query_params = [
        ("X-Amz-Algorithm", ALGORITHM),
        ("X-Amz-Credential", credential),
        date_pair,
        ("X-Amz-Expires", str(expiry) if presign else ""),
        ("X-Amz-SignedHeaders", signed_header_keys),
    ]
    if presign:
        request_info = request_info._replace(
            query_params=request_info.query_params + tuple(auth_query_params)
        )

    canonical_request = mk_canonical_request(request_info, headers_to_sign)
    string_to_sign = mk_string_to_sign(timestamp, scope, canonical_request)
    signing_key = mk_signing_key(timestamp, region, connect_info.secret_key)
    signature = compute_signature(string_to_sign, signing_key)

    if presign:
        output = [("X-Amz-Signature", signature)] + auth_query_params
    else:
        auth_value = "{0} Credential={1}, SignedHeaders={2}, Signature={3}".format(
            ALGORITHM, credential, signed_header_keys, signature
        )
        output = [("authorization", auth_value), date_pair]

    return SignV4Data(
        to_utc(timestamp),
        scope,
        canonical_request,
        headers_to_sign,
        output,
        string_to_sign,
        signing_key,
    )


def sign_v4(connect_info, request_info, expiry=None):
    """
    Sign a request at the current time.

    Returns:
        list: The ``output`` of ``sign_v4_at_time``
    """
    data = sign_v4_at_time(
        datetime_utils.get_utc_datetime(), connect_info, request_info, expiry
    )
    log_sign_v4_data(data)
    return data.output


def parse_query(query):
    """
    Split a raw URL query into ``(name, value)`` pairs.

    Percent-escapes are decoded but ``+`` is kept literally, since that is
    what the server sees. A name without ``=`` gets an empty value.

    Examples:
        >>> parse_query("prefix=a+b&uploads")
        [('prefix', 'a+b'), ('uploads', '')]
    """
    pairs = []
    for part in query.split("&"):
        if not part:
            continue
        name, _, value = part.partition("=")
        pairs.append((unquote(name), unquote(value)))
    return pairs


def log_sign_v4_data(data):
    """Log a ``SignV4Data`` at DEBUG level. The signing key itself is not logged."""
    if not logger.isEnabledFor(logging.DEBUG):
        return
    logger.debug("SignV4Data: timestamp=%s scope=%s", data.sign_time, data.scope)
    logger.debug("Canonical request:\n%s", data.canonical_request)
    logger.debug("Headers to sign: %r", data.headers_to_sign)
    logger.debug("Output: %r", data.output)
    logger.debug("String to sign:\n%s", data.string_to_sign)
    logger.debug("Signing key: %d bytes", len(data.signing_key))


class SignatureV4(BaseSignature):
    """
    AWS Signature Version 4 implementation.

    Signs ``requests`` prepared requests in place and builds presigned URLs
    on top of ``sign_v4_at_time``.
    """

    def sign(self, request_info, expiry=None, timestamp=None):
        """
        Sign ``request_info``.

        Args:
            request_info (RequestInfo): The request to sign
            expiry (int, optional): Presigned URL lifetime in seconds
            timestamp (datetime, optional): Signing time, defaults to now

        Returns:
            list: Headers (header mode) or query parameters (presigned mode)
        """
        if timestamp is None:
            return sign_v4(self.connect_info, request_info, expiry)

        data = sign_v4_at_time(timestamp, self.connect_info, request_info, expiry)
        log_sign_v4_data(data)
        return data.output

    def sign_request(self, request, timestamp=None):
        """
        Sign a ``requests.PreparedRequest`` using header mode.

        Adds the ``Host`` and ``x-amz-content-sha256`` headers when they are
        missing, drops an ``Authorization`` or ``X-Amz-Date`` left from an
        earlier signing, then sets both from a fresh signature.

        Args:
            request: The prepared request
            timestamp (datetime, optional): Signing time, defaults to now

        Returns:
            The signed request object
        """
        parsed_url = urlsplit(request.url)

        if "Host" not in request.headers:
            request.headers["Host"] = parsed_url.netloc.rpartition("@")[2]
        for name in ("Authorization", "X-Amz-Date"):
            request.headers.pop(name, None)

        payload_hash = request.headers.get("x-amz-content-sha256")
        if payload_hash is None:
            payload_hash = self._get_payload_hash(request.body)
            request.headers["x-amz-content-sha256"] = payload_hash

        request_info = RequestInfo(
            request.method,
            unquote(parsed_url.path) or "/",
            request.headers.items(),
            parse_query(parsed_url.query),
            payload_hash,
        )

        for name, value in self.sign(request_info, timestamp=timestamp):
            request.headers[name] = value

        logger.debug("Signed %s %s", request.method, request.url)
        return request

    def presign_url(self, method, url, expires, headers=None, timestamp=None):
        """
        Build a presigned URL.

        The ``Host`` header is taken from ``url`` and signed unless
        ``headers`` already carries one. Existing query parameters of
        ``url`` are kept and signed too.

        Args:
            method (str): HTTP method the URL will be used with
            url (str): Full object URL
            expires (int): Lifetime in seconds
            headers (dict, optional): Headers the caller will send and
                wants signed
            timestamp (datetime, optional): Signing time, defaults to now

        Returns:
            str: The URL with the authentication query parameters appended

        Examples:
            >>> signer.presign_url("GET", "https://bucket.s3.amazonaws.com/key", 3600)
            'https://bucket.s3.amazonaws.com/key?X-Amz-Signature=...'
        """
        parsed_url = urlsplit(url)
        query_params = parse_query(parsed_url.query)

        request_info = RequestInfo(
            method, unquote(parsed_url.path) or "/", headers, query_params
        )
        if not any(stringify(name).lower() == "host" for name, _ in request_info.headers):
            host = parsed_url.netloc.rpartition("@")[2]
            request_info = request_info._replace(
                headers=request_info.headers + (("Host", host),)
            )

        output = self.sign(request_info, expiry=expires, timestamp=timestamp)
        query_string = urlencode(query_params + output, quote_via=quote)

        return urlunsplit(
            (
                parsed_url.scheme,
                parsed_url.netloc,
                parsed_url.path or "/",
                query_string,
                parsed_url.fragment,
            )
        )

    def _get_payload_hash(self, body):
        """Payload hash for a request body; streamed bodies stay unsigned."""
        if not body:
            return EMPTY_PAYLOAD_HASH
        if isinstance(body, (bytes, str)):
            return hash_sha256(body)
        return UNSIGNED_PAYLOAD
