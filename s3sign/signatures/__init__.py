# -*- coding: utf-8 -*-
"""
s3sign.signatures
~~~~~~~~~~~~~~~~~

AWS Signature Version 4 signing.
"""

from .base import BaseSignature
from .v4 import (
    UNSIGNED_PAYLOAD,
    SignatureV4,
    compute_signature,
    get_headers_to_sign,
    mk_canonical_request,
    mk_scope,
    mk_signing_key,
    mk_string_to_sign,
    parse_query,
    sign_v4,
    sign_v4_at_time,
)

__all__ = [
    "BaseSignature",
    "SignatureV4",
    "UNSIGNED_PAYLOAD",
    "compute_signature",
    "get_headers_to_sign",
    "mk_canonical_request",
    "mk_scope",
    "mk_signing_key",
    "mk_string_to_sign",
    "parse_query",
    "sign_v4",
    "sign_v4_at_time",
]
