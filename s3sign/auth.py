# -*- coding: utf-8 -*-
"""
s3sign.auth
~~~~~~~~~~~

Authentication hook for ``requests``.
"""

from requests.auth import AuthBase

from .connection import DEFAULT_ENDPOINT
from .signatures import SignatureV4

SIGNATURE_VERSIONS = {"s3v4": SignatureV4}


class S3Auth(AuthBase):
    """
    Sign every request sent through ``requests`` with AWS credentials.

    Usage::

        >>> auth = S3Auth(access_key, secret_key, endpoint="localhost:9000")
        >>> requests.get("http://localhost:9000/bucket/key", auth=auth)

    Args:
        access_key (str): AWS access key
        secret_key (str): AWS secret key
        endpoint (str): S3 endpoint, used to guess the region
        region (str, optional): AWS region, overrides the guess
        signature_version (str): Only ``"s3v4"`` is supported

    Raises:
        ValueError: If ``signature_version`` is not supported
    """

    def __init__(
        self,
        access_key,
        secret_key,
        endpoint=DEFAULT_ENDPOINT,
        region=None,
        signature_version="s3v4",
    ):
        if signature_version not in SIGNATURE_VERSIONS:
            raise ValueError(
                "Unsupported signature version: {0}".format(signature_version)
            )
        self.signature_version = signature_version
        self.signer = SIGNATURE_VERSIONS[signature_version](
            access_key, secret_key, endpoint, region=region
        )

    def __call__(self, request):
        return self.signer.sign_request(request)

    def presign_url(self, method, url, expires, headers=None):
        """Shortcut for ``SignatureV4.presign_url`` at the current time."""
        return self.signer.presign_url(method, url, expires, headers=headers)
