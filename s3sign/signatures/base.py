# -*- coding: utf-8 -*-
"""
s3sign.signatures.base
~~~~~~~~~~~~~~~~~~~~~~

Base class for AWS signature implementations.
"""

from ..connection import DEFAULT_ENDPOINT, ConnectInfo, region_from_endpoint


class BaseSignature(object):
    """
    Credentials, endpoint and region shared by a signer.

    Subclasses sign ``requests`` prepared requests in place through
    ``sign_request`` and build presigned URLs through ``presign_url``. Both
    take an optional ``timestamp``; without one the signer reads the clock
    once per call. A signer keeps no state between calls.

    Args:
        access_key (str): AWS access key
        secret_key (str): AWS secret key
        endpoint (str): S3 endpoint hostname
        region (str, optional): AWS region, guessed from ``endpoint`` when
            not given
    """

    def __init__(self, access_key, secret_key, endpoint=DEFAULT_ENDPOINT, region=None):
        self.access_key = access_key
        self.secret_key = secret_key
        self.endpoint = endpoint
        self.region = region or region_from_endpoint(endpoint)

    @property
    def connect_info(self):
        """The settings as a ``ConnectInfo``."""
        return ConnectInfo(self.access_key, self.secret_key, self.region)

    def sign_request(self, request, timestamp=None):
        """Sign ``request`` in place and return it."""
        raise NotImplementedError("Subclasses must implement sign_request")

    def presign_url(self, method, url, expires, headers=None, timestamp=None):
        """Return ``url`` with authentication query parameters valid for ``expires`` seconds."""
        raise NotImplementedError("Subclasses must implement presign_url")
