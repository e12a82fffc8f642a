# -*- coding: utf-8 -*-
"""
s3sign.connection
~~~~~~~~~~~~~~~~~

Connection-level settings shared by every request a client signs.
"""

import logging
import os
from collections import namedtuple

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "s3.amazonaws.com"
DEFAULT_REGION = "us-east-1"


def region_from_endpoint(endpoint):
    """
    Extract the AWS region from an S3 endpoint.

    Args:
        endpoint (str): S3 endpoint hostname

    Returns:
        str: AWS region, ``us-east-1`` when the endpoint does not name one

    Examples:
        >>> region_from_endpoint("s3-eu-west-1.amazonaws.com")
        'eu-west-1'
        >>> region_from_endpoint("localhost:9000")
        'us-east-1'
    """
    if "s3.amazonaws.com" in endpoint or "s3-accelerate." in endpoint:
        # global and transfer-acceleration endpoints name no region
        return DEFAULT_REGION
    elif "s3-" in endpoint and ".amazonaws.com" in endpoint:
        # s3-region.amazonaws.com
        region = endpoint.split("s3-")[1].split(".amazonaws.com")[0]
    elif "s3." in endpoint and ".amazonaws.com" in endpoint:
        # s3.region.amazonaws.com, bucket.s3.region.amazonaws.com
        # and s3.dualstack.region.amazonaws.com
        region = endpoint.split("s3.")[1].split(".amazonaws.com")[0]
    else:
        # MinIO and other S3-compatible services
        return DEFAULT_REGION

    if region.startswith("dualstack."):
        region = region[len("dualstack."):]
    return region


class ConnectInfo(namedtuple("ConnectInfo", ["access_key", "secret_key", "region"])):
    """
    Credentials and default region of a client session.

    Args:
        access_key (str): AWS access key id
        secret_key (str): AWS secret key
        region (str): Region used when a request does not override it
    """

    __slots__ = ()

    def __repr__(self):
        # keep the secret out of logs and tracebacks
        return "ConnectInfo(access_key={0!r}, secret_key='***', region={1!r})".format(
            self.access_key, self.region
        )

    @classmethod
    def from_endpoint(cls, access_key, secret_key, endpoint=DEFAULT_ENDPOINT, region=None):
        """Build settings for ``endpoint``, deriving the region when not given."""
        return cls(access_key, secret_key, region or region_from_endpoint(endpoint))

    @classmethod
    def from_environ(cls, environ=None):
        """
        Read settings from the standard AWS environment variables.

        ``AWS_ACCESS_KEY_ID`` and ``AWS_SECRET_ACCESS_KEY`` are required.
        The region comes from ``AWS_REGION``, then ``AWS_DEFAULT_REGION``,
        then falls back to ``us-east-1``.

        Args:
            environ (dict, optional): Mapping to read instead of ``os.environ``

        Returns:
            ConnectInfo: The settings

        Raises:
            KeyError: If a credential variable is missing
        """
        if environ is None:
            environ = os.environ

        for name in ("AWS_ACCESS_KEY_ID", "AWS_SECRET_ACCESS_KEY"):
            if not environ.get(name):
                raise KeyError("{0} is not set".format(name))

        region = environ.get("AWS_REGION") or environ.get("AWS_DEFAULT_REGION")
        if not region:
            logger.debug("No region in environment, using %s", DEFAULT_REGION)
            region = DEFAULT_REGION

        return cls(environ["AWS_ACCESS_KEY_ID"], environ["AWS_SECRET_ACCESS_KEY"], region)
