# -*- coding: utf-8 -*-
"""
s3sign.datetime_utils
~~~~~~~~~~~~~~~~~~~~~

Clock access and the timestamp formats used by SigV4.
"""

from datetime import datetime, timezone

AWS_TIME_FORMAT = "%Y%m%dT%H%M%SZ"
AWS_DATE_FORMAT = "%Y%m%d"


def get_utc_datetime():
    """
    Read the wall clock.

    This is the only place the package looks at the current time, so tests
    can freeze or stub it here.

    Returns:
        datetime: Current time, timezone-aware in UTC
    """
    return datetime.now(timezone.utc)


def to_utc(timestamp):
    """Normalize ``timestamp`` to UTC; naive values are taken as UTC already."""
    if timestamp.tzinfo is None:
        return timestamp.replace(tzinfo=timezone.utc)
    return timestamp.astimezone(timezone.utc)


def aws_time_format(timestamp):
    """Format as ``YYYYMMDDTHHMMSSZ``."""
    return to_utc(timestamp).strftime(AWS_TIME_FORMAT)


def aws_date_format(timestamp):
    """Format as ``YYYYMMDD``."""
    return to_utc(timestamp).strftime(AWS_DATE_FORMAT)
