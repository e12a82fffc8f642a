# -*- coding: utf-8 -*-
from .auth import S3Auth
from .connection import ConnectInfo
from .data import RequestInfo, SignV4Data
from .signatures import SignatureV4, sign_v4, sign_v4_at_time

__title__ = 's3sign'
__version__ = '1.0.0'
__license__ = 'MIT'
__all__ = [
    "S3Auth",
    "ConnectInfo",
    "RequestInfo",
    "SignV4Data",
    "SignatureV4",
    "sign_v4",
    "sign_v4_at_time",
]
