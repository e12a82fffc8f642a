import unittest

from s3sign import ConnectInfo, RequestInfo
from s3sign.auth import S3Auth
from s3sign.signatures import sign_v4_at_time
from s3sign.signatures.base import BaseSignature
from s3sign.util import to_bytes


class TestErrorBranches(unittest.TestCase):
    def test_auth_unsupported_signature(self):
        with self.assertRaises(ValueError):
            S3Auth('a', 'b', signature_version='bad')

    def test_basesignature_sign_request_not_implemented(self):
        base = BaseSignature('a', 'b')
        with self.assertRaises(NotImplementedError):
            base.sign_request(None)
        with self.assertRaises(NotImplementedError):
            base.presign_url('GET', 'http://localhost:9000/bucket/key', 60)

    def test_basesignature_settings(self):
        base = BaseSignature('a', 'b', endpoint='s3-eu-west-1.amazonaws.com')
        self.assertEqual(base.connect_info, ConnectInfo('a', 'b', 'eu-west-1'))
        base = BaseSignature('a', 'b', endpoint='localhost:9000', region='home')
        self.assertEqual(base.connect_info.region, 'home')

    def test_to_bytes_rejects_other_types(self):
        with self.assertRaises(TypeError):
            to_bytes(12)

    def test_from_environ_missing_credentials(self):
        with self.assertRaises(KeyError):
            ConnectInfo.from_environ({'AWS_ACCESS_KEY_ID': 'a'})
        with self.assertRaises(KeyError):
            ConnectInfo.from_environ({'AWS_SECRET_ACCESS_KEY': 'b'})

    def test_odd_inputs_pass_through(self):
        # Nothing is validated; the server is the one to reject these.
        from datetime import datetime
        data = sign_v4_at_time(
            datetime(2013, 5, 24),
            ConnectInfo('', '', 'not a region'),
            RequestInfo('BREW', 'no-leading-slash'),
            -5,
        )
        self.assertEqual(data.scope, '20130524/not a region/s3/aws4_request')
        self.assertEqual(dict(data.output)['X-Amz-Expires'], '-5')
        self.assertEqual(dict(data.output)['X-Amz-Credential'], '/' + data.scope)
        self.assertTrue(data.canonical_request.startswith('BREW\nno-leading-slash\n'))
