"""Unit tests for credential verification helpers."""

import base64
import unittest

from api.security import (
    API_USERNAME,
    authenticate,
    create_access_token,
    get_password_hash,
    verify_basic_credentials,
    verify_password,
    verify_token,
)


def _basic(value: str) -> str:
    return base64.b64encode(value.encode('utf-8')).decode('ascii')


class TestPasswordHashing(unittest.TestCase):

    def test_hash_and_verify(self):
        hashed = get_password_hash("correct horse")

        self.assertNotEqual(hashed, "correct horse")
        self.assertTrue(verify_password("correct horse", hashed))
        self.assertFalse(verify_password("battery staple", hashed))

    def test_overlong_password(self):
        hashed = get_password_hash("short")

        with self.assertRaises(ValueError):
            get_password_hash("x" * 73)
        self.assertFalse(verify_password("x" * 200, hashed))


class TestBasicCredentials(unittest.TestCase):

    def test_valid_credentials(self):
        self.assertEqual(verify_basic_credentials(_basic("tester:s3cret-pass")), "tester")

    def test_password_split_on_first_colon(self):
        self.assertIsNone(verify_basic_credentials(_basic("tester:s3cret:pass")))

    def test_invalid_credentials(self):
        for value in ("tester:wrong", "other:s3cret-pass", "tester", ":", ""):
            self.assertIsNone(verify_basic_credentials(_basic(value)), value)

    def test_invalid_encoding(self):
        self.assertIsNone(verify_basic_credentials("%%%"))
        self.assertIsNone(verify_basic_credentials(base64.b64encode(b"\xff\xfe:x").decode()))


class TestTokens(unittest.TestCase):

    def test_token_round_trip(self):
        token, expires_in = create_access_token(API_USERNAME)

        self.assertGreater(expires_in, 0)
        self.assertEqual(verify_token(token), API_USERNAME)

    def test_garbage_token(self):
        self.assertIsNone(verify_token("abc.def.ghi"))


class TestAuthenticate(unittest.TestCase):

    def test_basic_scheme_case_insensitive(self):
        self.assertEqual(authenticate(f"basic {_basic('tester:s3cret-pass')}"), "tester")

    def test_bearer_scheme(self):
        token, _ = create_access_token(API_USERNAME)
        self.assertEqual(authenticate(f"Bearer {token}"), "tester")

    def test_missing_credentials(self):
        self.assertIsNone(authenticate("Basic"))
        self.assertIsNone(authenticate("Bearer "))

    def test_unknown_scheme(self):
        self.assertIsNone(authenticate("Token abc"))


if __name__ == '__main__':
    unittest.main()
