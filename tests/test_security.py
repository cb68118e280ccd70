"""Unit tests for bread_order.core.security: PBKDF2 hashing and verification."""

import unittest

from bread_order.core.security import (
    PASSWORD_ALGORITHM,
    hash_password,
    new_session_token,
    verify_password,
)

# Keeps the tests fast; production uses 200_000.
ITERATIONS = 1000


class TestHashPassword(unittest.TestCase):
    """hash_password produces a salted, reproducible PBKDF2 hash."""

    def test_fields(self) -> None:
        ph = hash_password("s3cret", iterations=ITERATIONS)
        self.assertEqual(ph.algo, PASSWORD_ALGORITHM)
        self.assertEqual(ph.iter, ITERATIONS)
        self.assertEqual(len(bytes.fromhex(ph.salt)), 16)
        self.assertEqual(len(bytes.fromhex(ph.hash)), 32)

    def test_fresh_salt_each_call(self) -> None:
        a = hash_password("s3cret", iterations=ITERATIONS)
        b = hash_password("s3cret", iterations=ITERATIONS)
        self.assertNotEqual(a.salt, b.salt)
        self.assertNotEqual(a.hash, b.hash)

    def test_given_salt_reproduces_hash(self) -> None:
        a = hash_password("s3cret", iterations=ITERATIONS)
        b = hash_password("s3cret", salt=a.salt, iterations=ITERATIONS)
        self.assertEqual(a, b)

    def test_default_iterations(self) -> None:
        ph = hash_password("s3cret", salt="00" * 16)
        self.assertEqual(ph.iter, 200_000)


class TestVerifyPassword(unittest.TestCase):
    """verify_password accepts only the right password for a known algorithm."""

    def setUp(self) -> None:
        self.stored = hash_password("s3cret", iterations=ITERATIONS)

    def test_correct_password(self) -> None:
        self.assertTrue(verify_password("s3cret", self.stored))

    def test_wrong_password(self) -> None:
        self.assertFalse(verify_password("S3cret", self.stored))

    def test_accepts_stored_dict(self) -> None:
        self.assertTrue(verify_password("s3cret", self.stored.model_dump()))

    def test_algorithm_mismatch(self) -> None:
        stored = self.stored.model_dump()
        stored["algo"] = "bcrypt"
        self.assertFalse(verify_password("s3cret", stored))

    def test_missing_or_malformed_hash(self) -> None:
        self.assertFalse(verify_password("s3cret", None))
        self.assertFalse(verify_password("s3cret", {"algo": PASSWORD_ALGORITHM}))
        bad_salt = self.stored.model_dump()
        bad_salt["salt"] = "not-hex"
        self.assertFalse(verify_password("s3cret", bad_salt))

    def test_non_string_password(self) -> None:
        self.assertFalse(verify_password(None, self.stored))  # type: ignore[arg-type]


class TestSessionToken(unittest.TestCase):
    def test_token_is_long_and_unique(self) -> None:
        tokens = {new_session_token() for _ in range(50)}
        self.assertEqual(len(tokens), 50)
        for token in tokens:
            self.assertEqual(len(token), 48)


if __name__ == "__main__":
    unittest.main()
