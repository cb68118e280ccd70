"""Unit tests for the user directory, the session table and login/logout."""

import tempfile
import unittest
from pathlib import Path

from bread_order.core.errors import ConflictError, InvalidCredentialsError, NotFoundError, ValidationError
from bread_order.core.sessions import SessionStore
from bread_order.core.storage import JsonFile
from bread_order.services import auth
from bread_order.services.users import UserDirectory

ITERATIONS = 1000


class UsersTestCase(unittest.TestCase):
    def setUp(self) -> None:
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.file = JsonFile(Path(tmp.name) / "users.json", default={"users": []})
        self.users = UserDirectory(self.file, iterations=ITERATIONS)
        self.users.ensure_default_admin("admin", "admin123")
        self.sessions = SessionStore()


class TestUserDirectory(UsersTestCase):
    def test_default_admin_seeded_once(self) -> None:
        self.assertFalse(self.users.ensure_default_admin("root", "other"))
        listed = self.users.list_users()
        self.assertEqual([(u.username, u.role) for u in listed], [("admin", "admin")])

    def test_stored_hash_format(self) -> None:
        raw = self.file.read()["users"][0]
        self.assertEqual(raw["password"]["algo"], "pbkdf2_sha256")
        self.assertEqual(raw["password"]["iter"], ITERATIONS)
        self.assertNotIn("admin123", str(raw))

    def test_create_normalizes_role(self) -> None:
        self.users.create_user("baker", "pw", "superuser")
        self.users.create_user("boss", "pw", "admin")
        roles = {u.username: u.role for u in self.users.list_users()}
        self.assertEqual(roles, {"admin": "admin", "baker": "user", "boss": "admin"})

    def test_create_requires_username_and_password(self) -> None:
        with self.assertRaises(ValidationError):
            self.users.create_user("", "pw")
        with self.assertRaises(ValidationError):
            self.users.create_user("baker", None)

    def test_duplicate_username_conflicts(self) -> None:
        with self.assertRaises(ConflictError):
            self.users.create_user("admin", "pw")

    def test_update_password_and_role(self) -> None:
        self.users.create_user("baker", "old", "user")
        record = self.users.update_user("baker", password="new", role="admin")
        self.assertEqual(record.role, "admin")
        with self.assertRaises(InvalidCredentialsError):
            auth.login(self.users, self.sessions, "baker", "old")
        _token, user = auth.login(self.users, self.sessions, "baker", "new")
        self.assertEqual(user.role, "admin")

    def test_update_unknown_user(self) -> None:
        with self.assertRaises(NotFoundError):
            self.users.update_user("ghost", role="admin")

    def test_update_malformed_record_leaves_file_unchanged(self) -> None:
        data = self.file.read()
        data["users"].append({"username": "legacy", "role": "user"})
        self.file.write(data)
        with self.assertLogs("bread_order.services.users", level="WARNING"):
            with self.assertRaises(ValidationError):
                self.users.update_user("legacy", role="admin")
        roles = {u["username"]: u.get("role") for u in self.file.read()["users"]}
        self.assertEqual(roles, {"admin": "admin", "legacy": "user"})

    def test_new_password_repairs_malformed_record(self) -> None:
        data = self.file.read()
        data["users"].append({"username": "legacy", "role": "user"})
        self.file.write(data)
        record = self.users.update_user("legacy", password="fresh", role="admin")
        self.assertEqual(record.role, "admin")
        _token, user = auth.login(self.users, self.sessions, "legacy", "fresh")
        self.assertEqual(user.role, "admin")

    def test_delete(self) -> None:
        self.users.create_user("baker", "pw")
        self.users.delete_user("baker")
        self.assertIsNone(self.users.get("baker"))
        with self.assertRaises(NotFoundError):
            self.users.delete_user("baker")


class TestLogin(UsersTestCase):
    """login issues a session token; failures are indistinguishable."""

    def test_correct_credentials(self) -> None:
        token, user = auth.login(self.users, self.sessions, "admin", "admin123")
        self.assertEqual((user.username, user.role), ("admin", "admin"))
        me = auth.current_user(self.sessions, token)
        self.assertIsNotNone(me)
        self.assertEqual((me.username, me.role), ("admin", "admin"))

    def test_wrong_password_and_unknown_user_fail_identically(self) -> None:
        with self.assertRaises(InvalidCredentialsError) as wrong:
            auth.login(self.users, self.sessions, "admin", "nope")
        with self.assertRaises(InvalidCredentialsError) as unknown:
            auth.login(self.users, self.sessions, "ghost", "admin123")
        self.assertEqual(wrong.exception.message, unknown.exception.message)
        self.assertEqual(wrong.exception.status_code, unknown.exception.status_code)
        self.assertEqual(len(self.sessions), 0)

    def test_logout(self) -> None:
        token, _ = auth.login(self.users, self.sessions, "admin", "admin123")
        auth.logout(self.sessions, token)
        self.assertIsNone(auth.current_user(self.sessions, token))
        # idempotent
        auth.logout(self.sessions, token)
        auth.logout(self.sessions, None)

    def test_unknown_token(self) -> None:
        self.assertIsNone(auth.current_user(self.sessions, "deadbeef"))
        self.assertIsNone(auth.current_user(self.sessions, None))


class TestSessionStore(unittest.TestCase):
    def test_revoke_user_drops_all_their_sessions(self) -> None:
        sessions = SessionStore()
        a = sessions.create("baker", "user")
        b = sessions.create("baker", "user")
        c = sessions.create("admin", "admin")
        self.assertEqual(sessions.revoke_user("baker"), 2)
        self.assertIsNone(sessions.get(a))
        self.assertIsNone(sessions.get(b))
        self.assertIsNotNone(sessions.get(c))

    def test_update_role(self) -> None:
        sessions = SessionStore()
        token = sessions.create("baker", "user")
        sessions.update_role("baker", "admin")
        self.assertEqual(sessions.get(token).role, "admin")

    def test_clear(self) -> None:
        sessions = SessionStore()
        token = sessions.create("baker", "user")
        sessions.clear()
        self.assertIsNone(sessions.get(token))
        self.assertEqual(len(sessions), 0)


if __name__ == "__main__":
    unittest.main()
