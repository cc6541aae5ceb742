import unittest

from sqlalchemy.exc import IntegrityError

from roster_api.settings_store import (
    SINGLETON_ID,
    AppSettingsRow,
    InMemorySettingsRepository,
    SqlSettingsRepository,
)


class SqlSettingsRepositoryTests(unittest.TestCase):
    """
    Uses SQLite via SQLAlchemy URL for fast/local testing of the SQL repository.
    """

    def setUp(self):
        self.repo = SqlSettingsRepository("sqlite+pysqlite:///:memory:")

    def test_get_before_put_is_empty(self):
        self.assertEqual(self.repo.get_settings(), {})

    def test_put_then_get(self):
        stored = self.repo.put_settings(False, True)
        self.assertEqual(stored, {"welcomeScreen": False, "contactUsButton": True})
        self.assertEqual(
            self.repo.get_settings(), {"welcomeScreen": False, "contactUsButton": True}
        )

    def test_first_put_applies_defaults(self):
        stored = self.repo.put_settings(None, False)
        self.assertEqual(stored, {"welcomeScreen": True, "contactUsButton": False})

    def test_later_put_overwrites_both_fields(self):
        self.repo.put_settings(False, False)
        stored = self.repo.put_settings(True, None)
        self.assertEqual(stored, {"welcomeScreen": True, "contactUsButton": None})

    def test_single_document(self):
        self.repo.put_settings(False, False)
        self.repo.put_settings(True, True)
        with self.repo.Session() as session:
            self.assertEqual(session.query(AppSettingsRow).count(), 1)
            self.assertIsNotNone(session.get(AppSettingsRow, SINGLETON_ID))

    def test_second_settings_row_is_refused(self):
        self.repo.put_settings(False, False)
        with self.repo.Session() as session:
            session.add(AppSettingsRow(id=SINGLETON_ID, welcome_screen=True))
            with self.assertRaises(IntegrityError):
                session.commit()
        self.assertEqual(
            self.repo.get_settings(), {"welcomeScreen": False, "contactUsButton": False}
        )


class InMemorySettingsRepositoryTests(unittest.TestCase):
    def test_matches_sql_semantics(self):
        repo = InMemorySettingsRepository()
        self.assertEqual(repo.get_settings(), {})
        self.assertEqual(
            repo.put_settings(None, None),
            {"welcomeScreen": True, "contactUsButton": True},
        )
        self.assertEqual(
            repo.put_settings(False, None),
            {"welcomeScreen": False, "contactUsButton": None},
        )


if __name__ == "__main__":
    unittest.main()
