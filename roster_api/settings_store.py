"""
Storage for the application settings singleton (SQLAlchemy or in-memory).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

from sqlalchemy import Boolean, Column, Integer, create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from roster_api.errors import StoreError

DEFAULT_WELCOME_SCREEN = True
DEFAULT_CONTACT_US_BUTTON = True
SINGLETON_ID = 1


class SettingsRepository(Protocol):
    """Interface for the settings document."""

    def get_settings(self) -> dict:
        ...

    def put_settings(
        self, welcome_screen: Optional[bool], contact_us_button: Optional[bool]
    ) -> dict:
        ...


def _as_document(welcome_screen, contact_us_button) -> dict:
    return {"welcomeScreen": welcome_screen, "contactUsButton": contact_us_button}


@dataclass
class InMemorySettingsRepository:
    """Simple in-memory settings document for development and tests."""

    document: Optional[dict] = None

    def get_settings(self) -> dict:
        return dict(self.document) if self.document else {}

    def put_settings(
        self, welcome_screen: Optional[bool], contact_us_button: Optional[bool]
    ) -> dict:
        if self.document is None:
            self.document = _as_document(
                DEFAULT_WELCOME_SCREEN if welcome_screen is None else welcome_screen,
                DEFAULT_CONTACT_US_BUTTON
                if contact_us_button is None
                else contact_us_button,
            )
        else:
            self.document["welcomeScreen"] = welcome_screen
            self.document["contactUsButton"] = contact_us_button
        return dict(self.document)


Base = declarative_base()


class AppSettingsRow(Base):
    __tablename__ = "app_settings"

    id = Column(Integer, primary_key=True, autoincrement=False)
    welcome_screen = Column(Boolean, nullable=True, default=DEFAULT_WELCOME_SCREEN)
    contact_us_button = Column(
        Boolean, nullable=True, default=DEFAULT_CONTACT_US_BUTTON
    )


class SqlSettingsRepository:
    """
    SQLAlchemy-backed implementation. Accepts any SQLAlchemy URL (e.g., Postgres or SQLite for tests).

    The table holds at most one row, always stored under SINGLETON_ID.
    """

    def __init__(self, database_url: str):
        if not database_url:
            raise ValueError("DATABASE_URL is required for SqlSettingsRepository")
        self.engine = create_engine(
            database_url,
            future=True,
            pool_pre_ping=True,
            pool_recycle=1800,
        )
        self.Session = sessionmaker(
            bind=self.engine, class_=Session, expire_on_commit=False, future=True
        )
        Base.metadata.create_all(self.engine)

    def get_settings(self) -> dict:
        try:
            with self.Session() as session:
                row = session.get(AppSettingsRow, SINGLETON_ID)
                if not row:
                    return {}
                return _as_document(row.welcome_screen, row.contact_us_button)
        except SQLAlchemyError as exc:
            raise StoreError("Internal server error") from exc

    def put_settings(
        self, welcome_screen: Optional[bool], contact_us_button: Optional[bool]
    ) -> dict:
        try:
            with self.Session() as session:
                row = session.get(AppSettingsRow, SINGLETON_ID)
                if row is None:
                    # Column defaults fill in whatever the caller left out.
                    values = {"id": SINGLETON_ID}
                    if welcome_screen is not None:
                        values["welcome_screen"] = welcome_screen
                    if contact_us_button is not None:
                        values["contact_us_button"] = contact_us_button
                    row = AppSettingsRow(**values)
                    session.add(row)
                else:
                    row.welcome_screen = welcome_screen
                    row.contact_us_button = contact_us_button
                session.commit()
                session.refresh(row)
                return _as_document(row.welcome_screen, row.contact_us_button)
        except SQLAlchemyError as exc:
            raise StoreError("Internal server error") from exc
