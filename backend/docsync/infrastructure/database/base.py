"""SQLAlchemy ORM bases and model registries."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for the local offline store models."""

    pass


class CentralBase(DeclarativeBase):
    """Base class for the central ingest database models.

    Kept on its own metadata so the device store and the central store can
    live in different databases.
    """

    pass
