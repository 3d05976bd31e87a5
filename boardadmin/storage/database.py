"""SQLite database storage layer."""

from datetime import datetime
from pathlib import Path

from sqlalchemy import Column, DateTime, String, Text, create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker


class Base(DeclarativeBase):
    """SQLAlchemy declarative base."""
    pass


class StoredValueRecord(Base):
    """Durable client-side value stored under a fixed key."""

    __tablename__ = "client_storage"

    key = Column(String(64), primary_key=True)
    value = Column(Text, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class Database:
    """Database manager for boardadmin client storage."""

    def __init__(self, db_path: str | Path = "boardadmin.db"):
        self.db_path = db_path
        url = "sqlite://" if str(db_path) == ":memory:" else f"sqlite:///{Path(db_path)}"
        self.engine = create_engine(url)
        self.SessionLocal = sessionmaker(bind=self.engine)

    def create_tables(self):
        """Create all database tables."""
        Base.metadata.create_all(self.engine)

    def get_session(self) -> Session:
        """Get a new database session."""
        return self.SessionLocal()

    def get_value(self, key: str) -> str | None:
        """Read a stored value, or None when the key is absent."""
        with self.get_session() as session:
            record = session.get(StoredValueRecord, key)
            return record.value if record else None

    def set_value(self, key: str, value: str):
        """Insert or replace a stored value."""
        with self.get_session() as session:
            record = session.get(StoredValueRecord, key)
            if record:
                record.value = value
            else:
                session.add(StoredValueRecord(key=key, value=value))
            session.commit()

    def delete_values(self, keys: list[str]):
        """Remove several keys in one transaction."""
        with self.get_session() as session:
            session.query(StoredValueRecord).filter(
                StoredValueRecord.key.in_(keys)
            ).delete(synchronize_session=False)
            session.commit()

    def all_values(self) -> dict[str, str]:
        """Return every stored key/value pair."""
        with self.get_session() as session:
            return {r.key: r.value for r in session.query(StoredValueRecord).all()}
