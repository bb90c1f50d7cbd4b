"""SQLAlchemy models for entrybook database."""

from sqlalchemy import BigInteger, Column, Integer, String, create_engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session

Base = declarative_base()


class Entry(Base):
    """Customer entry model."""

    __tablename__ = "entries"

    id = Column(String, primary_key=True)
    manual_date = Column(String, nullable=False)
    customer_name = Column(String, nullable=False)
    mobile_number = Column(String, nullable=False)
    amount_rs = Column(Integer, nullable=False)
    # Nanoseconds since the epoch, assigned by the store
    created_at = Column(BigInteger, nullable=False, index=True)
    owner = Column(String, nullable=False, index=True)


class RoleAssignment(Base):
    """Role granted to a caller identity."""

    __tablename__ = "role_assignments"

    principal = Column(String, primary_key=True)
    role = Column(String, nullable=False)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
