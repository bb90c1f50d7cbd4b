"""Mapper functions to convert between domain models and SQLAlchemy models."""

from entrybook.domain import entities as domain
from entrybook.database.models import Entry as ORMEntry


def entry_to_domain(orm_entry: ORMEntry) -> domain.Entry:
    """Convert SQLAlchemy Entry model to domain Entry entity."""
    return domain.Entry(
        id=orm_entry.id,
        manual_date=orm_entry.manual_date,
        customer_name=orm_entry.customer_name,
        mobile_number=orm_entry.mobile_number,
        amount_rs=orm_entry.amount_rs,
        created_at=orm_entry.created_at,
        owner=orm_entry.owner,
    )
