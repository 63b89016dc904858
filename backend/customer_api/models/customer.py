"""
Customer API — Customer SQLAlchemy Model
=========================================

What:  ORM model representing the `customers` table.
Why:   Maps Python objects to database rows for type-safe database operations.
Who:   Used by CustomerService for CRUD operations and by create_schema() at startup.

Table Design:
    - id: caller-supplied string key (a UUID string is generated when omitted)
    - name / email / phone: free-form contact fields, all nullable
    No timestamps or status columns: records are replaced in place and
    deleted outright, with no history kept.
"""

from typing import Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from customer_api.database import Base

# Columns overwritten by a full-replace update (everything except the key)
REPLACEABLE_FIELDS = ("name", "email", "phone")


class Customer(Base):
    """A single customer record keyed by a string identifier."""

    __tablename__ = "customers"

    # Uniqueness is enforced by the primary key constraint only
    id: Mapped[str] = mapped_column(
        String(64),
        primary_key=True,
        comment="Customer identifier, assigned by the caller or generated on create",
    )

    name: Mapped[Optional[str]] = mapped_column(String(200), nullable=True, default=None)

    email: Mapped[Optional[str]] = mapped_column(String(320), nullable=True, default=None)

    phone: Mapped[Optional[str]] = mapped_column(String(50), nullable=True, default=None)

    def __repr__(self) -> str:
        return f"<Customer(id='{self.id}', name='{self.name}')>"
