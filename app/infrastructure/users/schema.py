"""SQLAlchemy Core table definitions for the user store.

Email uniqueness is also enforced here as a backstop for writers
that race past the application-level lookup.
"""

from sqlalchemy import Column, DateTime, MetaData, String, Table, Text

metadata = MetaData()

users = Table(
    "users",
    metadata,
    Column("id", String(36), primary_key=True),  # lower-case UUID
    Column("name", Text, nullable=False),
    Column("email", String(320), nullable=False, unique=True),
    Column("password", Text, nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
)
