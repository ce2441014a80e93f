"""
Domain entities for the users bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class User:
    """Snapshot of a stored user record.

    The persistence layer owns the record; the domain only ever sees
    immutable copies of it. `password` is stored as given.
    """

    id: str
    name: str
    email: str
    password: str
    created_at: datetime
    updated_at: datetime
