"""
Irenet Backend — ORM Models
===========================

Importing this package registers every table with `Base.metadata`, which
`create_tables()` and Alembic autogeneration both read.

Tables:
    users ──< organizations ──< requests ──┐
      │                                    ├──< matches
      └──────────< donations ──────────────┘
"""

from irenet.models.user import User
from irenet.models.organization import Organization
from irenet.models.donation import Donation, DonationStatus
from irenet.models.item_request import ItemRequest, RequestStatus
from irenet.models.match import Match

__all__ = [
    "User",
    "Organization",
    "Donation",
    "DonationStatus",
    "ItemRequest",
    "RequestStatus",
    "Match",
]
