"""
Client domain model.
Represents a client/customer tracked on the dashboard.
"""

from dataclasses import dataclass, fields
from datetime import date
from typing import Optional
from enum import Enum

from clientdesk.domain.models.base import BaseEntity


DEFAULT_CURRENCY = "USD"


class ClientStatus(str, Enum):
    """Client status."""
    ACTIVE = "active"
    NON_ACTIVE = "non_active"


@dataclass(kw_only=True)
class Client(BaseEntity):
    """
    Client entity.
    Email and phone are unique among non-archived clients; the data store
    enforces this and reports violations as duplicate errors.
    """

    name: str
    email: str
    phone: str
    website_url: Optional[str] = None
    status: ClientStatus = ClientStatus.ACTIVE
    notes: Optional[str] = None


@dataclass(kw_only=True)
class ClientWithStats(Client):
    """
    A client together with statistics derived from its non-archived projects.
    Never persisted; rebuilt on every read.
    """

    projects_count: int = 0
    total_budget: float = 0
    primary_currency: str = DEFAULT_CURRENCY
    earliest_start: Optional[date] = None
    latest_end: Optional[date] = None

    @classmethod
    def from_client(cls, client: Client, **stats) -> "ClientWithStats":
        """Copy every client field and attach the given statistics."""
        values = {f.name: getattr(client, f.name) for f in fields(Client)}
        values.update(stats)
        return cls(**values)
