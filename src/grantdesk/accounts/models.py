"""User records and the enumerations their grant maps are built from."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional


class SubscriptionTier(str, Enum):
    """Subscription levels, lowest first."""

    BASIC = "Basic"
    PREMIUM = "Premium"


class Role(str, Enum):
    ADMIN = "Admin"
    USER = "User"


class Permission(str, Enum):
    CREATE_USER = "CreateUser"
    UPDATE_USER = "UpdateUser"
    DELETE_USER = "DeleteUser"
    GIVE_PERMISSION = "GivePermission"
    WATCH_CONTENT = "WatchContent"


@dataclass
class User:
    """A user and their per-product grants.

    ``subscriptions`` holds tier grants (product -> tiers) and ``roles``
    holds role grants (product -> role -> permissions). Which map applies
    to a product is decided by the product's configuration.
    """

    id: str
    name: str
    deactivated_at: Optional[datetime] = None
    subscriptions: dict[str, list[SubscriptionTier]] = field(default_factory=dict)
    roles: dict[str, dict[Role, list[Permission]]] = field(default_factory=dict)

    @property
    def is_active(self) -> bool:
        return self.deactivated_at is None

    def product_names(self) -> list[str]:
        """Sorted names of every product the user holds any grant for."""
        return sorted(set(self.subscriptions) | set(self.roles))
