"""Grantdesk: product subscription and permission pages."""

from grantdesk.accounts.models import Permission, Role, SubscriptionTier, User
from grantdesk.accounts.repository import InMemoryUserRepository, UserRepository
from grantdesk.access.authorization import has_permission, has_subscription, subscriptions_for
from grantdesk.access.subscriptions import add_subscription

__all__ = [
    "Permission",
    "Role",
    "SubscriptionTier",
    "User",
    "InMemoryUserRepository",
    "UserRepository",
    "add_subscription",
    "has_permission",
    "has_subscription",
    "subscriptions_for",
]
__version__ = "0.1.0"
