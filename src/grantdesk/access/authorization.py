"""Authorization lookups over a user's grant maps.

The module-level functions answer the raw questions (which tiers, does the
user hold one of these tiers, does any role carry this permission). The
authorizer classes wrap them behind one interface so handlers can stay
agnostic of whether a product is tier-based or role-based.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Iterable, Optional

from grantdesk.accounts.models import Permission, SubscriptionTier, User
from grantdesk.access.products import AuthorizationKind


class ContentAccess(str, Enum):
    """How much of a product's content a user may see."""

    NONE = "none"
    BASIC = "basic"
    FULL = "full"


def subscriptions_for(user: User, product: str) -> list[SubscriptionTier]:
    """Return a copy of the user's tiers for a product, or an empty list."""
    return list(user.subscriptions.get(product, []))


def has_subscription(
    user: User, candidates: Iterable[SubscriptionTier], product: str
) -> bool:
    """True if the user holds any of ``candidates`` for the product."""
    tiers = user.subscriptions.get(product)
    if not tiers:
        return False
    wanted = set(candidates)
    return any(tier in wanted for tier in tiers)


def has_permission(user: User, permission: Permission, product: str) -> bool:
    """True if any role the user has on the product includes ``permission``."""
    roles = user.roles.get(product)
    if not roles:
        return False
    return any(permission in permissions for permissions in roles.values())


class Authorizer(ABC):
    kind: AuthorizationKind

    @abstractmethod
    def grants(self, user: User, product: str) -> Optional[list[str]]:
        """Display names of the user's grants, or None without an entry."""

    @abstractmethod
    def content_access(self, user: User, product: str) -> ContentAccess:
        ...


class TierAuthorizer(Authorizer):
    kind = AuthorizationKind.TIER

    def grants(self, user: User, product: str) -> Optional[list[str]]:
        if product not in user.subscriptions:
            return None
        return [tier.value for tier in subscriptions_for(user, product)]

    def content_access(self, user: User, product: str) -> ContentAccess:
        if has_subscription(user, [SubscriptionTier.PREMIUM], product):
            return ContentAccess.FULL
        if has_subscription(user, [SubscriptionTier.BASIC], product):
            return ContentAccess.BASIC
        return ContentAccess.NONE


class RoleAuthorizer(Authorizer):
    kind = AuthorizationKind.ROLE

    def grants(self, user: User, product: str) -> Optional[list[str]]:
        roles = user.roles.get(product)
        if roles is None:
            return None
        # Roles may share permissions; list each once, in first-seen order.
        names: list[str] = []
        for permissions in roles.values():
            for permission in permissions:
                if permission.value not in names:
                    names.append(permission.value)
        return names

    def content_access(self, user: User, product: str) -> ContentAccess:
        if has_permission(user, Permission.WATCH_CONTENT, product):
            return ContentAccess.FULL
        return ContentAccess.NONE


_AUTHORIZERS: dict[AuthorizationKind, Authorizer] = {
    AuthorizationKind.TIER: TierAuthorizer(),
    AuthorizationKind.ROLE: RoleAuthorizer(),
}


def authorizer_for(kind: AuthorizationKind) -> Authorizer:
    return _AUTHORIZERS[kind]
