"""Dependency injection singletons for Grantdesk."""

from grantdesk.accounts.repository import InMemoryUserRepository, UserRepository
from grantdesk.accounts.seed import seed_users
from grantdesk.access.products import ProductCatalog, default_catalog

_users: UserRepository | None = None
_catalog: ProductCatalog | None = None


def get_user_repository() -> UserRepository:
    global _users
    if _users is None:
        _users = InMemoryUserRepository(seed_users())
    return _users


def get_product_catalog() -> ProductCatalog:
    global _catalog
    if _catalog is None:
        _catalog = default_catalog()
    return _catalog


def reset_singletons() -> None:
    """Reset all singletons (for testing)."""
    global _users, _catalog
    _users = None
    _catalog = None
