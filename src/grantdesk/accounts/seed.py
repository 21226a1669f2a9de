"""Seed users the server starts with.

Each call builds new objects, so repositories created from separate calls
never share grant lists.
"""

from grantdesk.accounts.models import Permission, Role, SubscriptionTier, User


def seed_users() -> list[User]:
    return [
        User(
            id="1",
            name="Danilo Bandeira",
            subscriptions={
                "Product1": [SubscriptionTier.BASIC],
            },
            roles={
                "Backoffice": {
                    Role.USER: [Permission.WATCH_CONTENT],
                },
            },
        ),
        User(
            id="2",
            name="Ana Banana",
            subscriptions={
                "Product1": [SubscriptionTier.PREMIUM],
                "Product2": [SubscriptionTier.PREMIUM],
            },
            roles={
                "Backoffice": {
                    Role.ADMIN: [
                        Permission.CREATE_USER,
                        Permission.UPDATE_USER,
                        Permission.DELETE_USER,
                        Permission.GIVE_PERMISSION,
                    ],
                    Role.USER: [Permission.WATCH_CONTENT],
                },
            },
        ),
    ]
