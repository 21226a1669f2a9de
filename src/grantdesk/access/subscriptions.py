"""Granting subscription tiers."""

import logging

from grantdesk.accounts.models import SubscriptionTier, User

logger = logging.getLogger(__name__)


def add_subscription(
    user: User, product: str, tier: SubscriptionTier
) -> list[SubscriptionTier]:
    """Grant ``tier`` on ``product`` unless the user already holds it.

    Mutates the user's grant map in place and returns a copy of the
    product's tier list after the change.
    """
    tiers = user.subscriptions.get(product)
    if tiers is None:
        user.subscriptions[product] = [tier]
        logger.info("Created %s subscription on %s for user %s", tier.value, product, user.id)
    elif tier in tiers:
        logger.info("User %s already holds %s on %s", user.id, tier.value, product)
    else:
        tiers.append(tier)
        logger.info("Added %s subscription on %s for user %s", tier.value, product, user.id)
    return list(user.subscriptions[product])
