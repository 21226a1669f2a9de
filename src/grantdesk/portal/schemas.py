"""Pydantic schemas for portal request bodies."""

from pydantic import BaseModel

from grantdesk.accounts.models import SubscriptionTier


class SubscriptionGrantRequest(BaseModel):
    type: SubscriptionTier
