"""Pydantic payloads exchanged over the FridgeShare API."""

from fridgeshare.models.claims import Claim
from fridgeshare.models.donations import Donation
from fridgeshare.models.groups import FriendGroup, GroupMember, GroupMessage
from fridgeshare.models.items import Category, ClaimSummary, FoodItem
from fridgeshare.models.users import PublicUser

__all__ = [
    "Category",
    "Claim",
    "ClaimSummary",
    "Donation",
    "FoodItem",
    "FriendGroup",
    "GroupMember",
    "GroupMessage",
    "PublicUser",
]
