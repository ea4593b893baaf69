"""Protocols implemented by the Bloom filter components."""

from .filter import MembershipFilter
from .hashing import HashFamily

__all__ = ["MembershipFilter", "HashFamily"]
