"""
Access policy factory.
Configures which show access policy the services use.
"""

from typing import Optional

from app.core.config import get_settings
from app.services.interfaces.access_policy import ShowAccessPolicy
from app.services.interfaces.allow_all_policy import AllowAllPolicy
from app.services.ownership_policy import PartnerOwnershipPolicy


def build_access_policy(name: str) -> ShowAccessPolicy:
    """
    Build a policy by name.

    - allow_all: AllowAllPolicy (default)
    - partner_ownership: PartnerOwnershipPolicy
    """
    if name == "partner_ownership":
        return PartnerOwnershipPolicy()
    if name == "allow_all":
        return AllowAllPolicy()
    raise ValueError(f"Unknown SHOW_ACCESS_POLICY: {name!r}")


# Singleton instance
_policy: Optional[ShowAccessPolicy] = None


def get_access_policy() -> ShowAccessPolicy:
    """Get access policy singleton, selected by SHOW_ACCESS_POLICY."""
    global _policy
    if _policy is None:
        _policy = build_access_policy(get_settings().SHOW_ACCESS_POLICY)
    return _policy


def set_access_policy(policy: Optional[ShowAccessPolicy]) -> None:
    """Replace the active policy. None resets to the configured default."""
    global _policy
    _policy = policy
