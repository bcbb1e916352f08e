"""
Allow-all policy - no access checks.
"""

from app.models.theatre import Theatre
from app.services.interfaces.access_policy import Principal, ShowAccessPolicy


class AllowAllPolicy(ShowAccessPolicy):
    """
    Every principal may manage every show.

    Use when:
    - Authorization is enforced in front of the API (gateway, proxy)
    - Local development and tests
    """

    def authorize(self, principal: Principal, theatre: Theatre, action: str) -> None:
        return None
