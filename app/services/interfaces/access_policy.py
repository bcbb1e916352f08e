"""
Show access policy interface.
Decides whether the acting principal may manage shows at a theatre.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from app.models.theatre import Theatre


@dataclass(frozen=True)
class Principal:
    """
    Identity of whoever is calling the service.

    partner_id is set for partner staff and None for platform operators.
    This is a context value passed through the services, not a credential.
    """

    name: str = "anonymous"
    partner_id: Optional[int] = None


class ShowAccessPolicy(ABC):
    """
    Interface for show access policies.

    Implementations:
    - AllowAllPolicy: no restriction
    - PartnerOwnershipPolicy: partners may only touch their own theatres
    """

    @abstractmethod
    def authorize(self, principal: Principal, theatre: Theatre, action: str) -> None:
        """
        Raise AccessDeniedError if principal may not perform action.

        Args:
            principal: Who is acting
            theatre: Theatre the show belongs (or will belong) to
            action: create, update or delete
        """
        pass
