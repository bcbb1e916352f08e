"""
Partner ownership policy.

A partner's staff may only create, update or delete shows at theatres that
partner owns. Principals without a partner id are platform operators and
are not restricted.
"""

from app.core.exceptions import AccessDeniedError
from app.core.logging import get_logger
from app.models.theatre import Theatre
from app.services.interfaces.access_policy import Principal, ShowAccessPolicy

logger = get_logger(__name__)


class PartnerOwnershipPolicy(ShowAccessPolicy):

    def authorize(self, principal: Principal, theatre: Theatre, action: str) -> None:
        if principal.partner_id is None:
            return

        if principal.partner_id != theatre.partner_id:
            logger.warning(
                "show_access_denied",
                action=action,
                actor=principal.name,
                partner_id=principal.partner_id,
                theatre_id=theatre.id,
                owner_partner_id=theatre.partner_id,
            )
            raise AccessDeniedError(
                f"Partner {principal.partner_id} is not allowed to {action} shows at theatre {theatre.id}"
            )
