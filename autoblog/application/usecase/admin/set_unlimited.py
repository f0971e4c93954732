"""Set unlimited use case."""

import logfire
from pydantic import BaseModel

from autoblog.application.usecase.base import BaseUseCase
from autoblog.domain.service import CreditLedger
from autoblog.domain.value import SessionContext, UserId

from .access import require_admin


class SetUnlimitedRequest(BaseModel):
    """Set unlimited request."""

    session: SessionContext
    user_id: str
    unlimited: bool


class SetUnlimitedResponse(BaseModel):
    """Set unlimited response."""

    user_id: str
    unlimited: bool


class SetUnlimitedUseCase(BaseUseCase):
    """Use case for toggling unlimited mode."""

    def __init__(self, credit_ledger: CreditLedger) -> None:
        self.credit_ledger = credit_ledger

    async def execute(self, request: SetUnlimitedRequest) -> SetUnlimitedResponse:
        require_admin(request.session, "set_unlimited")

        flag = await self.credit_ledger.set_unlimited(
            UserId(request.user_id), request.unlimited
        )
        logfire.info(
            "Admin changed unlimited mode",
            admin=request.session.email,
            user_id=request.user_id,
            unlimited=flag,
        )
        return SetUnlimitedResponse(user_id=request.user_id, unlimited=flag)
