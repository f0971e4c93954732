"""Grant credits use case."""

import logfire
from pydantic import BaseModel, Field

from autoblog.application.usecase.base import BaseUseCase
from autoblog.domain.service import CreditLedger
from autoblog.domain.value import SessionContext, UserId

from .access import require_admin


class GrantCreditsRequest(BaseModel):
    """Grant credits request."""

    session: SessionContext
    user_id: str
    amount: int = Field(gt=0, le=10000)


class GrantCreditsResponse(BaseModel):
    """Grant credits response."""

    user_id: str
    credit_balance: int


class GrantCreditsUseCase(BaseUseCase):
    """Use case for an admin top-up."""

    def __init__(self, credit_ledger: CreditLedger) -> None:
        self.credit_ledger = credit_ledger

    async def execute(self, request: GrantCreditsRequest) -> GrantCreditsResponse:
        """Add credits to a profile.

        Raises:
            NotAuthorizedError: If the caller is not an admin
            NotFoundError: If the profile does not exist
        """
        require_admin(request.session, "grant_credits")

        balance = await self.credit_ledger.grant(UserId(request.user_id), request.amount)
        logfire.info(
            "Admin granted credits",
            admin=request.session.email,
            user_id=request.user_id,
            amount=request.amount,
        )
        return GrantCreditsResponse(user_id=request.user_id, credit_balance=balance)
