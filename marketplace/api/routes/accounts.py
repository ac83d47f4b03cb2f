"""Client and tradesperson profile endpoints."""

from fastapi import APIRouter, status

from marketplace.api.dependencies import RegisterClientDep, RegisterTradespersonDep
from marketplace.api.schemas.user import (
    ClientCreateRequest,
    ClientEnvelope,
    ClientResponse,
    TradespersonCreateRequest,
    TradespersonEnvelope,
    TradespersonResponse,
)
from marketplace.application.use_cases.accounts import (
    RegisterClientRequest,
    RegisterTradespersonRequest,
)

router = APIRouter(tags=["accounts"])


@router.post("/clients", response_model=ClientEnvelope, status_code=status.HTTP_201_CREATED)
async def create_client(client_data: ClientCreateRequest, use_case: RegisterClientDep):
    client = await use_case.execute(RegisterClientRequest(**client_data.model_dump()))
    return ClientEnvelope(client=ClientResponse.model_validate(client))


@router.post(
    "/tradespeople",
    response_model=TradespersonEnvelope,
    status_code=status.HTTP_201_CREATED,
)
async def create_tradesperson(
    tradesperson_data: TradespersonCreateRequest, use_case: RegisterTradespersonDep
):
    """Create a tradesperson profile. Applying to jobs needs admin verification."""
    tradesperson = await use_case.execute(
        RegisterTradespersonRequest(**tradesperson_data.model_dump())
    )
    return TradespersonEnvelope(
        tradesperson=TradespersonResponse.model_validate(tradesperson)
    )
