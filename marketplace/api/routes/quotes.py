"""Quote request pipeline endpoints."""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Query, status

from marketplace.api.dependencies import QuotePipelineDep
from marketplace.api.schemas.quote import (
    CustomerQuoteRequestResponse,
    CustomerQuoteRequestsListResponse,
    QuoteDecisionResponse,
    QuoteRequestCreateRequest,
    QuoteRequestEnvelope,
    QuoteRequestResponse,
    QuoteRequestsListResponse,
    QuoteResponse,
    RespondToQuoteRequest,
    ReviewQuoteRequestRequest,
    SubmitQuoteRequest,
)
from marketplace.application.use_cases import quotes
from marketplace.domain.value_objects.quote_status import QuoteRequestStatus

router = APIRouter(tags=["quotes"])


@router.post(
    "/quote-requests",
    response_model=QuoteRequestEnvelope,
    status_code=status.HTTP_201_CREATED,
)
async def create_quote_request(
    request_data: QuoteRequestCreateRequest, pipeline: QuotePipelineDep
):
    """Customer asks a tradesperson for a quote; an admin screens it first."""
    quote_request = await pipeline.create_request(
        quotes.CreateQuoteRequestRequest(**request_data.model_dump())
    )
    return QuoteRequestEnvelope(
        quote_request=QuoteRequestResponse.model_validate(quote_request)
    )


@router.post("/admin/approve-quote-request", response_model=QuoteRequestEnvelope)
async def review_quote_request(
    review: ReviewQuoteRequestRequest, pipeline: QuotePipelineDep
):
    quote_request = await pipeline.review_request(review.quote_request_id, review.action)
    return QuoteRequestEnvelope(
        quote_request=QuoteRequestResponse.model_validate(quote_request)
    )


@router.get("/tradesperson/quote-requests", response_model=QuoteRequestsListResponse)
async def tradesperson_quote_requests(
    pipeline: QuotePipelineDep,
    tradesperson_id: UUID = Query(..., alias="tradespersonId"),
    request_status: Optional[QuoteRequestStatus] = Query(None, alias="status"),
):
    """Requests an admin has let through to the tradesperson."""
    requests = await pipeline.list_for_tradesperson(tradesperson_id, request_status)
    return QuoteRequestsListResponse(
        quote_requests=[QuoteRequestResponse.model_validate(r) for r in requests]
    )


@router.post(
    "/tradesperson/submit-quote",
    response_model=QuoteDecisionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def submit_quote(quote_data: SubmitQuoteRequest, pipeline: QuotePipelineDep):
    result = await pipeline.submit_quote(
        quotes.SubmitQuoteRequest(**quote_data.model_dump())
    )
    return QuoteDecisionResponse(
        quote=QuoteResponse.model_validate(result.quote),
        quote_request=QuoteRequestResponse.model_validate(result.quote_request),
    )


@router.get("/client/quote-requests", response_model=CustomerQuoteRequestsListResponse)
async def customer_quote_requests(pipeline: QuotePipelineDep, email: str = Query(...)):
    listings = await pipeline.list_for_customer(email)
    return CustomerQuoteRequestsListResponse(
        quote_requests=[
            CustomerQuoteRequestResponse(
                **QuoteRequestResponse.model_validate(listing.quote_request).model_dump(),
                quote=(
                    QuoteResponse.model_validate(listing.quote) if listing.quote else None
                ),
            )
            for listing in listings
        ]
    )


@router.post("/client/approve-quote", response_model=QuoteDecisionResponse)
async def respond_to_quote(decision: RespondToQuoteRequest, pipeline: QuotePipelineDep):
    """Customer accepts or declines the price. Accepting enables chat."""
    result = await pipeline.respond_to_quote(decision.quote_id, decision.action)
    return QuoteDecisionResponse(
        quote=QuoteResponse.model_validate(result.quote),
        quote_request=QuoteRequestResponse.model_validate(result.quote_request),
    )
