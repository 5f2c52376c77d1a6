from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
import logging

from investours.schemas.request_schema import TutorRequest, VettingIntentRequest
from investours.schemas.response_schema import TutorResponse, ErrorResponse, VettingIntentResponse
from investours.engines.gateway_client import GatewayClient, GatewayError, GatewayRateLimitError
from investours.engines.prompts import tutor_messages
from investours.core.vetting_intent import is_vetting_query, VETTING_ROUTE
from investours.services.metrics_service import MetricsService
from investours.middleware.observability import get_correlation_id
from investours.middleware.rate_limit import limiter, RATE_LIMIT
from investours.api.dependencies import get_gateway

router = APIRouter(tags=["financial-tutor"])
logger = logging.getLogger("FinancialTutorAPI")

ENDPOINT = "/financial-tutor"
EMPTY_REPLY = "I apologize, but I couldn't generate a response."
ERROR_RESPONSES = {code: {"model": ErrorResponse} for code in (400, 402, 429, 500)}


@router.post(ENDPOINT, response_model=TutorResponse, responses=ERROR_RESPONSES)
@limiter.limit(RATE_LIMIT)
def financial_tutor(request: Request, payload: TutorRequest, gateway: GatewayClient = Depends(get_gateway)):
    correlation_id = get_correlation_id(request)
    history = [turn.model_dump() for turn in payload.messages]
    logger.info(f"[{correlation_id}] Calling AI Gateway with messages: {len(history)}")

    try:
        content = gateway.complete(tutor_messages(history))
    except GatewayRateLimitError:
        MetricsService.record_request(ENDPOINT, 429)
        return JSONResponse(status_code=429, content={"error": "Rate limit exceeded. Please try again in a moment."})
    except GatewayError as e:
        MetricsService.record_request(ENDPOINT, e.status_code)
        return JSONResponse(status_code=e.status_code, content={"error": e.message})

    logger.info(f"[{correlation_id}] Successfully generated response")
    MetricsService.record_request(ENDPOINT, 200)
    return TutorResponse(response=content if isinstance(content, str) and content else EMPTY_REPLY)


@router.post("/vetting-intent", response_model=VettingIntentResponse)
def vetting_intent(payload: VettingIntentRequest):
    detected = is_vetting_query(payload.text)
    return VettingIntentResponse(is_vetting_query=detected, suggested_route=VETTING_ROUTE if detected else None)
